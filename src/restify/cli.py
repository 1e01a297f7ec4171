"""restify CLI entrypoint."""

from __future__ import annotations

import click

from restify import __version__


@click.group()
@click.version_option(version=__version__, prog_name="restify")
def main() -> None:
    """restify: MCP tools over JSON-RPC 2.0."""


# Register subcommands
from restify.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
