"""``restify tools`` — inspect the tools this server exposes."""

from __future__ import annotations

import click

from restify.cli_commands._output import console, print_json, print_tools_table


@click.group()
def tools() -> None:
    """Inspect registered tools."""


@tools.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print the raw tools/list result.")
def list_cmd(as_json: bool) -> None:
    """List the built-in tools with their input schemas."""
    from restify.protocol.dispatcher import MethodDispatcher
    from restify.tools.builtin import build_default_registry

    result = MethodDispatcher(build_default_registry()).list_tools()

    if as_json:
        print_json(result)
        return

    if not result["tools"]:
        console.print("[yellow]No tools registered.[/yellow]")
        return

    print_tools_table(result["tools"])
