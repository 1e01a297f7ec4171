"""``restify call`` — run one ``tools/call`` through the in-process pipeline."""

from __future__ import annotations

import json
import uuid

import click

from restify.cli_commands._output import console


@click.command()
@click.argument("name")
@click.option("--args", "raw_args", default="{}", help="Tool arguments as a JSON object.")
@click.option("--stream", is_flag=True, help="Render with the chunked transport.")
def call(name: str, raw_args: str, stream: bool) -> None:
    """Call tool NAME and print the JSON-RPC response body."""
    from restify.protocol.dispatcher import MethodDispatcher
    from restify.protocol.envelope import EnvelopeHandler
    from restify.protocol.transport import TransportMode, render
    from restify.tools.builtin import build_default_registry

    try:
        arguments = json.loads(raw_args)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc}", param_hint="--args") from exc
    if not isinstance(arguments, dict):
        raise click.BadParameter("must be a JSON object", param_hint="--args")

    handler = EnvelopeHandler(MethodDispatcher(build_default_registry()))
    response = handler.handle(
        {
            "jsonrpc": "2.0",
            "id": str(uuid.uuid4()),
            "method": "tools/call",
            "params": {"name": name, "arguments": arguments},
        }
    )
    mode = TransportMode.CHUNKED if stream else TransportMode.PLAIN
    rendered = render(response, mode)

    console.print_json(rendered.body.decode("utf-8"))
    if response.error is not None:
        console.print(f"[red]Error {response.error.code}:[/red] {response.error.message}")
