"""``restify serve`` — run the MCP endpoint under uvicorn."""

from __future__ import annotations

from pathlib import Path

import click

from restify.cli_commands._output import configure_logging, console


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a settings YAML file.",
)
@click.option("--host", default=None, help="Bind address (overrides the settings file).")
@click.option("--port", type=int, default=None, help="Bind port (overrides the settings file).")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Logging level (overrides the settings file).",
)
def serve(config_path: Path | None, host: str | None, port: int | None, log_level: str | None) -> None:
    """Serve the built-in tools over HTTP."""
    import uvicorn

    from restify.config import ConfigError, ServerSettings, load_settings
    from restify.server import create_app
    from restify.tools.builtin import build_default_registry
    from restify.utils.telemetry import configure_telemetry

    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise SystemExit(1) from exc

    overrides = {
        key: value
        for key, value in {"host": host, "port": port, "log_level": log_level}.items()
        if value is not None
    }
    if overrides:
        settings = ServerSettings.model_validate({**settings.model_dump(), **overrides})

    configure_logging(settings.log_level)

    if settings.telemetry.enabled:
        configure_telemetry(
            service_name=settings.server_name,
            export_to_console=settings.telemetry.export_to_console,
            otlp_endpoint=settings.telemetry.otlp_endpoint,
        )

    app = create_app(build_default_registry(), settings)
    console.print(f"Serving MCP on http://{settings.host}:{settings.port}{settings.path}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
