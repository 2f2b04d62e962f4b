"""CLI entry point for tmdb-proxy."""

import sys
from datetime import datetime

from rich.console import Console

from app import create_app
from core.config import config_file_path, load_config
from core.exceptions import ConfigurationError
from ui.console_logger import ConsoleLogger
from ui.dashboard import Dashboard
from ui.log_utils import clear_logs, mask, write_cli_log

console = Console()


def main():
    """Main CLI entry point."""
    try:
        config = load_config()
    except ConfigurationError as e:
        console.print(f"[red][ERROR][/red] {e}")
        sys.exit(1)

    headless = False

    # Handle CLI arguments
    if len(sys.argv) > 1:
        arg = sys.argv[1]

        if arg == "--config":
            _print_config(config)
            return

        if arg in ("--help", "-h"):
            _print_help()
            return

        if arg == "--headless":
            headless = True
        else:
            console.print(f"[red][ERROR][/red] Unknown argument: {arg}")
            _print_help()
            sys.exit(2)

    if not config.tmdb.token:
        console.print("[yellow]Warning:[/yellow] TMDB_TOKEN not set, requests are sent without a bearer token")

    clear_logs()
    dashboard = None
    if headless or config.is_production:
        logger = ConsoleLogger(verbose=not config.is_production)
    else:
        dashboard = Dashboard(config)
        logger = dashboard

    import uvicorn

    app = create_app(config, logger)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level="warning",
        timeout_keep_alive=config.limits.keep_alive_timeout,
        timeout_graceful_shutdown=config.limits.shutdown_timeout,
    )
    server = uvicorn.Server(uvicorn_config)

    if not config.is_production:
        console.print(f"Proxy server is running on http://localhost:{config.server.port}")
    if dashboard:
        dashboard.start()
    start_time = datetime.now()
    write_cli_log("STARTUP", "Proxy started", port=config.server.port, env=config.server.environment)
    try:
        server.run()
    finally:
        duration = datetime.now() - start_time
        write_cli_log("SHUTDOWN", "Proxy stopped", duration=str(duration))
        if dashboard:
            dashboard.stop()


def _print_config(config):
    """Print config location and effective settings."""
    console.print(f"[bold]Config:[/bold] {config_file_path()}")
    console.print(f"[bold]Environment:[/bold] {config.server.environment}")
    console.print(f"[bold]Listen:[/bold] {config.server.host}:{config.server.port}")
    console.print(f"[bold]Upstream:[/bold] {config.tmdb.base_url}")
    console.print(f"[bold]Prefix:[/bold] {config.forward.prefix}")
    console.print(f"[bold]Timeout:[/bold] {config.forward.timeout}s")
    token = mask(config.tmdb.token) if config.tmdb.token else "[dim]not set[/dim]"
    console.print(f"[bold]Token:[/bold] {token}")


def _print_help():
    """Print help message."""
    help_text = """
[bold cyan]TMDB Proxy[/bold cyan]

Forwards /tmdb/* requests to the TMDB v3 API with a bearer token.

[bold]Usage:[/bold]
    tmdb-proxy               Start with live dashboard
    tmdb-proxy --headless    Start with plain console logging
    tmdb-proxy --config      Show effective configuration
    tmdb-proxy --help        Show this help

[bold]Environment:[/bold]
    TMDB_TOKEN        Bearer token sent to TMDB
    PORT, HOST        Listen address (default 0.0.0.0:3000)
    APP_ENV           "production" disables debug logging and the dashboard
    UPSTREAM_TIMEOUT  Seconds to wait for TMDB (default 10)
"""
    console.print(help_text)


if __name__ == "__main__":
    main()
