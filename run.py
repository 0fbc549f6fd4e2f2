#!/usr/bin/env python3
"""
Application Entry Script.

Main entry point for the notes service. All functionality is accessible
through command-line options.

Usage:
    python run.py --help
    python run.py --action server --verbose
    python run.py --action config
    python run.py --action info
"""

import subprocess
import sys
from pathlib import Path

import click

# Ensure project root is in path for absolute imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from notekeeper.core.logging import get_logger, setup_logging


def validate_project_root() -> Path:
    """Validate that we're running from the project root."""
    if not (PROJECT_ROOT / ".project_root").exists():
        click.echo(
            click.style("Error: .project_root not found. Run from project root.", fg="red"),
            err=True,
        )
        sys.exit(1)
    return PROJECT_ROOT


@click.command()
@click.option(
    "--action",
    type=click.Choice(["server", "config", "info"]),
    default="info",
    help="Action to perform.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (INFO level logging).",
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Enable debug output (DEBUG level logging).",
)
@click.option(
    "--host",
    default=None,
    help="Server host (for server action).",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Server port (for server action).",
)
@click.option(
    "--reload",
    is_flag=True,
    help="Enable auto-reload (for server action).",
)
def main(
    action: str,
    verbose: bool,
    debug: bool,
    host: str | None,
    port: int | None,
    reload: bool,
) -> None:
    """
    Notes Service Entry Point.

    Run the API server, view configuration, or show information.

    Examples:

        # Start development server
        python run.py --action server --reload --verbose

        # View loaded configuration
        python run.py --action config
    """
    validate_project_root()

    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"

    setup_logging(level=log_level, format_type="console")
    logger = get_logger(__name__)

    logger.debug("Starting application", extra={"action": action, "log_level": log_level})

    if action == "server":
        run_server(logger, host, port, reload)
    elif action == "config":
        show_config(logger)
    elif action == "info":
        show_info(logger)


def run_server(logger, host: str | None, port: int | None, reload: bool) -> None:
    """Start the FastAPI server with uvicorn."""
    from notekeeper.core.config import get_server_address

    configured_host, configured_port = get_server_address()
    server_host = host or configured_host
    server_port = port or configured_port

    logger.info(
        "Starting server",
        extra={"host": server_host, "port": server_port, "reload": reload},
    )

    cmd = [
        sys.executable, "-m", "uvicorn",
        "notekeeper.main:app",
        "--host", server_host,
        "--port", str(server_port),
    ]

    if reload:
        cmd.append("--reload")

    click.echo(f"Notes API server running at http://{server_host}:{server_port}")
    click.echo("Available endpoints:")
    click.echo("  GET    /notes       - List all notes")
    click.echo("  GET    /notes/{id}  - Get single note")
    click.echo("  POST   /notes       - Create new note")
    click.echo("  PUT    /notes/{id}  - Update note")
    click.echo("  DELETE /notes/{id}  - Delete note")
    click.echo("Press Ctrl+C to stop\n")

    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except subprocess.CalledProcessError as e:
        logger.error("Server failed to start", extra={"exit_code": e.returncode})
        sys.exit(e.returncode)


def show_config(logger) -> None:
    """Display loaded configuration."""
    click.echo("Application Configuration:\n")

    try:
        from notekeeper.core.config import get_app_config, get_data_file_path

        app_config = get_app_config()
        sections = {
            "Application Settings": app_config.application,
            "Storage Settings": app_config.storage,
            "Logging Settings": app_config.logging,
            "Concurrency Settings": app_config.concurrency,
        }

        for title, section in sections.items():
            click.echo(f"{title} (from YAML):")
            click.echo("-" * 40)
            for key, value in section.model_dump().items():
                if isinstance(value, dict):
                    click.echo(f"  {key}:")
                    for k, v in value.items():
                        click.echo(f"    {k}: {v}")
                else:
                    click.echo(f"  {key}: {value}")
            click.echo()

        click.echo(f"Resolved data file: {get_data_file_path()}")
        logger.info("Configuration displayed successfully")

    except (FileNotFoundError, ValueError) as e:
        logger.error("Failed to load configuration", extra={"error": str(e)})
        click.echo(click.style(f"Error loading configuration: {e}", fg="red"))
        sys.exit(1)


def show_info(logger) -> None:
    """Display application information."""
    from notekeeper.core.config import get_app_config

    app_config = get_app_config()
    click.echo(app_config.application.name)
    click.echo("=" * 40)
    click.echo(f"Version: {app_config.application.version}")
    click.echo(f"Description: {app_config.application.description}")

    click.echo()
    click.echo("Available Actions:")
    click.echo("  --action server   Start the API server")
    click.echo("  --action config   Display configuration")
    click.echo("  --action info     Show this information")
    click.echo()
    click.echo("Logging Options:")
    click.echo("  --verbose, -v     Enable INFO level logging")
    click.echo("  --debug, -d       Enable DEBUG level logging")

    logger.debug("Info displayed")


if __name__ == "__main__":
    main()
