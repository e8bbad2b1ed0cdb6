"""Main entry point for the ccbridge CLI."""

import typer
from pydantic import ValidationError

from ccbridge._version import __version__
from ccbridge.cli.helpers import get_rich_toolkit
from ccbridge.config.settings import BridgeConfig, LoggingSettings
from ccbridge.core.logging import get_logger, setup_logging
from ccbridge.services.pipeline import CredentialBridge


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        toolkit = get_rich_toolkit()
        toolkit.print(f"ccbridge {__version__}", tag="version")
        raise typer.Exit()


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Logger will be configured by setup_logging
logger = get_logger(__name__)


@app.command()
def update(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Write log lines as JSON instead of Rich console output.",
    ),
) -> None:
    """
    Updates GitHub credentials from local Claude credentials.

    Asks the Claude CLI to refresh its OAuth tokens, then copies them from
    ~/.claude/.credentials.json into credentials.json in the current directory.
    """
    try:
        logging_settings = LoggingSettings(
            level=log_level, format="json" if json_logs else "rich"
        )
    except ValidationError as e:
        raise typer.BadParameter(
            e.errors()[0]["msg"], param_hint="--log-level"
        ) from e

    setup_logging(
        json_logs=logging_settings.json_logs,
        log_level_name=logging_settings.level,
    )

    toolkit = get_rich_toolkit()
    toolkit.print("Starting credential update process...", tag="github")

    config = BridgeConfig()
    if not CredentialBridge(config).run():
        toolkit.print_line()
        toolkit.print("Credential update failed!", tag="error")
        raise typer.Exit(1)

    toolkit.print_line()
    toolkit.print("=== SUCCESS ===", tag="success")
    toolkit.print("GitHub credentials updated successfully!", tag="success")
    toolkit.print(f"Credentials saved to: {config.output_path}", tag="success")
    toolkit.print("===============", tag="success")


def main() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
