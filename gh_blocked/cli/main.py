"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .check import check, resolve

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="gh-blocked",
    help="Check whether the GitHub issues your code waits on are still open",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="check", context_settings={"help_option_names": ["-h", "--help"]})(
    check
)
app.command(name="resolve", context_settings={"help_option_names": ["-h", "--help"]})(
    resolve
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from gh_blocked import __version__

    console.print(f"gh-blocked v{__version__}")


if __name__ == "__main__":
    app()
