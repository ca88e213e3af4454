"""
Rich terminal UI components for the KUMI CLI.

Styled messages, the section catalog table and line-based prompts used by
the wizard.
"""

from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from kumi.core.catalog import SectionCatalog

console = Console()
err_console = Console(stderr=True)


# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "subtitle": Style(color="bright_black"),
    "badge_premium": Style(color="yellow", bold=True),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
    "info": Style(color="cyan"),
}


def print_header(title: str, subtitle: str = "") -> None:
    """Print a styled header."""
    console.print()
    console.print(Text(title, style=STYLES["title"]))
    if subtitle:
        console.print(Text(subtitle, style=STYLES["subtitle"]))
    console.print()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(Text(f"⚠ {message}", style=STYLES["warning"]))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(Text(f"ℹ {message}", style=STYLES["info"]))


def print_catalog(catalog: SectionCatalog) -> None:
    """Display the available sections as a numbered table."""
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Num", style="cyan", width=4)
    table.add_column("Name", style="white")
    table.add_column("Id", style="bright_black")
    table.add_column("Badge", style=STYLES["badge_premium"])

    for i, section in enumerate(catalog.components, 1):
        table.add_row(
            f"{i}.",
            section.display_name,
            section.id,
            "Premium" if section.is_premium else "",
        )

    console.print(Text("Available sections:", style=STYLES["info"]))
    console.print(table)


def ask(message: str) -> str:
    """
    Read one line of input.

    EOFError and KeyboardInterrupt propagate so the caller can abort.
    """
    return console.input(Text(f"{message}: ", style=STYLES["info"])).strip()


def confirm(message: str, default: bool = False) -> bool:
    """Ask for confirmation with a y/N prompt."""
    suffix = " [Y/n]" if default else " [y/N]"
    prompt = Text(message + suffix + " ", style=STYLES["info"])

    try:
        response = console.input(prompt).strip().lower()

        if not response:
            return default

        return response in ("y", "yes", "s", "si", "sí")

    except (KeyboardInterrupt, EOFError):
        console.print()
        return False


class TerminalPrompter:
    """Wizard prompter backed by the rich console."""

    def ask(self, label: str) -> str:
        return ask(label)

    def confirm(self, label: str) -> bool:
        return confirm(label)

    def echo(self, message: str) -> None:
        console.print(Text(message))

    def warn(self, message: str) -> None:
        print_warning(message)

    def show_catalog(self, catalog: SectionCatalog) -> None:
        print_catalog(catalog)
