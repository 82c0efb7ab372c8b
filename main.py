import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich import box

from config import settings
from items import Item
from users import User
from library import CatalogManager
from ui_helpers import (
    set_output_mode,
    print_item_list,
    print_user_list,
    print_outcome,
    print_stats_result,
)

APP_NAME = settings.app_name

console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(debug: bool = False) -> None:
    level = logging.DEBUG if (debug or settings.debug) else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)


# --- Typer CLI application ---
app = typer.Typer(help="Library catalog CLI")

@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Global CLI options. Without a subcommand the interactive menu starts."""
    if output:
        set_output_mode(output)
    _configure_logging(debug)
    if ctx.invoked_subcommand is None:
        run_menu(CatalogManager())

@app.command("menu")
def cli_menu():
    """Start the interactive library menu (catalog lives in memory for this session)."""
    run_menu(CatalogManager())

@app.command("version")
def cli_version():
    """Show the application name and version."""
    print(f"{settings.app_name} {settings.app_version}")


# --- Menu actions: each one collects input and calls one catalog operation ---
def add_book(lib: CatalogManager) -> None:
    item_id = IntPrompt.ask("Book ID", console=console)
    title = Prompt.ask("Title", console=console)
    author = Prompt.ask("Author", console=console)
    isbn = Prompt.ask("ISBN (optional)", default="", show_default=False, console=console)
    print_outcome(lib.add_item(Item.book(item_id, title, author, isbn or None)))

def add_magazine(lib: CatalogManager) -> None:
    item_id = IntPrompt.ask("Magazine ID", console=console)
    issue = IntPrompt.ask("Issue number", console=console)
    title = Prompt.ask("Title", console=console)
    print_outcome(lib.add_item(Item.magazine(item_id, title, issue)))

def add_patron(lib: CatalogManager) -> None:
    user_id = IntPrompt.ask("Patron ID", console=console)
    name = Prompt.ask("Name", console=console)
    print_outcome(lib.register_user(User.patron(user_id, name)))

def add_librarian(lib: CatalogManager) -> None:
    user_id = IntPrompt.ask("Librarian ID", console=console)
    name = Prompt.ask("Name", console=console)
    print_outcome(lib.register_user(User.librarian(user_id, name)))

def checkout(lib: CatalogManager) -> None:
    item_id = IntPrompt.ask("Item ID", console=console)
    user_id = IntPrompt.ask("User ID", console=console)
    print_outcome(lib.checkout_item(item_id, user_id))

def return_item(lib: CatalogManager) -> None:
    item_id = IntPrompt.ask("Item ID", console=console)
    print_outcome(lib.return_item(item_id))

def manage_users(lib: CatalogManager) -> None:
    """Librarian-only action; the catalog refuses it for other users."""
    user_id = IntPrompt.ask("Librarian ID", console=console)
    outcome = lib.manage_users(user_id)
    print_outcome(outcome)
    if outcome:
        print_user_list(lib)

def stats(lib: CatalogManager) -> None:
    print_stats_result(lib.get_statistics())


MENU_ITEMS = [
    ("1", "Add Book", "📖", add_book),
    ("2", "Add Magazine", "📰", add_magazine),
    ("3", "Add Patron", "🙋", add_patron),
    ("4", "Add Librarian", "👤", add_librarian),
    ("5", "List All Items", "📚", print_item_list),
    ("6", "List All Users", "👥", print_user_list),
    ("7", "Checkout Item", "📤", checkout),
    ("8", "Return Item", "📥", return_item),
    ("9", "Manage Users (librarian only)", "🔑", manage_users),
    ("10", "Show Statistics", "📊", stats),
]

def run_menu(lib: CatalogManager) -> None:
    """Simple interactive menu for the library catalog."""
    actions = {key: action for key, _, _, action in MENU_ITEMS}

    def render_menu() -> None:
        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label, icon, _ in MENU_ITEMS:
            table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")
        table.add_row("[reverse]0[/]", "🚪 Exit")

        panel = Panel(
            table,
            title=f"{APP_NAME}",
            border_style="cyan",
            box=box.HEAVY,
            padding=(1, 2),
        )
        console.print(panel)

    while True:
        render_menu()
        try:
            choice = Prompt.ask("Choice", choices=list(actions) + ["0"], console=console).strip()
            if choice == "0":
                break
            logger.debug(f"Menu choice {choice}")
            actions[choice](lib)
        except (EOFError, KeyboardInterrupt):
            # Input closed: leave the loop like an explicit exit
            print()
            break
        print()  # spacing between operations

    console.print("[green]Goodbye![/]")

if __name__ == "__main__":
    app()
