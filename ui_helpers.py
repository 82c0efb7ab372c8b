import os
import json
from typing import Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from config import settings
from library import CatalogManager, Outcome

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_item_list(lib: CatalogManager) -> None:
    """Print the catalog items in the current output mode.
    - plain: one details line per item, or 'No items in library.'
    - json: JSON array of item objects
    - rich: Rich table
    """
    mode = get_output_mode()
    items = lib.items

    if not items:
        # Same message in every mode for the empty catalog
        print(lib.list_items()[0])
        return

    if mode == "json":
        print(json.dumps([item.to_dict() for item in items], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Library Items", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Kind", style="white")
        table.add_column("Title", style="white")
        table.add_column("Details", style="white")
        table.add_column("Status", style="white")
        for item in items:
            details = f"Issue {item.issue_number}" if item.issue_number is not None else (item.author or "")
            status_style = "red" if item.checked_out else "green"
            table.add_row(str(item.id), item.kind.value, escape(item.title), escape(details),
                          f"[{status_style}]{item.status}[/]")
        _console.print(table)
    else:
        for line in lib.list_items():
            print(line)

def print_user_list(lib: CatalogManager) -> None:
    """Print the registered users in the current output mode."""
    mode = get_output_mode()
    users = lib.users

    if not users:
        print(lib.list_users()[0])
        return

    if mode == "json":
        print(json.dumps([user.to_dict() for user in users], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="👥 Users", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Kind", style="white")
        table.add_column("Name", style="white")
        table.add_column("Details", style="white")
        for user in users:
            table.add_row(str(user.id), user.kind.value, escape(user.name), user.details())
        _console.print(table)
    else:
        for line in lib.list_users():
            print(line)

def print_outcome(outcome: Outcome) -> None:
    """Print an operation outcome.
    - plain: the message
    - json: the outcome object
    - rich: green or yellow message
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(outcome.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        style = "green" if outcome else "yellow"
        _console.print(f"[{style}]{escape(outcome.message)}[/]")
    else:
        print(outcome.message)

def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print catalog statistics in the current output mode."""
    mode = get_output_mode()

    total = stats.get("total_items", 0)
    checked_out = stats.get("checked_out", 0)
    available = stats.get("available", 0)
    users = stats.get("total_users", 0)
    librarians = stats.get("librarians", 0)

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Total Items:[/] {total}\n"
            f"[bold]Checked Out:[/] {checked_out}\n"
            f"[bold]Available:[/] {available}\n"
            f"[bold]Users:[/] {users} ({librarians} librarians)"
        )
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Items: {total}")
        print(f"Checked Out: {checked_out}")
        print(f"Available: {available}")
        print(f"Users: {users} ({librarians} librarians)")
