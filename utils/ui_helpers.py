import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from patrons.person import Person

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()


def print_patron_list(patrons: List[Person]) -> None:
    """Print patrons according to the current output mode.
    - plain: one ``str(person)`` line per patron, or 'No patrons registered.'
    - json: JSON array of patron dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if not patrons:
        print("No patrons registered.")
        return

    if mode == "json":
        print(json.dumps([p.to_dict() for p in patrons], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="👥 Patrons", show_lines=True, header_style="bold cyan")
        table.add_column("Name", style="magenta", no_wrap=True)
        table.add_column("Phone", style="white")
        table.add_column("Email", style="white")
        table.add_column("Books", style="white")
        table.add_column("Tags", style="green")
        for p in patrons:
            table.add_row(
                p.name,
                str(p.phone),
                str(p.email),
                "\n".join(b.display() for b in p.borrowed_books),
                ", ".join(t.label for t in p.tags),
            )
        _console.print(table)
    else:
        for p in patrons:
            print(str(p))


def print_patron(person: Person) -> None:
    mode = get_output_mode()
    if mode == "json":
        print(json.dumps(person.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        books = "\n".join(f"  • {b.display()}" for b in person.borrowed_books) or "  (none)"
        content = (f"[bold]Phone:[/] {person.phone}\n[bold]Email:[/] {person.email}\n"
                   f"[bold]Address:[/] {person.address}\n"
                   f"[bold]Tags:[/] {', '.join(t.label for t in person.tags)}\n"
                   f"[bold]Books:[/]\n{books}")
        _console.print(Panel.fit(content, title=f"👤 {person.name}", border_style="blue"))
    else:
        print(str(person))


def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print registry statistics according to the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    total = stats.get("total_patrons", 0)
    borrowed = stats.get("borrowed_books", 0)

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = f"[bold]Total Patrons:[/] {total}\n[bold]Borrowed Books:[/] {borrowed}"
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Patrons: {total}")
        print(f"Borrowed Books: {borrowed}")
