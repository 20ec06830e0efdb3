import logging
import os
import subprocess
import sys
import webbrowser
from typing import List, Optional

import typer
from rich.console import Console

from config import configure_logging, settings
from patrons import (
    Address,
    Book,
    Email,
    PatronError,
    PatronRegistry,
    Person,
    PersonNotFoundError,
    Phone,
    Tag,
)
from patrons.registry import changes_from_text
from patrons.sample_data import build_sample_registry
from utils.ui_helpers import print_patron, print_patron_list, print_stats_result, set_output_mode

APP_NAME = "Patron Ledger CLI"

console = Console()
logger = logging.getLogger(__name__)


class RegistryManager:
    """Holds the single patron registry of this process."""

    _instance: Optional[PatronRegistry] = None

    @classmethod
    def get_instance(cls) -> PatronRegistry:
        if cls._instance is None:
            cls._instance = build_sample_registry() if settings.seed_sample_data else PatronRegistry()
            logger.debug(f"Registry initialised with {len(cls._instance)} patrons")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None


def _fail(message: str) -> None:
    print(message)
    raise typer.Exit(code=1)


# --- Typer CLI Application ---
app = typer.Typer(help=APP_NAME)


@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Global options for the CLI (e.g. output mode)."""
    configure_logging("DEBUG" if verbose else "WARNING")
    if output:
        set_output_mode(output)


@app.command("list")
def cli_list():
    """List all patrons."""
    print_patron_list(RegistryManager.get_instance().list_patrons())


@app.command("show")
def cli_show(name: str):
    """Show a single patron by exact name."""
    person = RegistryManager.get_instance().find(name)
    if person is None:
        _fail(f"Patron {name} not found.")
    print_patron(person)


@app.command("add")
def cli_add(
    name: str,
    phone: str = typer.Option(..., "--phone", "-p"),
    email: str = typer.Option(..., "--email", "-e"),
    address: str = typer.Option(..., "--address", "-a"),
    tags: Optional[List[str]] = typer.Option(None, "--tag", "-t"),
):
    """Register a new patron."""
    try:
        person = Person(name, Phone(phone), Email(email), Address(address),
                        [Tag(label) for label in tags or []])
        RegistryManager.get_instance().add(person)
    except PatronError as e:
        _fail(f"Could not add patron: {e}")
    print(f"New patron added: {person}")


@app.command("edit")
def cli_edit(
    name: str,
    new_name: Optional[str] = typer.Option(None, "--name", "-n"),
    phone: Optional[str] = typer.Option(None, "--phone", "-p"),
    email: Optional[str] = typer.Option(None, "--email", "-e"),
    address: Optional[str] = typer.Option(None, "--address", "-a"),
    tags: Optional[List[str]] = typer.Option(None, "--tag", "-t", help="Replaces all existing tags."),
):
    """Edit an existing patron. Borrowed books are kept."""
    try:
        changes = changes_from_text(new_name, phone, email, address, tags)
        person = RegistryManager.get_instance().edit(name, **changes)
    except PatronError as e:
        _fail(f"Could not edit patron: {e}")
    print(f"Edited patron: {person}")


@app.command("delete")
def cli_delete(name: str):
    """Remove a patron from the registry."""
    registry = RegistryManager.get_instance()
    try:
        registry.remove(registry.get(name))
    except PersonNotFoundError as e:
        _fail(str(e))
    print(f"Deleted patron: {name}")


@app.command("borrow")
def cli_borrow(
    name: str,
    title: str = typer.Option(..., "--title"),
    author: str = typer.Option(..., "--author"),
):
    """Record that a patron borrowed a book."""
    try:
        book = Book(title, author)
        person = RegistryManager.get_instance().borrow(name, book)
    except PatronError as e:
        _fail(str(e))
    print(f"{person.name} borrowed {book.display()}")


@app.command("return")
def cli_return(
    name: str,
    title: str = typer.Option(..., "--title"),
    author: str = typer.Option(..., "--author"),
):
    """Record that a patron returned a book."""
    try:
        book = Book(title, author)
        person = RegistryManager.get_instance().return_book(name, book)
    except PatronError as e:
        _fail(str(e))
    print(f"{person.name} returned {book.display()}")


@app.command("check-name")
def cli_check_name(name: str):
    """Check whether a name is acceptable for a patron."""
    if Person.is_valid_person(name):
        print(f"'{name}' is a valid patron name.")
    else:
        _fail(f"'{name}' is not a valid patron name.")


@app.command("stats")
def cli_stats():
    """Show registry statistics."""
    print_stats_result(RegistryManager.get_instance().statistics())


@app.command("serve")
def serve(
    host: Optional[str] = None,
    port: Optional[int] = None,
    open_browser: bool = typer.Option(False, "--open", help="Open the API docs in a browser."),
):
    """Start the Uvicorn server for the HTTP API."""
    host = host or settings.api_host
    port = int(port or settings.api_port)
    url = f"http://{host}:{port}/docs"
    print(f"Starting patron API on {url}")

    if open_browser:
        try:
            webbrowser.open(url)
        except webbrowser.Error:
            console.print("[yellow]Could not open a web browser automatically.[/]")

    args = [
        sys.executable,
        "-m", "uvicorn",
        "api:app",
        "--host", host,
        "--port", str(port),
    ]
    if settings.debug:
        args.append("--reload")
    try:
        subprocess.run(args, check=False, env=os.environ.copy())
    except KeyboardInterrupt:
        console.print("[dim]Server stopped.[/]")


if __name__ == "__main__":
    app()
