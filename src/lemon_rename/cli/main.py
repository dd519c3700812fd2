"""Command line entrypoint for Lemon Rename."""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from lemon_rename.core.config import RenameConfig
from lemon_rename.core.exceptions import LemonRenameError
from lemon_rename.history.store import PatternStore
from lemon_rename.indexer.vault import Vault
from lemon_rename.models.suggestion import RenameSuggestion
from lemon_rename.suggest.engine import create_default_engine

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="lemon-rename",
    help="Rename suggestions for markdown notes, learned from rename history",
    no_args_is_help=True,
)

VaultOption = Annotated[
    Optional[Path],
    typer.Option("--vault", "-v", help="Vault root (defaults to current directory)"),
]


@app.callback()
def main(
    log_level: Annotated[
        str, typer.Option("--log-level", help="Logging level")
    ] = "WARNING",
) -> None:
    """Lemon Rename command line tools."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def open_store(vault: Path | None) -> tuple[Path, RenameConfig, PatternStore]:
    """Load the vault's configuration and rename history."""
    root = vault or Path.cwd()
    config = RenameConfig.load(root)
    store = PatternStore.for_vault(root, config)
    store.load()
    return root, config, store


def print_suggestions(suggestions: list[RenameSuggestion], title: str) -> None:
    if not suggestions:
        console.print("[yellow]No suggestions[/yellow]")
        return

    table = Table(title=title)
    table.add_column("", width=2)
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Score", justify="right")
    table.add_column("Pattern", style="dim")

    for s in suggestions:
        table.add_row(
            s.icon,
            s.value,
            s.type.value,
            f"{s.score:.1f}",
            s.pattern_key or "-",
        )

    console.print(table)


@app.command("suggest")
def suggest_command(
    note: Annotated[str, typer.Argument(help="Note path or name")],
    vault: VaultOption = None,
    max_suggestions: Annotated[
        Optional[int], typer.Option("--max", "-n", help="Maximum suggestions")
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Suggest new names for a note."""
    try:
        root, config, store = open_store(vault)
        notes = Vault(root)
        note_file = notes.load(notes.resolve(note))
        engine = create_default_engine(notes, config.suggestions)
        suggestions = engine.generate_suggestions(
            note_file,
            store.get_historical_patterns(),
            max_suggestions,
        )
    except LemonRenameError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps([s.to_dict() for s in suggestions], ensure_ascii=False, indent=2))
        return

    print_suggestions(suggestions, f"Suggestions for {note_file.basename}")


@app.command("quick")
def quick_command(
    name: Annotated[str, typer.Argument(help="Current note name")],
    vault: VaultOption = None,
    max_suggestions: Annotated[
        Optional[int], typer.Option("--max", "-n", help="Maximum suggestions")
    ] = None,
) -> None:
    """Suggest names from rename history only."""
    try:
        _, _, store = open_store(vault)
    except LemonRenameError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    print_suggestions(store.get_suggestions(name, max_suggestions), f"Quick renames for {name}")


@app.command("record")
def record_command(
    old_name: Annotated[str, typer.Argument(help="Name before the rename")],
    new_name: Annotated[str, typer.Argument(help="Name after the rename")],
    vault: VaultOption = None,
    key: Annotated[
        Optional[str], typer.Option("--key", "-k", help="Pattern key of the accepted suggestion")
    ] = None,
) -> None:
    """Record a performed rename."""
    try:
        _, _, store = open_store(vault)
        record = store.record_rename(old_name, new_name, key)
    except LemonRenameError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Recorded:[/green] {record.key} ({record.total_count} times)")


@app.command("reject")
def reject_command(
    pattern_key: Annotated[str, typer.Argument(help="Pattern key of the dismissed suggestion")],
    vault: VaultOption = None,
) -> None:
    """Record that a suggestion was dismissed."""
    try:
        _, _, store = open_store(vault)
        feedback = store.record_suggestion_rejection(pattern_key)
    except LemonRenameError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[yellow]Rejected:[/yellow] {pattern_key} "
        f"(accept rate {feedback.accept_rate:.0%} over {feedback.total})"
    )


@app.command("patterns")
def patterns_command(
    vault: VaultOption = None,
) -> None:
    """Show patterns learned from rename history."""
    try:
        _, _, store = open_store(vault)
    except LemonRenameError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    patterns = store.get_historical_patterns()
    if not patterns:
        console.print("[yellow]No rename patterns learned yet[/yellow]")
        return

    table = Table(title="Rename Patterns")
    table.add_column("Type", style="cyan")
    table.add_column("Value", style="blue")
    table.add_column("Frequency", justify="right")
    table.add_column("Accept Rate", justify="right")
    table.add_column("Weight", justify="right")

    for p in patterns:
        table.add_row(
            p.type.value,
            p.value,
            str(p.frequency),
            f"{p.accept_rate:.0%}",
            f"{p.weight:.0f}",
        )

    console.print(table)


@app.command("cleanup")
def cleanup_command(
    vault: VaultOption = None,
) -> None:
    """Apply retention to the rename history."""
    try:
        _, _, store = open_store(vault)
        removed = store.cleanup()
        store.save()
    except LemonRenameError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Cleanup complete:[/green] {removed} expired records removed")


if __name__ == "__main__":
    app()
