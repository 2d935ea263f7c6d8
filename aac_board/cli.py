from __future__ import annotations

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Iterator, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .board import BoardState
from .errors import BoardError
from .logging import setup_logging
from .settings import load_settings

app = typer.Typer(
    add_completion=False,
    help="aac_board: a two-level communication board of categories and spoken items",
    rich_markup_mode="rich",
)
console = Console()

FileOption = Annotated[
    Optional[Path],
    typer.Option("--file", "-f", help="Board file (default: AAC_BOARD_FILE)"),
]


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def _board_path(file: Optional[Path]) -> Path:
    if file is not None:
        return Path(file)
    return Path(load_settings().AAC_BOARD_FILE)


@contextmanager
def _reporting_errors() -> Iterator[None]:
    """Turn board failures into a red message and exit code 1."""
    try:
        yield
    except BoardError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(code=1)


def _load_or_new(path: Path) -> BoardState:
    """Load `path`, or start an empty board when the file does not exist yet."""
    if not path.exists():
        return BoardState()
    return BoardState.load(path)


def _save(board: BoardState, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    board.save(path)


def _board_summary(board: BoardState) -> dict:
    return {
        "categories": [
            {
                "image_id": image_id,
                "name": category.get_name(),
                "items": [{"image_id": item_id, "text": text} for item_id, text in category.items()],
            }
            for image_id, category in board.categories()
        ]
    }


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN CALLBACK
# ═══════════════════════════════════════════════════════════════════════════════

@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    file: FileOption = None,
):
    """
    [bold]aac_board[/bold]: categories of pictures that speak.

    [dim]Run without a command to open the interactive board.[/dim]

    [bold]Examples:[/bold]
      python -m aac_board show
      python -m aac_board speak img/food/plate.png img/food/fries.png
      python -m aac_board add-item img/food/plate.png img/food/apple.png "apple"
    """
    setup_logging(load_settings())
    if ctx.invoked_subcommand is None:
        tui(file=file)
        raise typer.Exit(code=0)


# ═══════════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════════

@app.command("show", help="[bold cyan]S[/bold cyan]how categories, or the items of one category")
def show(
    file: FileOption = None,
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="Category image id to list items for"),
    ] = None,
    json_out: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
):
    path = _board_path(file)
    with _reporting_errors():
        board = BoardState.load(path)

        if json_out:
            payload = _board_summary(board)
            if category is not None:
                payload["categories"] = [c for c in payload["categories"] if c["image_id"] == category]
            console.print_json(json.dumps(payload))
            return

        if category is None:
            table = Table(title=f"Categories ({path})")
            table.add_column("Image", style="cyan")
            table.add_column("Name")
            table.add_column("Items", justify="right")
            for image_id, cat in board.categories():
                table.add_row(escape(image_id), escape(cat.get_name()), str(len(cat)))
            console.print(table)
            return

        cat = board.get_category_by_id(category)
        table = Table(title=escape(f"{cat.get_name()} ({category})"))
        table.add_column("Image", style="cyan")
        table.add_column("Text")
        for item_id, text in cat.items():
            table.add_row(escape(item_id), escape(text))
        console.print(table)


@app.command("speak", help="Select images in order, starting at the root, and print what is spoken")
def speak(
    image_ids: Annotated[List[str], typer.Argument(help="Image ids to select, in order")],
    file: FileOption = None,
):
    path = _board_path(file)
    with _reporting_errors():
        board = BoardState.load(path)
        for image_id in image_ids:
            text = board.select(image_id)
            if text:
                console.print(escape(text))
            else:
                console.print(f"[dim]→ {escape(board.get_category())}[/dim]")


@app.command("add-category", help="Add (or replace) an empty category")
def add_category(
    image_id: Annotated[str, typer.Argument(help="Category image id")],
    name: Annotated[str, typer.Argument(help="Category display name")],
    file: FileOption = None,
):
    path = _board_path(file)
    with _reporting_errors():
        board = _load_or_new(path)
        replaced = board.has_category(image_id)
        board.add_category(image_id, name)
        _save(board, path)
    verb = "replaced" if replaced else "added"
    console.print(f"[green]✓[/green] Category {verb}: [cyan]{escape(image_id)}[/cyan] {escape(name)}")


@app.command("add-item", help="Add (or update) an item inside a category")
def add_item(
    category_id: Annotated[str, typer.Argument(help="Category image id")],
    image_id: Annotated[str, typer.Argument(help="Item image id")],
    text: Annotated[str, typer.Argument(help="Text spoken for the item")],
    file: FileOption = None,
):
    path = _board_path(file)
    with _reporting_errors():
        board = BoardState.load(path)
        if not board.has_category(category_id):
            console.print(f"[red]✗[/red] Not a category: {escape(category_id)}")
            raise typer.Exit(code=1)
        board.select(category_id)
        board.add_item(image_id, text)
        _save(board, path)
    console.print(f"[green]✓[/green] Item saved in [cyan]{escape(category_id)}[/cyan]: {escape(image_id)}")


@app.command("remove-category", help="Remove a category and its items")
def remove_category(
    image_id: Annotated[str, typer.Argument(help="Category image id")],
    file: FileOption = None,
):
    path = _board_path(file)
    with _reporting_errors():
        board = BoardState.load(path)
        if not board.has_category(image_id):
            console.print(f"[yellow]⚠[/yellow] No such category: {escape(image_id)}")
            return
        board.remove_category(image_id)
        _save(board, path)
    console.print(f"[green]✓[/green] Category removed: [cyan]{escape(image_id)}[/cyan]")


@app.command("check", help="Verify the board file survives a save/load round trip")
def check(file: FileOption = None):
    path = _board_path(file)
    with _reporting_errors():
        board = BoardState.load(path)
        first = _board_summary(board)
        again = _board_summary(BoardState.from_text(board.to_text()))

    n_items = sum(len(c["items"]) for c in first["categories"])
    if first != again:
        console.print(f"[red]✗[/red] Round trip changed the board: {escape(str(path))}")
        raise typer.Exit(code=1)
    console.print(Panel.fit(
        f"  File:       [cyan]{escape(str(path))}[/cyan]\n"
        f"  Categories: [cyan]{len(first['categories'])}[/cyan]\n"
        f"  Items:      [cyan]{n_items}[/cyan]",
        title="[bold green]✓ Board OK[/bold green]",
    ))


@app.command("tui", help="Open the interactive board")
def tui(file: FileOption = None):
    from .tui import Navigator, Router, UIState
    from .tui import screens  # noqa: F401

    settings = load_settings()
    path = _board_path(file)
    with _reporting_errors():
        board = _load_or_new(path)

    router = Router(
        console=console,
        settings=settings,
        state=UIState(),
        nav=Navigator(),
        board=board,
        board_path=path,
    )

    try:
        router.run()
    except KeyboardInterrupt:
        console.print("\n[dim]👋 Interrupted. Goodbye![/]")


def main():
    app()
