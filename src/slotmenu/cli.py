from __future__ import annotations

from pathlib import Path

import typer

from .debug_log import init_menu_debug_log
from .definition import build_from_definition, load_definition
from .errors import MenuError
from .events import SlotClick
from .menu import Menu
from .preview import format_menu
from .registry import MenuRegistry


app = typer.Typer(add_completion=False)


def _load_menu(path: Path, registry: MenuRegistry) -> Menu:
    try:
        return build_from_definition(load_definition(path), registry)
    except (MenuError, OSError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _describe_char(menu: Menu, ch: str) -> str:
    slots = menu.table.slot_map[ch]
    if ch in menu.table.indicator_chars():
        kind = "content"
    else:
        kind = type(menu.table.bindings[ch]).__name__
    return f"{ch!r}: {kind} x{len(slots)}"


@app.callback()
def cmd_root(
    debug_log: Path | None = typer.Option(None, "--debug-log", help="write a menu event log under this directory"),
) -> None:
    """Grid menu layout tools."""
    if debug_log is not None:
        path = init_menu_debug_log(base_dir=debug_log)
        typer.echo(f"debug log: {path}", err=True)


@app.command("check")
def cmd_check(path: Path = typer.Argument(..., help="menu definition (.toml or .json)")) -> None:
    """Validate a menu definition and summarize its layout."""
    menu = _load_menu(path, MenuRegistry())
    typer.echo(f"title: {menu.title}")
    typer.echo(f"shape: {menu.shape.name} ({menu.shape.slot_count} slots)")
    if menu.window is not None:
        typer.echo(f"scroll window: {menu.window.window_size} slots, {len(menu.window.content)} entries")
    else:
        typer.echo("scroll window: none")
    typer.echo("chars:")
    for ch in menu.table.slot_map:
        typer.echo(f"  {_describe_char(menu, ch)}")


@app.command("render")
def cmd_render(
    path: Path = typer.Argument(..., help="menu definition (.toml or .json)"),
    scroll: list[int] = typer.Option([], "--scroll", help="scroll delta to apply (repeatable)"),
    click: list[int] = typer.Option([], "--click", help="slot to click after scrolling (repeatable)"),
    width: int = typer.Option(8, help="cell width in characters"),
) -> None:
    """Print the rendered grid after optional scrolls and clicks."""
    registry = MenuRegistry()
    menu = _load_menu(path, registry)
    for delta in scroll:
        try:
            accepted = menu.scroll(delta)
        except MenuError as exc:
            typer.echo(f"error: {exc}", err=True)
            raise typer.Exit(code=1) from exc
        if not accepted:
            typer.echo(f"scroll {delta:+d} rejected at offset {menu.offset}", err=True)
    for slot in click:
        registry.handle_click(menu.surface, slot, SlotClick(slot=slot, viewer="cli"))
    typer.echo(format_menu(menu, width=width))


@app.command("view")
def cmd_view(
    path: Path = typer.Argument(..., help="menu definition (.toml or .json)"),
    cell_size: float = typer.Option(64.0, help="cell size in pixels"),
    fps: int = typer.Option(60, help="target fps"),
) -> None:
    """Open the menu in a Raylib window; clicks are routed to the bound elements."""
    from .viewer import RaylibGridView, run_viewer

    registry = MenuRegistry()
    menu = _load_menu(path, registry)
    run_viewer(RaylibGridView(menu=menu, registry=registry, cell_size=cell_size), fps=fps)


def main(argv: list[str] | None = None) -> None:
    app(prog_name="slotmenu", args=argv)


if __name__ == "__main__":
    main()
