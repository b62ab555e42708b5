"""
tilemenu CLI - validate a menu document or open the launcher.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

import typer
from loguru import logger

from tilemenu.errors import TilemenuError, format_error_chain
from tilemenu.models import KeyBinding, ResolvedEntry, ResolvedFolder, ResolvedMenu
from tilemenu.resolve import MenuResolver
from tilemenu.utils.helpers import configure_logging, css_path, load_settings, menu_path

# Ignis configuration file that builds the window
IGNIS_CONFIG = Path(__file__).parent / "config.py"

app = typer.Typer(
    name="tilemenu",
    help="Keyboard-driven grid launcher for Ignis/Wayland.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_resolver(folder_icon: str) -> MenuResolver:
    return MenuResolver.from_display(folder_icon=folder_icon)


def render_tree(entries: Mapping[KeyBinding, ResolvedEntry], depth: int = 0) -> list[str]:
    """One line per entry, folders followed by their indented children."""
    lines = []
    for binding, entry in sorted(entries.items(), key=lambda item: item[0].name):
        indent = "  " * depth
        if isinstance(entry, ResolvedFolder):
            lines.append(f"{indent}({binding.name}) {entry.name}/  [{entry.image.origin.value}]")
            lines.extend(render_tree(entry.applications, depth + 1))
        else:
            lines.append(f"{indent}({binding.name}) {entry.name}  [{entry.image.origin.value}]")
    return lines


@app.command()
def check(
    config: Optional[Path] = typer.Argument(None, help="Menu document (JSON or TOML)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every lookup."),
) -> None:
    """Resolve a menu document and print the resulting tree."""
    settings = load_settings()
    configure_logging("DEBUG" if verbose else settings["logging"]["level"])

    path = menu_path(settings, str(config) if config else None)
    try:
        resolver = _get_resolver(settings["icons"]["folder"])
    except ImportError as e:
        typer.echo(
            f"Error: GTK bindings are not available ({e}); "
            "install them with: pip install 'tilemenu[gtk]'",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        menu: ResolvedMenu = resolver.resolve_file(path)
    except TilemenuError as e:
        typer.echo(f"Error: {format_error_chain(e)}", err=True)
        raise typer.Exit(code=1)

    for line in render_tree(menu.applications):
        typer.echo(line)
    typer.echo(
        f"{menu.count_leaves()} applications, grid {menu.width}x{menu.height}, "
        f"icons {menu.icon_size}px"
    )


@app.command("open")
def open_menu(
    config: Optional[Path] = typer.Argument(None, help="Menu document (JSON or TOML)."),
    css: Optional[Path] = typer.Option(None, "--css", "-s", help="Stylesheet to use."),
) -> None:
    """Show the launcher (runs Ignis with tilemenu's configuration)."""
    settings = load_settings()
    os.environ["TILEMENU_CONFIG"] = str(menu_path(settings, str(config) if config else None))
    os.environ["TILEMENU_CSS"] = str(css_path(settings, str(css) if css else None))

    logger.debug(f"Starting ignis with {IGNIS_CONFIG}")
    try:
        os.execvp("ignis", ["ignis", "init", "-c", str(IGNIS_CONFIG)])
    except OSError as e:
        typer.echo(f"Error: failed to start ignis: {e}", err=True)
        raise typer.Exit(code=1)


def main() -> None:
    app()
