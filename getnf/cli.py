import logging
from typing import Optional

import typer
from rich.console import Console

from . import config
from .catalog import list_catalog
from .constants import CONFIG_FILE, FONTS_HELP, GLOBAL_HELP
from .errors import GetnfError
from .installed import list_installed
from .installer import install_fonts
from .platform_utils import resolve_font_dir
from .selection import resolve_selection
from .types import Scope
from .uninstaller import uninstall_fonts
from .updater import update_fonts

app = typer.Typer(rich_markup_mode="rich", help="Install and manage Nerd Fonts.")
console = Console()

config_app = typer.Typer(rich_markup_mode="rich")
app.add_typer(config_app, name="config", help="Inspect the configuration.")


def _scope(global_: bool) -> Scope:
    return Scope.GLOBAL if global_ else Scope.USER


def _fail(action: str, e: GetnfError) -> typer.Exit:
    console.print(f"[red]Error {action}: {e}[/red]")
    return typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging"
    ),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("list-installed")
def list_installed_cmd(
    global_: bool = typer.Option(False, "--global", "-g", help=GLOBAL_HELP),
):
    """
    Show the installed Nerd Fonts.
    """
    try:
        fonts = list_installed(_scope(global_))
    except GetnfError as e:
        raise _fail("listing installed fonts", e) from e
    for font in fonts:
        console.print(font, highlight=False, markup=False)


@app.command("list-all")
def list_all_cmd():
    """
    Show every Nerd Font available upstream.
    """
    try:
        fonts = list_catalog()
    except GetnfError as e:
        raise _fail("listing available fonts", e) from e
    for font in fonts:
        console.print(font, highlight=False, markup=False)


@app.command()
def install(
    fonts: Optional[str] = typer.Option(None, "--fonts", "-f", help=FONTS_HELP),
    global_: bool = typer.Option(False, "--global", "-g", help=GLOBAL_HELP),
):
    """
    Install Nerd Fonts from the latest release.
    [dim]Without --fonts, choose interactively from all available fonts.[/dim]
    """
    scope = _scope(global_)
    try:
        resolve_font_dir(scope)
        selection = resolve_selection(fonts, list_catalog, label="Fonts to install")
        install_fonts(selection, scope)
    except GetnfError as e:
        raise _fail("installing fonts", e) from e


@app.command()
def uninstall(
    fonts: Optional[str] = typer.Option(None, "--fonts", "-f", help=FONTS_HELP),
    global_: bool = typer.Option(False, "--global", "-g", help=GLOBAL_HELP),
):
    """
    Uninstall Nerd Fonts.
    [dim]Without --fonts, choose interactively from the installed fonts.[/dim]
    """
    scope = _scope(global_)
    try:
        resolve_font_dir(scope)
        selection = resolve_selection(
            fonts, lambda: list_installed(scope), label="Fonts to uninstall"
        )
        uninstall_fonts(selection, scope)
    except GetnfError as e:
        raise _fail("uninstalling fonts", e) from e


@app.command()
def update(
    fonts: Optional[str] = typer.Option(None, "--fonts", "-f", help=FONTS_HELP),
    global_: bool = typer.Option(False, "--global", "-g", help=GLOBAL_HELP),
):
    """
    Reinstall installed Nerd Fonts from the latest release.
    [dim]Without --fonts, choose interactively from the installed fonts.[/dim]
    """
    scope = _scope(global_)
    try:
        resolve_font_dir(scope)
        selection = resolve_selection(
            fonts, lambda: list_installed(scope), label="Fonts to update"
        )
        update_fonts(selection, scope)
    except GetnfError as e:
        raise _fail("updating fonts", e) from e


@config_app.command("show")
def config_show():
    """
    Show the configuration in effect.
    """
    token = "***" if config.default_github_token else "(not set)"
    console.print(f"Config file: {CONFIG_FILE}", highlight=False)
    console.print(f"Repository: {config.default_repo}", highlight=False)
    console.print(f"GitHub token: {token}", highlight=False)
