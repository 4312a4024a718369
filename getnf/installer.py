import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from . import config
from .catalog import latest_release_tag
from .constants import ARCHIVE_EXTENSION
from .downloader import download_and_extract
from .errors import FilesystemError, GetnfError, InvalidFontNameError
from .platform_utils import PlatformInfo, refresh_font_cache, resolve_font_dir
from .types import Scope

console = Console()
logger = logging.getLogger(__name__)


def font_path(font_dir: Path, name: str) -> Path:
    """Path of a font's entry in the font directory. Names must be a single entry."""
    if name in ("", ".", "..") or "/" in name or "\\" in name:
        raise InvalidFontNameError(f"Invalid font name: {name!r}")
    return font_dir / name


def archive_url(name: str, release: str) -> str:
    return f"{config.repo_url()}/releases/download/{release}/{name}{ARCHIVE_EXTENSION}"


def install_fonts(
    selection: List[str],
    scope: Scope,
    platform_info: Optional[PlatformInfo] = None,
) -> None:
    """
    Install the selected fonts at the latest release.

    Fonts are installed one at a time, in order. The first failure stops the
    batch: fonts before it stay installed, fonts after it are not attempted.
    """
    if not selection:
        console.print("[yellow]No fonts selected.[/yellow]")
        return

    font_dir = resolve_font_dir(scope, platform_info)
    targets = [(name, font_path(font_dir, name)) for name in selection]

    # One release for the whole batch, so a single run never mixes versions
    release = latest_release_tag()

    try:
        font_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Could not create font directory {font_dir}: {e}") from e

    installed = 0
    try:
        for name, dest in targets:
            console.print(f"[bold]Installing {name} {release}...[/bold]")
            try:
                count = download_and_extract(archive_url(name, release), dest)
            except GetnfError as e:
                e.font = name
                console.print(f"[red]Error installing {name}: {e.message}[/red]")
                raise
            installed += 1
            console.print(
                f"[green]Installed {name} ({count} file{'' if count == 1 else 's'}) "
                f"to: {dest}[/green]"
            )
    finally:
        if installed:
            refresh_font_cache(platform_info)

    console.print(
        f"[green]Installed {installed} font{'' if installed == 1 else 's'} "
        f"from release {release}.[/green]"
    )
