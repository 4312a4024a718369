import logging
import shutil
from typing import List, Optional

from rich.console import Console

from .errors import FilesystemError
from .installer import font_path
from .platform_utils import PlatformInfo, refresh_font_cache, resolve_font_dir
from .types import Scope

console = Console()
logger = logging.getLogger(__name__)


def uninstall_fonts(
    selection: List[str],
    scope: Scope,
    platform_info: Optional[PlatformInfo] = None,
) -> None:
    """
    Remove the selected fonts from the font directory.

    Fonts that are not installed are skipped. Any other failure stops the batch.
    """
    if not selection:
        console.print("[yellow]No fonts selected.[/yellow]")
        return

    font_dir = resolve_font_dir(scope, platform_info)
    targets = [(name, font_path(font_dir, name)) for name in selection]

    deleted_count = 0
    try:
        for name, target in targets:
            logger.debug(f"Removing {target}")
            try:
                if target.is_dir() and not target.is_symlink():
                    shutil.rmtree(target)
                else:
                    target.unlink()
            except FileNotFoundError:
                console.print(f"[yellow]{name} is not installed in {font_dir}.[/yellow]")
                continue
            except OSError as e:
                console.print(f"[red]Could not delete {name}: {e}[/red]")
                raise FilesystemError(f"Could not delete {target}: {e}", font=name) from e
            deleted_count += 1
            console.print(f"[green]Deleted {name}.[/green]")
    finally:
        if deleted_count:
            refresh_font_cache(platform_info)

    console.print(
        f"[green]Uninstalled {deleted_count} font{'' if deleted_count == 1 else 's'}.[/green]"
    )
