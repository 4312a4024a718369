import logging
from typing import List, Optional

from rich.console import Console

from .installer import install_fonts
from .platform_utils import PlatformInfo
from .types import Scope

console = Console()
logger = logging.getLogger(__name__)


def update_fonts(
    selection: List[str],
    scope: Scope,
    platform_info: Optional[PlatformInfo] = None,
) -> None:
    """
    Update installed fonts to the latest release.

    There is no version check: every selected font is reinstalled from the
    current latest release.
    """
    logger.debug(f"Updating {selection} in {scope.value} scope")
    if selection:
        console.print(
            f"[bold]Updating {len(selection)} font{'' if len(selection) == 1 else 's'}...[/bold]"
        )
    install_fonts(selection, scope, platform_info)
