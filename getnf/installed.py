import logging
from typing import List, Optional

from .errors import FilesystemError
from .platform_utils import PlatformInfo, resolve_font_dir
from .types import Scope

logger = logging.getLogger(__name__)


def list_installed(scope: Scope, platform_info: Optional[PlatformInfo] = None) -> List[str]:
    """
    List installed fonts: one name per entry of the font directory, sorted.

    A missing font directory is an error, not an empty result.
    """
    font_dir = resolve_font_dir(scope, platform_info)
    logger.debug(f"Listing installed fonts in {font_dir}")
    if not font_dir.exists():
        raise FilesystemError(f"Font directory {font_dir} does not exist")
    if not font_dir.is_dir():
        raise FilesystemError(f"{font_dir} is not a directory")
    try:
        return sorted(entry.name for entry in font_dir.iterdir())
    except OSError as e:
        raise FilesystemError(f"Could not read {font_dir}: {e}") from e
