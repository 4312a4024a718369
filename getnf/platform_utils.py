import logging
import os
import platform
import subprocess
from pathlib import Path
from typing import Mapping, NamedTuple, Optional

from rich.console import Console

from .constants import DEFAULT_WINDIR, LINUX_GLOBAL_FONT_DIR, MACOS_GLOBAL_FONT_DIR
from .errors import ConfigurationError, UnsupportedPlatformError
from .types import Scope

console = Console()
logger = logging.getLogger(__name__)


class PlatformInfo(NamedTuple):
    """Operating system name (as reported by platform.system()) and environment."""

    system: str
    environ: Mapping[str, str]

    @classmethod
    def current(cls) -> "PlatformInfo":
        return cls(platform.system(), dict(os.environ))


def _require(environ: Mapping[str, str], name: str, system: str, scope: Scope) -> str:
    value = environ.get(name)
    if not value:
        raise ConfigurationError(
            f"{name} is not set; it is required for {scope.value} fonts on {system}"
        )
    return value


def resolve_font_dir(scope: Scope, platform_info: Optional[PlatformInfo] = None) -> Path:
    """
    Return the font directory for the given scope on the given platform.

    Pure: only HOME, XDG_DATA_HOME, WINDIR and LOCALAPPDATA are consulted, and
    the directory is not created.
    """
    info = platform_info or PlatformInfo.current()
    system, environ = info.system, info.environ

    if system == "Linux":
        if scope is Scope.GLOBAL:
            return LINUX_GLOBAL_FONT_DIR
        xdg_data_home = environ.get("XDG_DATA_HOME")
        if xdg_data_home:
            return Path(xdg_data_home) / "fonts"
        home = _require(environ, "HOME", system, scope)
        return Path(home) / ".local" / "share" / "fonts"

    if system == "Darwin":
        if scope is Scope.GLOBAL:
            return MACOS_GLOBAL_FONT_DIR
        home = _require(environ, "HOME", system, scope)
        return Path(home) / "Library" / "Fonts"

    if system == "Windows":
        if scope is Scope.GLOBAL:
            return Path(environ.get("WINDIR") or DEFAULT_WINDIR) / "Fonts"
        local_app_data = _require(environ, "LOCALAPPDATA", system, scope)
        return Path(local_app_data) / "Microsoft" / "Windows" / "Fonts"

    raise UnsupportedPlatformError(f"Unsupported platform: {system or 'unknown'}")


def refresh_font_cache(platform_info: Optional[PlatformInfo] = None) -> None:
    """Make newly installed or removed fonts visible to the system."""
    info = platform_info or PlatformInfo.current()
    if info.system != "Linux":
        # macOS and Windows pick up font directory changes on their own
        logger.info(f"No font cache refresh needed on {info.system}")
        return

    try:
        subprocess.run(["fc-cache", "-f"], capture_output=True, text=True, check=True)
        logger.info("Ran fc-cache successfully")
    except subprocess.CalledProcessError as e:
        console.print(f"[yellow]Warning: Failed to update font cache: {e}[/yellow]")
        logger.error(f"fc-cache failed: {e}")
    except FileNotFoundError:
        console.print(
            "[yellow]Warning: fc-cache not found. Install fontconfig to update font cache.[/yellow]"
        )
