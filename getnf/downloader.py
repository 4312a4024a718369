import logging
import lzma
import os
import shutil
import tarfile
import tempfile
from pathlib import Path
from typing import List

import httpx
from rich.console import Console

from .catalog import build_headers
from .constants import MAX_ARCHIVE_DEPTH
from .errors import ArchiveError, FilesystemError, NetworkError

console = Console()
logger = logging.getLogger(__name__)


def _is_safe_archive_path(path: str, extract_dir: Path) -> bool:
    """
    Check if an archive member path is safe to extract.

    Prevents path traversal attacks by ensuring the path:
    - Doesn't contain '..' components
    - Doesn't start with '/' (absolute path)
    - Results in a file within the extraction directory
    - Doesn't create overly deep directory structures
    """
    if not path:
        return False

    if path.startswith("/"):
        return False

    if ".." in path.split("/"):
        return False

    if len(Path(path).parts) > MAX_ARCHIVE_DEPTH:
        return False

    try:
        resolved_extract_dir = extract_dir.resolve()
        resolved_full_path = (extract_dir / path).resolve()
        return resolved_full_path.is_relative_to(resolved_extract_dir)
    except (ValueError, OSError):
        return False


def _get_safe_members(archive: tarfile.TarFile, extract_dir: Path) -> List[tarfile.TarInfo]:
    """Get archive members that are safe to extract."""
    safe_members: List[tarfile.TarInfo] = []
    for member in archive.getmembers():
        if member.issym() or member.islnk():
            console.print(f"[yellow]Skipping link in archive: {member.name}[/yellow]")
            continue
        if _is_safe_archive_path(member.name, extract_dir):
            safe_members.append(member)
        else:
            console.print(f"[yellow]Skipping unsafe archive member: {member.name}[/yellow]")
    return safe_members


def _download(url: str, target: Path) -> None:
    logger.debug(f"Downloading {url} to {target}")
    try:
        with httpx.stream(
            "GET", url, headers=build_headers(), follow_redirects=True
        ) as response:
            response.raise_for_status()
            with open(target, "wb") as f:
                for chunk in response.iter_bytes():
                    f.write(chunk)
    except httpx.HTTPStatusError as e:
        raise NetworkError(
            f"Download failed with HTTP {e.response.status_code}: {url}"
        ) from e
    except httpx.HTTPError as e:
        raise NetworkError(f"Download failed: {url}: {e}") from e
    except OSError as e:
        raise FilesystemError(f"Could not write downloaded archive: {e}") from e


def _unpack(archive_path: Path, target_dir: Path) -> int:
    try:
        with tarfile.open(archive_path, "r:xz") as archive:
            safe_members = _get_safe_members(archive, target_dir)
            if hasattr(tarfile, "data_filter"):
                archive.extractall(target_dir, members=safe_members, filter="data")
            else:
                archive.extractall(target_dir, members=safe_members)
    except (tarfile.TarError, lzma.LZMAError, EOFError) as e:
        raise ArchiveError(f"Could not unpack archive: {e}") from e
    except OSError as e:
        raise FilesystemError(f"Could not extract into {target_dir}: {e}") from e
    return len(safe_members)


def _remove_entry(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()


def _extract(archive_path: Path, dest_dir: Path) -> int:
    """Unpack into a staging directory beside dest_dir, then swap it in."""
    try:
        dest_dir.parent.mkdir(parents=True, exist_ok=True)
        staging_dir = Path(
            tempfile.mkdtemp(prefix=f".{dest_dir.name}-", dir=dest_dir.parent)
        )
        # mkdtemp creates the directory private to the current user
        staging_dir.chmod(0o755)
    except OSError as e:
        raise FilesystemError(f"Could not create {dest_dir}: {e}") from e

    try:
        count = _unpack(archive_path, staging_dir)
        try:
            _remove_entry(dest_dir)
            os.replace(staging_dir, dest_dir)
        except OSError as e:
            raise FilesystemError(f"Could not replace {dest_dir}: {e}") from e
    finally:
        if staging_dir.exists():
            shutil.rmtree(staging_dir, ignore_errors=True)
    return count


def download_and_extract(url: str, dest_dir: Path) -> int:
    """
    Download a .tar.xz archive and unpack it into dest_dir.

    dest_dir and its parents are created as needed. Whatever was at dest_dir
    before is replaced, and only once the archive unpacked cleanly. Returns the
    number of extracted members.
    """
    with tempfile.TemporaryDirectory(prefix="getnf-") as temp_dir:
        archive_path = Path(temp_dir) / "archive.tar.xz"
        with console.status(f"[bold green]Downloading {url.rsplit('/', 1)[-1]}..."):
            _download(url, archive_path)
        with console.status("[bold green]Extracting..."):
            count = _extract(archive_path, dest_dir)
    logger.info(f"Extracted {count} files into {dest_dir}")
    return count
