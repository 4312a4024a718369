import logging
from typing import TYPE_CHECKING, Any, Dict, List, cast

import httpx
from rich.console import Console

from . import config
from .constants import ACCEPT_HEADER, CATALOG_PATH, CATALOG_REF, USER_AGENT
from .errors import NetworkError, ParseError

if TYPE_CHECKING:
    from .types import ContentEntry, ReleaseInfo

console = Console()
logger = logging.getLogger(__name__)


def build_headers() -> Dict[str, str]:
    """Headers for every GitHub request. GitHub rejects requests without a User-Agent."""
    headers: Dict[str, str] = {"User-Agent": USER_AGENT, "Accept": ACCEPT_HEADER}
    if config.default_github_token:
        headers["Authorization"] = f"Bearer {config.default_github_token}"
    return headers


def fetch_json(url: str) -> Any:
    """GET a GitHub API resource and decode its JSON body."""
    logger.debug(f"GET {url}")
    try:
        response = httpx.get(url, headers=build_headers(), follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise NetworkError(
            f"GitHub API returned HTTP {e.response.status_code} for {url}"
        ) from e
    except httpx.HTTPError as e:
        raise NetworkError(f"Could not reach {url}: {e}") from e

    try:
        return response.json()
    except ValueError as e:
        raise ParseError(f"Invalid JSON from {url}: {e}") from e


def latest_release_tag() -> str:
    """Return the tag of the latest published release."""
    url = f"{config.api_url()}/releases/latest"
    with console.status("[bold green]Fetching latest release..."):
        data = fetch_json(url)
    if not isinstance(data, dict):
        raise ParseError(f"Expected a release object from {url}")
    release = cast("ReleaseInfo", data)
    tag = release.get("tag_name")
    if not isinstance(tag, str) or not tag:
        raise ParseError(f"Release from {url} has no tag_name")
    logger.info(f"Latest release is {tag}")
    return tag


def list_catalog() -> List[str]:
    """Return the names of all installable fonts, in the order GitHub lists them."""
    url = f"{config.api_url()}/contents/{CATALOG_PATH}?ref={CATALOG_REF}"
    with console.status("[bold green]Fetching font list..."):
        data = fetch_json(url)
    if not isinstance(data, list):
        raise ParseError(f"Expected a directory listing from {url}")

    fonts: List[str] = []
    for entry in cast("List[Any]", data):
        if not isinstance(entry, dict):
            raise ParseError(f"Directory listing from {url} has a malformed entry")
        name = cast("ContentEntry", entry).get("name")
        if not isinstance(name, str):
            raise ParseError(f"Directory listing from {url} has an entry without a name")
        fonts.append(name)
    logger.debug(f"Catalog has {len(fonts)} fonts")
    return fonts
