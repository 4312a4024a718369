import logging
import os
from typing import Dict, Tuple

from rich.console import Console

from .constants import CONFIG_FILE, DEFAULT_REPO, GITHUB_API_URL, GITHUB_URL

console = Console()
logger = logging.getLogger(__name__)


def _is_valid_repo(value: str) -> bool:
    parts = value.split("/")
    return len(parts) == 2 and all(parts)


def read_config_file() -> Dict[str, str]:
    """Read key=value pairs from the config file, if there is one."""
    values: Dict[str, str] = {}
    if not CONFIG_FILE.exists():
        return values
    try:
        with open(CONFIG_FILE) as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                values[k.strip()] = v.strip()
    except OSError as e:
        console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return values


def load_config() -> Tuple[str, str]:
    """Load configuration from the config file and the environment."""
    repo = DEFAULT_REPO
    github_token = ""

    values = read_config_file()
    if "repo" in values:
        if _is_valid_repo(values["repo"]):
            repo = values["repo"]
        else:
            console.print(
                f"[yellow]Warning: Invalid repo '{values['repo']}' in config, "
                f"using {DEFAULT_REPO}.[/yellow]"
            )
    if values.get("github_token"):
        github_token = values["github_token"]

    env_repo = os.environ.get("GETNF_REPO", "")
    if env_repo:
        if _is_valid_repo(env_repo):
            repo = env_repo
        else:
            console.print(
                f"[yellow]Warning: Invalid GETNF_REPO '{env_repo}', ignoring it.[/yellow]"
            )
    github_token = os.environ.get("GITHUB_TOKEN") or github_token

    logger.debug(f"Using repository {repo}")
    return repo, github_token


default_repo, default_github_token = load_config()


def api_url(repo: str = "") -> str:
    """GitHub API root for the font repository."""
    return f"{GITHUB_API_URL}/{repo or default_repo}"


def repo_url(repo: str = "") -> str:
    """Web root for the font repository, where release assets live."""
    return f"{GITHUB_URL}/{repo or default_repo}"
