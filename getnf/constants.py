from pathlib import Path

from platformdirs import user_config_dir

# Constants
DEFAULT_REPO = "ryanoasis/nerd-fonts"
GITHUB_API_URL = "https://api.github.com/repos"
GITHUB_URL = "https://github.com"
USER_AGENT = "getnf"
ACCEPT_HEADER = "application/vnd.github+json"

CATALOG_PATH = "patched-fonts"
CATALOG_REF = "master"
ARCHIVE_EXTENSION = ".tar.xz"
MAX_ARCHIVE_DEPTH = 15

LINUX_GLOBAL_FONT_DIR = Path("/usr/local/share/fonts")
MACOS_GLOBAL_FONT_DIR = Path("/Library/Fonts")
DEFAULT_WINDIR = "C:\\Windows"

CONFIG_FILE = Path(user_config_dir("getnf")) / "config"

FONTS_HELP = "Comma-separated list of font names[dim] (e.g. FiraCode,Hack)[/dim]"
GLOBAL_HELP = "Operate on the system-wide font directory instead of the user one"
