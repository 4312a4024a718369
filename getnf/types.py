from enum import Enum
from typing import TypedDict


class Scope(str, Enum):
    USER = "user"
    GLOBAL = "global"


class ReleaseInfo(TypedDict, total=False):
    tag_name: str
    name: str
    html_url: str


class ContentEntry(TypedDict, total=False):
    name: str
    path: str
    type: str
