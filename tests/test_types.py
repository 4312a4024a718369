from getnf.errors import (
    ArchiveError,
    ConfigurationError,
    FilesystemError,
    GetnfError,
    NetworkError,
    ParseError,
    UnsupportedPlatformError,
)
from getnf.types import Scope


class TestScope:
    def test_values(self) -> None:
        assert Scope.USER.value == "user"
        assert Scope.GLOBAL.value == "global"


class TestErrors:
    def test_all_kinds_share_a_base(self) -> None:
        for kind in (
            NetworkError,
            ArchiveError,
            ParseError,
            FilesystemError,
            ConfigurationError,
            UnsupportedPlatformError,
        ):
            assert issubclass(kind, GetnfError)

    def test_font_prefixes_message(self) -> None:
        error = NetworkError("HTTP 404", font="Hack")

        assert str(error) == "Hack: HTTP 404"
        assert error.message == "HTTP 404"

    def test_without_font(self) -> None:
        assert str(ParseError("bad json")) == "bad json"
