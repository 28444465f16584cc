"""Read-only platform facts used to display and default paths."""

from dataclasses import dataclass

from core.models import SystemStatus
from onboarding.constants import CONFIG_FILENAME, STASH_DIRNAME


@dataclass(frozen=True)
class PlatformContext:
    """Platform conventions of the machine running the server.

    Paths shown to the user use shell tokens ($HOME, %CD%, ...) rather than
    expanded values, because the server resolves them on its side.
    """

    os: str
    path_sep: str
    home_token: str
    working_dir_token: str
    working_dir: str = "."
    home_dir: str = ""

    @classmethod
    def for_os(cls, os: str, working_dir: str = "", home_dir: str = "") -> "PlatformContext":
        windows = os == "windows"
        return cls(
            os=os,
            path_sep="\\" if windows else "/",
            home_token="%USERPROFILE%" if windows else "$HOME",
            working_dir_token="%CD%" if windows else "$PWD",
            working_dir=working_dir or ".",
            home_dir=home_dir,
        )

    @classmethod
    def from_status(cls, status: SystemStatus) -> "PlatformContext":
        return cls.for_os(status.os, status.working_dir, status.home_dir)

    @property
    def restricted_root(self) -> bool:
        """True for the macOS app bundle, which runs with / as working directory.

        / is usually read-only there, so setting up in the working directory
        is not offered.
        """
        return self.os == "darwin" and self.working_dir == "/"

    def join(self, *parts: str) -> str:
        return self.path_sep.join(parts)

    @property
    def fallback_stash_dir(self) -> str:
        return self.join(self.home_token, STASH_DIRNAME)

    @property
    def fallback_config_path(self) -> str:
        return self.join(self.fallback_stash_dir, CONFIG_FILENAME)

    @property
    def home_stash_dir(self) -> str:
        """The fallback directory with the real home directory, when known."""
        return self.join(self.home_dir or self.home_token, STASH_DIRNAME)
