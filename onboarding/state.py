"""Wizard state: collected field values plus the current step position."""

import logging
from dataclasses import dataclass, field, replace
from typing import Any

from core.models import Configuration, SystemStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LibraryPath:
    """A library source directory. Duplicates are allowed."""

    path: str
    exclude_video: bool = False
    exclude_image: bool = False

    def __post_init__(self) -> None:
        if not self.path or not self.path.strip():
            raise ValueError("library path must not be empty")

    def to_input(self) -> dict[str, Any]:
        """StashConfigInput payload."""
        return {
            "path": self.path,
            "excludeVideo": self.exclude_video,
            "excludeImage": self.exclude_image,
        }

    def exclusions(self) -> str:
        excludes = []
        if self.exclude_video:
            excludes.append("videos")
        if self.exclude_image:
            excludes.append("images")
        if not excludes:
            return ""
        return f"(excludes {' and '.join(excludes)})"


@dataclass
class WizardFields:
    """Raw user input. Empty strings mean "use the default"."""

    config_location: str = ""
    database_file: str = ""
    generated_location: str = ""
    cache_location: str = ""
    store_blobs_in_database: bool = False
    blobs_location: str = ""
    library_paths: list[LibraryPath] = field(default_factory=list)


@dataclass
class WizardState:
    """Mutable state of one wizard run. Discarded when the wizard exits."""

    step_index: int = 0
    fields: WizardFields = field(default_factory=WizardFields)
    submitting: bool = False
    setup_error: str = ""
    library_alert: bool = False

    @classmethod
    def seed(
        cls,
        status: SystemStatus | None = None,
        configuration: Configuration | None = None,
    ) -> "WizardState":
        """Create state pre-filled from whatever configuration already exists."""
        fields = WizardFields()
        if status is not None and status.config_path:
            fields.config_location = status.config_path
        if configuration is not None:
            general = configuration.general
            for s in general.stashes:
                if not s.path.strip():
                    logger.warning("ignoring library directory with an empty path")
                    continue
                fields.library_paths.append(LibraryPath(s.path, s.exclude_video, s.exclude_image))
            if general.generated_path:
                fields.generated_location = general.generated_path
        return cls(fields=fields)

    def add_library_path(
        self,
        path: str,
        exclude_video: bool = False,
        exclude_image: bool = False,
    ) -> LibraryPath:
        entry = LibraryPath(path.strip(), exclude_video, exclude_image)
        self.fields.library_paths.append(entry)
        return entry

    def update_library_path(self, index: int, **changes: Any) -> LibraryPath:
        """Replace fields of the entry at index (path, exclude_video, exclude_image)."""
        entry = replace(self.fields.library_paths[index], **changes)
        self.fields.library_paths[index] = entry
        return entry

    def remove_library_path(self, index: int) -> LibraryPath:
        return self.fields.library_paths.pop(index)
