"""Default path resolution for the Confirm preview.

Pure functions: no I/O and no mutation of the inputs. The server applies its
own defaulting to the raw fields at setup time; the values computed here are
only shown to the user.
"""

from dataclasses import dataclass

from onboarding.constants import (
    BLOBS_DIRNAME,
    BLOBS_IN_DATABASE,
    CACHE_DIRNAME,
    CONFIG_FILENAME,
    CONFIG_IN_WORKING_DIR,
    DATABASE_FILENAME,
    GENERATED_DIRNAME,
)
from onboarding.platform import PlatformContext
from onboarding.state import LibraryPath, WizardFields


@dataclass(frozen=True)
class ResolvedConfig:
    """Fully defaulted paths, all derived from the same base directory."""

    config_path: str
    database_file: str
    generated_path: str
    cache_path: str
    blobs_path: str
    blobs_in_database: bool = False


def base_dir(platform: PlatformContext, config_location: str) -> str:
    """Directory the defaults are placed under.

    An explicit config path does not move the defaults: they stay under the
    fallback directory, same as for an empty location.
    """
    if config_location == CONFIG_IN_WORKING_DIR:
        return platform.working_dir_token
    return platform.fallback_stash_dir


def resolve_config(platform: PlatformContext, fields: WizardFields) -> ResolvedConfig:
    base = base_dir(platform, fields.config_location)

    def _or_default(value: str, name: str) -> str:
        return value if value else platform.join(base, name)

    if fields.config_location in ("", CONFIG_IN_WORKING_DIR):
        config_path = platform.join(base, CONFIG_FILENAME)
    else:
        config_path = fields.config_location

    if fields.store_blobs_in_database:
        blobs = BLOBS_IN_DATABASE
    else:
        blobs = _or_default(fields.blobs_location, BLOBS_DIRNAME)

    return ResolvedConfig(
        config_path=config_path,
        database_file=_or_default(fields.database_file, DATABASE_FILENAME),
        generated_path=_or_default(fields.generated_location, GENERATED_DIRNAME),
        cache_path=_or_default(fields.cache_location, CACHE_DIRNAME),
        blobs_path=blobs,
        blobs_in_database=fields.store_blobs_in_database,
    )


def preview_lines(
    resolved: ResolvedConfig,
    library_paths: list[LibraryPath],
) -> list[tuple[str, str]]:
    """Ordered (label, value) pairs for the confirmation summary."""
    libraries = [
        f"{p.path} {p.exclusions()}".rstrip() for p in library_paths
    ]
    return [
        ("Configuration file location", resolved.config_path),
        ("Library directories", "\n".join(libraries) if libraries else "(none)"),
        ("Database file path", resolved.database_file),
        ("Generated directory", resolved.generated_path),
        ("Cache directory", resolved.cache_path),
        ("Blobs directory", resolved.blobs_path),
    ]
