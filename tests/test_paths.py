"""Tests for onboarding.paths and onboarding.platform."""

from copy import deepcopy

import pytest

from core.models import SystemStatus
from onboarding.constants import BLOBS_IN_DATABASE
from onboarding.paths import preview_lines, resolve_config
from onboarding.platform import PlatformContext
from onboarding.state import LibraryPath, WizardFields


@pytest.fixture
def unix() -> PlatformContext:
    return PlatformContext.for_os("linux", working_dir="/srv/stash", home_dir="/home/me")


@pytest.fixture
def windows() -> PlatformContext:
    return PlatformContext.for_os("windows", working_dir="C:\\stash", home_dir="C:\\Users\\me")


def test_empty_inputs_default_under_fallback_dir(unix: PlatformContext) -> None:
    """All-empty fields resolve to the fixed names under $HOME/.stash."""
    resolved = resolve_config(unix, WizardFields())
    assert resolved.config_path == "$HOME/.stash/config.yml"
    assert resolved.database_file == "$HOME/.stash/stash-go.sqlite"
    assert resolved.generated_path == "$HOME/.stash/generated"
    assert resolved.cache_path == "$HOME/.stash/cache"
    assert resolved.blobs_path == "$HOME/.stash/blobs"
    assert resolved.blobs_in_database is False


def test_empty_inputs_on_windows_use_windows_tokens(windows: PlatformContext) -> None:
    resolved = resolve_config(windows, WizardFields())
    assert resolved.config_path == "%USERPROFILE%\\.stash\\config.yml"
    assert resolved.database_file == "%USERPROFILE%\\.stash\\stash-go.sqlite"
    assert resolved.blobs_path == "%USERPROFILE%\\.stash\\blobs"


def test_working_dir_sentinel_resolves_under_pwd(unix: PlatformContext) -> None:
    """config.yml means "current working directory"; defaults follow it."""
    resolved = resolve_config(unix, WizardFields(config_location="config.yml"))
    assert resolved.config_path == "$PWD/config.yml"
    assert resolved.database_file == "$PWD/stash-go.sqlite"
    assert resolved.generated_path == "$PWD/generated"
    assert resolved.cache_path == "$PWD/cache"
    assert resolved.blobs_path == "$PWD/blobs"


def test_working_dir_sentinel_on_windows(windows: PlatformContext) -> None:
    resolved = resolve_config(windows, WizardFields(config_location="config.yml"))
    assert resolved.config_path == "%CD%\\config.yml"


def test_explicit_config_path_keeps_defaults_in_fallback_dir(unix: PlatformContext) -> None:
    """An explicit config path is used verbatim; other defaults do not follow it."""
    fields = WizardFields(config_location="/data/stash/my-config.yml")
    resolved = resolve_config(unix, fields)
    assert resolved.config_path == "/data/stash/my-config.yml"
    assert resolved.database_file == "$HOME/.stash/stash-go.sqlite"
    assert resolved.generated_path == "$HOME/.stash/generated"
    assert resolved.cache_path == "$HOME/.stash/cache"
    assert resolved.blobs_path == "$HOME/.stash/blobs"


def test_explicit_values_are_kept(unix: PlatformContext) -> None:
    fields = WizardFields(
        database_file="/db/stash.sqlite",
        generated_location="/fast/generated",
        cache_location="/tmp/cache",
        blobs_location="/bulk/blobs",
    )
    resolved = resolve_config(unix, fields)
    assert resolved.config_path == "$HOME/.stash/config.yml"
    assert resolved.database_file == "/db/stash.sqlite"
    assert resolved.generated_path == "/fast/generated"
    assert resolved.cache_path == "/tmp/cache"
    assert resolved.blobs_path == "/bulk/blobs"


@pytest.mark.parametrize("blobs_location", ["", "/bulk/blobs"])
def test_blobs_in_database_overrides_location(
    unix: PlatformContext, blobs_location: str
) -> None:
    fields = WizardFields(store_blobs_in_database=True, blobs_location=blobs_location)
    resolved = resolve_config(unix, fields)
    assert resolved.blobs_path == BLOBS_IN_DATABASE
    assert resolved.blobs_in_database is True


def test_resolve_is_idempotent_and_pure(unix: PlatformContext) -> None:
    fields = WizardFields(
        config_location="config.yml",
        cache_location="/c",
        library_paths=[LibraryPath("/media")],
    )
    before = deepcopy(fields)
    first = resolve_config(unix, fields)
    second = resolve_config(unix, fields)
    assert first == second
    assert fields == before


def test_restricted_root_only_for_darwin_at_slash() -> None:
    assert PlatformContext.for_os("darwin", working_dir="/").restricted_root is True
    assert PlatformContext.for_os("darwin", working_dir="/Users/me").restricted_root is False
    assert PlatformContext.for_os("linux", working_dir="/").restricted_root is False


def test_platform_from_status_defaults_working_dir() -> None:
    status = SystemStatus(status="SETUP", os="linux", working_dir="", home_dir="/home/me")
    platform = PlatformContext.from_status(status)
    assert platform.working_dir == "."
    assert platform.home_stash_dir == "/home/me/.stash"
    assert platform.fallback_config_path == "$HOME/.stash/config.yml"


def test_home_stash_dir_falls_back_to_token() -> None:
    assert PlatformContext.for_os("windows").home_stash_dir == "%USERPROFILE%\\.stash"


def test_preview_lines_lists_libraries_with_exclusions(unix: PlatformContext) -> None:
    libraries = [
        LibraryPath("/media/videos", exclude_image=True),
        LibraryPath("/media/all"),
    ]
    fields = WizardFields(store_blobs_in_database=True, library_paths=libraries)
    lines = dict(preview_lines(resolve_config(unix, fields), libraries))
    assert lines["Library directories"] == "/media/videos (excludes images)\n/media/all"
    assert lines["Blobs directory"] == BLOBS_IN_DATABASE
    assert lines["Configuration file location"] == "$HOME/.stash/config.yml"


def test_preview_lines_without_libraries(unix: PlatformContext) -> None:
    lines = dict(preview_lines(resolve_config(unix, WizardFields()), []))
    assert lines["Library directories"] == "(none)"
