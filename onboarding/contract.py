"""Contracts for the wizard's external collaborators.

core.stash_client.StashClient implements SetupBackend over GraphQL; tests use
in-memory fakes.
"""

from typing import Any, Callable, Protocol, runtime_checkable

from core.models import Configuration, SystemStatus


@runtime_checkable
class SetupBackend(Protocol):
    """Server operations the wizard consumes."""

    async def get_system_status(self) -> SystemStatus:
        """Read once at start."""

    async def get_configuration(self) -> Configuration:
        """Existing (partial) configuration used to seed fields and skip prompts."""

    async def perform_setup(self, setup_input: dict[str, Any]) -> None:
        """Create config, database and directories. Raises on failure."""

    async def acknowledge_release_notes(
        self, latest_note: int, ui: dict[str, Any] | None = None
    ) -> None:
        """Best-effort; failures do not affect the wizard outcome."""


# Returns the chosen directory, or None when the picker was cancelled.
FolderBrowser = Callable[[], str | None]
