"""Async GraphQL client for the Stash server endpoints used during setup."""

import logging
from typing import Any

import httpx

from core.models import Configuration, SystemStatus

logger = logging.getLogger(__name__)

SYSTEM_STATUS_QUERY = """
query SystemStatus {
  systemStatus {
    status
    configPath
    os
    workingDir
    homeDir
    databasePath
    databaseSchema
    appSchema
  }
}
"""

CONFIGURATION_QUERY = """
query Configuration {
  configuration {
    general {
      stashes {
        path
        excludeVideo
        excludeImage
      }
      generatedPath
      cachePath
      blobsPath
    }
    ui
  }
}
"""

SETUP_MUTATION = """
mutation Setup($input: SetupInput!) {
  setup(input: $input)
}
"""

CONFIGURE_UI_MUTATION = """
mutation ConfigureUI($input: Map) {
  configureUI(input: $input)
}
"""


class StashClientError(Exception):
    """The server rejected a request (HTTP error status or GraphQL errors)."""


class StashClient:
    """Minimal Stash GraphQL client implementing the wizard's SetupBackend contract.

    Each call opens its own AsyncClient, so the instance can be shared across
    separate asyncio.run() invocations.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.endpoint = base_url.rstrip("/") + "/graphql"
        self._api_key = api_key
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: dict[str, Any], api_key: str | None = None) -> "StashClient":
        server = settings.get("server") or {}
        return cls(
            base_url=server.get("url", "http://localhost:9999"),
            api_key=api_key,
            timeout=float(server.get("timeout", 30.0)),
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["ApiKey"] = self._api_key
        return headers

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """POST a GraphQL document. Returns the data object.

        Raises StashClientError on HTTP >= 400 or a non-empty errors array.
        Transport failures propagate as httpx exceptions.
        """
        body: dict[str, Any] = {"query": query}
        if variables is not None:
            body["variables"] = variables
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            resp = await client.post(self.endpoint, json=body, headers=self._headers())
        if resp.status_code >= 400:
            raise StashClientError(_http_error_message(resp))
        payload = resp.json()
        errors = payload.get("errors") or []
        if errors:
            raise StashClientError(_join_errors(errors))
        return payload.get("data") or {}

    async def get_system_status(self) -> SystemStatus:
        data = await self.execute(SYSTEM_STATUS_QUERY)
        return SystemStatus.model_validate(data.get("systemStatus") or {})

    async def get_configuration(self) -> Configuration:
        data = await self.execute(CONFIGURATION_QUERY)
        return Configuration.model_validate(data.get("configuration") or {})

    async def perform_setup(self, setup_input: dict[str, Any]) -> None:
        """Run the setup mutation with raw, unresolved wizard fields."""
        await self.execute(SETUP_MUTATION, {"input": setup_input})

    async def acknowledge_release_notes(
        self,
        latest_note: int,
        ui: dict[str, Any] | None = None,
    ) -> None:
        """Mark release notes up to latest_note as seen, keeping other UI settings."""
        await self.execute(
            CONFIGURE_UI_MUTATION,
            {"input": {**(ui or {}), "lastNoteSeen": latest_note}},
        )


def _join_errors(errors: list[Any]) -> str:
    messages = []
    for err in errors:
        if isinstance(err, dict):
            messages.append(str(err.get("message") or err))
        else:
            messages.append(str(err))
    return "; ".join(messages)


def _http_error_message(resp: httpx.Response) -> str:
    """Prefer GraphQL error text from the body; fall back to the status code."""
    try:
        errors = resp.json().get("errors") or []
    except (ValueError, AttributeError):
        errors = []
    if errors:
        return _join_errors(errors)
    return f"HTTP {resp.status_code}"
