"""Tests for core.stash_client."""

import json

import pytest

from core.models import SystemStatusEnum
from core.stash_client import StashClient, StashClientError

URL = "http://stash.local:9999/graphql"


def _client(api_key: str | None = None) -> StashClient:
    return StashClient("http://stash.local:9999/", api_key=api_key)


@pytest.mark.asyncio
async def test_get_system_status_parses_payload(httpx_mock) -> None:
    httpx_mock.add_response(
        url=URL,
        method="POST",
        json={
            "data": {
                "systemStatus": {
                    "status": "SETUP",
                    "configPath": "",
                    "os": "darwin",
                    "workingDir": "/",
                    "homeDir": "/Users/me",
                    "databasePath": None,
                    "databaseSchema": None,
                    "appSchema": 67,
                }
            }
        },
    )
    status = await _client().get_system_status()
    assert status.status is SystemStatusEnum.SETUP
    assert status.configured is False
    assert status.os == "darwin"
    assert status.working_dir == "/"
    assert status.home_dir == "/Users/me"
    assert status.app_schema == 67


@pytest.mark.asyncio
async def test_get_configuration_handles_null_paths(httpx_mock) -> None:
    httpx_mock.add_response(
        url=URL,
        method="POST",
        json={
            "data": {
                "configuration": {
                    "general": {
                        "stashes": [
                            {"path": "/media", "excludeVideo": True, "excludeImage": False}
                        ],
                        "generatedPath": None,
                        "cachePath": "/cache",
                        "blobsPath": "",
                    },
                    "ui": None,
                }
            }
        },
    )
    configuration = await _client().get_configuration()
    assert configuration.general.stashes[0].exclude_video is True
    assert configuration.general.generated_path == ""
    assert configuration.general.cache_path == "/cache"
    assert configuration.ui == {}


@pytest.mark.asyncio
async def test_perform_setup_sends_input_and_api_key(httpx_mock) -> None:
    httpx_mock.add_response(url=URL, method="POST", json={"data": {"setup": True}})
    setup_input = {"configLocation": "", "stashes": [], "databaseFile": ""}

    await _client(api_key="secret").perform_setup(setup_input)

    request = httpx_mock.get_requests()[0]
    assert request.headers["ApiKey"] == "secret"
    body = json.loads(request.content)
    assert "setup(input: $input)" in body["query"]
    assert body["variables"] == {"input": setup_input}


@pytest.mark.asyncio
async def test_no_api_key_header_without_key(httpx_mock) -> None:
    httpx_mock.add_response(url=URL, method="POST", json={"data": {"setup": True}})
    await _client().perform_setup({})
    assert "ApiKey" not in httpx_mock.get_requests()[0].headers


@pytest.mark.asyncio
async def test_graphql_errors_raise_with_message(httpx_mock) -> None:
    httpx_mock.add_response(
        url=URL,
        method="POST",
        json={"errors": [{"message": "disk full"}], "data": None},
    )
    with pytest.raises(StashClientError, match="^disk full$"):
        await _client().perform_setup({})


@pytest.mark.asyncio
async def test_http_error_uses_body_errors_when_present(httpx_mock) -> None:
    httpx_mock.add_response(
        url=URL,
        method="POST",
        status_code=422,
        json={"errors": [{"message": "invalid path"}, {"message": "not writable"}]},
    )
    with pytest.raises(StashClientError, match="invalid path; not writable"):
        await _client().perform_setup({})


@pytest.mark.asyncio
async def test_http_error_without_body(httpx_mock) -> None:
    httpx_mock.add_response(url=URL, method="POST", status_code=502, text="bad gateway")
    with pytest.raises(StashClientError, match="HTTP 502"):
        await _client().get_system_status()


@pytest.mark.asyncio
async def test_acknowledge_release_notes_merges_ui(httpx_mock) -> None:
    httpx_mock.add_response(url=URL, method="POST", json={"data": {"configureUI": {}}})
    await _client().acknowledge_release_notes(20240826, {"theme": "dark", "lastNoteSeen": 1})
    body = json.loads(httpx_mock.get_requests()[0].content)
    assert body["variables"]["input"] == {"theme": "dark", "lastNoteSeen": 20240826}


def test_from_settings_reads_server_section() -> None:
    client = StashClient.from_settings(
        {"server": {"url": "http://nas:9999", "timeout": 5}}, api_key="k"
    )
    assert client.endpoint == "http://nas:9999/graphql"
