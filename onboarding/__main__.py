"""Entry point: python -m onboarding [--url URL] [--verbose]."""

import argparse
import logging
import sys
from pathlib import Path

import httpx
from dotenv import load_dotenv

from core.logging_config import setup_logging
from core.secrets import resolve_api_key
from core.settings import load_settings
from core.stash_client import StashClient, StashClientError
from onboarding.constants import (
    ONBOARDING_NOT_REQUIRED,
    ONBOARDING_QUIT,
    ONBOARDING_SUCCESS,
    ONBOARDING_UNREACHABLE,
)
from onboarding.wizard import run_wizard

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m onboarding",
        description="First-run setup wizard for a Stash server.",
    )
    parser.add_argument("--url", help="Stash server URL (overrides server.url)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the setup wizard. Returns the process exit code."""
    args = _parse_args(argv)
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    settings = load_settings(project_root / "config")
    if args.url:
        settings["server"]["url"] = args.url
    setup_logging(project_root, settings, verbose=args.verbose)

    client = StashClient.from_settings(settings, api_key=resolve_api_key(settings))

    try:
        result = run_wizard(client, settings)
    except KeyboardInterrupt:
        print("\n\nSetup cancelled.")
        return ONBOARDING_QUIT
    except (httpx.HTTPError, StashClientError) as e:
        logger.error("Could not reach %s: %s", client.endpoint, e)
        print(f"\nCould not reach the Stash server at {client.endpoint}: {e}")
        return ONBOARDING_UNREACHABLE

    if result.success:
        return ONBOARDING_SUCCESS
    if result.redirect:
        print(f"\nNo setup needed ({result.reason}).")
        print(f"Open {settings['server']['url']} to use Stash.")
        return ONBOARDING_NOT_REQUIRED

    print("\nSetup cancelled.")
    return ONBOARDING_QUIT


if __name__ == "__main__":
    sys.exit(main())
