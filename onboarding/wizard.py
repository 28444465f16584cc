"""Setup wizard orchestration."""

import asyncio
import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable

from core.models import Configuration
from core.settings import get_setting
from onboarding.contract import FolderBrowser, SetupBackend
from onboarding.controller import Screen, StepController
from onboarding.errors import AlreadyConfiguredError
from onboarding.steps import (
    browse_folder,
    run_confirm_step,
    run_error_step,
    run_paths_step,
    run_success_step,
    run_welcome_step,
)
from onboarding.submission import SubmissionOrchestrator

logger = logging.getLogger(__name__)


@dataclass
class WizardResult:
    """Result of running the wizard."""

    success: bool
    redirect: bool = False  # True when the system was already configured
    reason: str = ""


def _load_configuration(backend: SetupBackend) -> Configuration:
    """Existing configuration, or an empty one if the server cannot provide it."""
    try:
        return asyncio.run(backend.get_configuration())
    except Exception as e:
        logger.warning("Could not read existing configuration, starting empty: %s", e)
        return Configuration()


def run_wizard(
    backend: SetupBackend,
    settings: dict[str, Any],
    browse: FolderBrowser = browse_folder,
) -> WizardResult:
    """Run the setup wizard against backend.

    Returns WizardResult(success=True) when setup completed.
    Returns WizardResult(success=False, redirect=True) when no setup is needed.
    Returns WizardResult(success=False) when the user cancelled or quit.
    Errors fetching the system status propagate to the caller.
    """
    status = asyncio.run(backend.get_system_status())
    configuration = None if status.configured else _load_configuration(backend)

    try:
        controller = StepController(status, configuration)
    except AlreadyConfiguredError as e:
        logger.info("Setup not required: %s", e)
        return WizardResult(success=False, redirect=True, reason=str(e))

    orchestrator = SubmissionOrchestrator(
        backend,
        latest_release_note=int(get_setting(settings, "onboarding.latest_release_note", 0)),
        ui_settings=controller.configuration.ui,
    )
    handlers: dict[Screen, Callable[[StepController], bool]] = {
        Screen.WELCOME_GENERIC: run_welcome_step,
        Screen.WELCOME_SPECIFIC: run_welcome_step,
        Screen.SET_PATHS: partial(run_paths_step, browse=browse),
        Screen.CONFIRM: partial(run_confirm_step, orchestrator=orchestrator),
        Screen.FINISH_ERROR: run_error_step,
    }

    while True:
        screen = controller.screen
        logger.debug("showing %s", screen.value)
        if screen is Screen.FINISH_SUCCESS:
            run_success_step(get_setting(settings, "server.url", ""))
            return WizardResult(success=True)
        if not handlers[screen](controller):
            return WizardResult(success=False)
