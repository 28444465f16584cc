"""Submit collected fields to the server and move to the finish step."""

import logging
from typing import Any

from onboarding.contract import SetupBackend
from onboarding.controller import Step, StepController
from onboarding.errors import InvalidTransitionError, SubmissionInProgressError
from onboarding.state import WizardFields

logger = logging.getLogger(__name__)


def setup_input(fields: WizardFields) -> dict[str, Any]:
    """SetupInput payload built from the raw fields.

    Empty values are sent as-is: the server applies its own defaults, which
    are computed independently of the Confirm preview.
    """
    return {
        "configLocation": fields.config_location,
        "stashes": [p.to_input() for p in fields.library_paths],
        "databaseFile": fields.database_file,
        "generatedLocation": fields.generated_location,
        "cacheLocation": fields.cache_location,
        "storeBlobsInDatabase": fields.store_blobs_in_database,
        "blobsLocation": fields.blobs_location,
    }


def error_message(exc: BaseException) -> str:
    """The exception's own message, or its repr when the message is empty."""
    return str(exc) or repr(exc)


class SubmissionOrchestrator:
    """Runs the setup call from the Confirm step."""

    def __init__(
        self,
        backend: SetupBackend,
        latest_release_note: int,
        ui_settings: dict[str, Any] | None = None,
    ) -> None:
        self._backend = backend
        self._latest_release_note = latest_release_note
        self._ui_settings = ui_settings or {}

    async def submit(self, controller: StepController) -> bool:
        """Perform setup, then advance to FINISH whether it succeeded or failed.

        Returns True on success. On failure the message is stored in
        state.setup_error and the FINISH step renders as an error. If the
        call is interrupted, the exception propagates and the wizard stays
        on the Confirm step.
        """
        state = controller.state
        if controller.step is not Step.CONFIRM:
            raise InvalidTransitionError(
                f"setup can only be submitted from the confirm step, not {controller.step.value!r}"
            )
        if state.submitting:
            raise SubmissionInProgressError("setup is already being submitted")

        state.submitting = True
        state.setup_error = ""
        ok = False
        try:
            logger.info("submitting setup (%d library paths)", len(state.fields.library_paths))
            await self._backend.perform_setup(setup_input(state.fields))
        except Exception as e:
            state.setup_error = error_message(e)
            logger.error("setup failed: %s", state.setup_error)
        else:
            ok = True
            logger.info("setup completed")
            await self._acknowledge()
        finally:
            state.submitting = False
        # An interrupted call (cancellation, Ctrl-C) propagates and stays on CONFIRM.
        controller.advance()
        return ok

    async def _acknowledge(self) -> None:
        try:
            await self._backend.acknowledge_release_notes(
                self._latest_release_note, self._ui_settings
            )
        except Exception as e:
            logger.warning("Failed to mark release notes as seen: %s", e)
