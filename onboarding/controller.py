"""Step sequence and transition rules of the setup wizard."""

import logging
from enum import Enum

from core.config_check import needs_setup
from core.models import Configuration, SystemStatus
from onboarding.constants import CONFIG_IN_WORKING_DIR
from onboarding.errors import (
    AlreadyConfiguredError,
    InvalidTransitionError,
    RestrictedRootError,
)
from onboarding.platform import PlatformContext
from onboarding.state import WizardState

logger = logging.getLogger(__name__)


class Step(Enum):
    WELCOME = "welcome"
    SET_PATHS = "set_paths"
    CONFIRM = "confirm"
    FINISH = "finish"


class WelcomeVariant(Enum):
    GENERIC = "generic"  # No config path known; user picks where config lives
    SPECIFIC = "specific"  # A config path was given but could not be loaded


class Screen(Enum):
    """What is shown for the current step, with its variant resolved."""

    WELCOME_GENERIC = "welcome_generic"
    WELCOME_SPECIFIC = "welcome_specific"
    SET_PATHS = "set_paths"
    CONFIRM = "confirm"
    FINISH_SUCCESS = "finish_success"
    FINISH_ERROR = "finish_error"


STEPS: tuple[Step, ...] = (Step.WELCOME, Step.SET_PATHS, Step.CONFIRM, Step.FINISH)

# Optional SET_PATHS prompts, each skipped when the existing configuration fixes it
PATH_FIELDS: tuple[str, ...] = ("generated", "cache", "blobs")


class StepController:
    """Owns the step position of a WizardState and every transition on it.

    Construction is the entry guard: an already configured system raises
    AlreadyConfiguredError before any step exists.
    """

    def __init__(
        self,
        status: SystemStatus,
        configuration: Configuration | None = None,
        *,
        platform: PlatformContext | None = None,
        state: WizardState | None = None,
    ) -> None:
        required, reason = needs_setup(status)
        if not required:
            raise AlreadyConfiguredError(reason)

        self.status = status
        self.configuration = configuration or Configuration()
        self.platform = platform or PlatformContext.from_status(status)
        self.state = state or WizardState.seed(status, self.configuration)
        self.steps = STEPS
        self.welcome_variant = (
            WelcomeVariant.SPECIFIC if status.config_path else WelcomeVariant.GENERIC
        )
        self.state.step_index = min(max(self.state.step_index, 0), len(self.steps) - 1)

    @property
    def step(self) -> Step:
        return self.steps[self.state.step_index]

    @property
    def screen(self) -> Screen:
        step = self.step
        if step is Step.WELCOME:
            if self.welcome_variant is WelcomeVariant.SPECIFIC:
                return Screen.WELCOME_SPECIFIC
            return Screen.WELCOME_GENERIC
        if step is Step.SET_PATHS:
            return Screen.SET_PATHS
        if step is Step.CONFIRM:
            return Screen.CONFIRM
        return Screen.FINISH_ERROR if self.state.setup_error else Screen.FINISH_SUCCESS

    def advance(self) -> Step:
        """Move one step forward. No-op on the last step."""
        if self.state.step_index < len(self.steps) - 1:
            self.state.step_index += 1
            logger.debug("advanced to %s", self.step.value)
        return self.step

    def retreat(self, n: int = 1) -> Step:
        """Move n steps back (default 1), never before the first step.

        The error screen uses n=2 to return straight to SET_PATHS.
        """
        n = max(n, 1)
        self.state.step_index = max(0, self.state.step_index - n)
        self.state.library_alert = False
        logger.debug("went back %d step(s) to %s", n, self.step.value)
        return self.step

    def _require(self, step: Step) -> None:
        if self.step is not step:
            raise InvalidTransitionError(
                f"expected step {step.value!r}, current step is {self.step.value!r}"
            )

    def working_dir_allowed(self) -> bool:
        return not self.platform.restricted_root

    def choose_config_location(self, location: str) -> Step:
        """Generic welcome choice: "" for the home fallback, "config.yml" for the working dir."""
        self._require(Step.WELCOME)
        if location not in ("", CONFIG_IN_WORKING_DIR):
            raise ValueError(f"unsupported config location choice {location!r}")
        if location == CONFIG_IN_WORKING_DIR and not self.working_dir_allowed():
            raise RestrictedRootError(
                f"cannot set up in the working directory {self.platform.working_dir!r}"
            )
        self.state.fields.config_location = location
        return self.advance()

    def prompted_path_fields(self) -> tuple[str, ...]:
        general = self.configuration.general
        fixed = {
            "generated": bool(general.generated_path),
            "cache": bool(general.cache_path),
            "blobs": bool(general.blobs_path),
        }
        return tuple(name for name in PATH_FIELDS if not fixed[name])

    def leave_paths(self) -> bool:
        """Try to proceed from SET_PATHS.

        With no library paths the transition is refused and the confirmation
        alert is raised instead. Returns True when the step advanced.
        """
        self._require(Step.SET_PATHS)
        if self.state.fields.library_paths:
            self.advance()
            return True
        self.state.library_alert = True
        return False

    def confirm_empty_library(self) -> Step:
        """User accepted proceeding without any library path."""
        self._require(Step.SET_PATHS)
        if not self.state.library_alert:
            raise InvalidTransitionError("no library alert is pending")
        self.state.library_alert = False
        logger.info("continuing setup without library paths")
        return self.advance()

    def dismiss_library_alert(self) -> None:
        self.state.library_alert = False
