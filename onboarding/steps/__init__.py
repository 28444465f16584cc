"""Setup wizard steps."""

from onboarding.steps.confirm_step import run_confirm_step
from onboarding.steps.finish_step import run_error_step, run_success_step
from onboarding.steps.paths_step import browse_folder, run_paths_step
from onboarding.steps.welcome_step import run_welcome_step

__all__ = [
    "browse_folder",
    "run_confirm_step",
    "run_error_step",
    "run_paths_step",
    "run_success_step",
    "run_welcome_step",
]
