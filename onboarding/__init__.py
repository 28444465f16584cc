"""First-run setup wizard for a Stash server."""

from onboarding.constants import (
    ONBOARDING_NOT_REQUIRED,
    ONBOARDING_QUIT,
    ONBOARDING_SUCCESS,
    ONBOARDING_UNREACHABLE,
)

__all__ = [
    "ONBOARDING_SUCCESS",
    "ONBOARDING_QUIT",
    "ONBOARDING_UNREACHABLE",
    "ONBOARDING_NOT_REQUIRED",
]
