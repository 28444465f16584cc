"""Wizard flow errors."""


class WizardError(Exception):
    """Base class for setup wizard errors."""


class AlreadyConfiguredError(WizardError):
    """The system is already set up; the wizard must not render any step."""


class RestrictedRootError(WizardError):
    """The working directory may not be used as the configuration root."""


class InvalidTransitionError(WizardError):
    """An action was requested on a step that does not offer it."""


class SubmissionInProgressError(WizardError):
    """A setup submission is already outstanding."""
