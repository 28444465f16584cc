"""Welcome step: where the configuration file should live."""

import questionary
from questionary import Choice

from onboarding.constants import CONFIG_IN_WORKING_DIR
from onboarding.controller import StepController, WelcomeVariant
from onboarding.ui import NEXT, STYLE, print_heading


def run_welcome_step(controller: StepController) -> bool:
    """Show the welcome variant chosen at start. Returns False if cancelled."""
    print_heading("Welcome to Stash")
    if controller.welcome_variant is WelcomeVariant.SPECIFIC:
        return _run_specific(controller)
    return _run_generic(controller)


def _run_specific(controller: StepController) -> bool:
    print("Stash could not load the configuration file it was pointed at:")
    print(f"  {controller.state.fields.config_location}\n")
    print("The next step creates a new configuration at that location.\n")
    choice = questionary.select(
        "Continue?",
        choices=[Choice("Next", NEXT)],
        style=STYLE,
    ).ask()
    if choice is None:
        return False
    controller.advance()
    return True


def location_choices(controller: StepController) -> list[Choice]:
    platform = controller.platform
    home = Choice(
        f"In the {platform.fallback_stash_dir} directory ({platform.home_stash_dir})",
        "",
    )
    if controller.working_dir_allowed():
        cwd = Choice(
            f"In the current working directory {platform.working_dir_token} ({platform.working_dir})",
            CONFIG_IN_WORKING_DIR,
        )
    else:
        cwd = Choice(
            f"In the current working directory {platform.working_dir_token}",
            CONFIG_IN_WORKING_DIR,
            disabled="not available when running as the macOS app, working directory is /",
        )
    return [home, cwd]


def _run_generic(controller: StepController) -> bool:
    platform = controller.platform
    print("No configuration file was found in the working directory or at")
    print(f"  {platform.fallback_config_path}\n")
    print("Stash looks for config.yml in the current working directory first,")
    print(f"then in {platform.fallback_stash_dir}. Choose where to store it.\n")

    location = questionary.select(
        "Where do you want to store your Stash configuration?",
        choices=location_choices(controller),
        style=STYLE,
    ).ask()
    if location is None:
        return False
    controller.choose_config_location(location)
    return True
