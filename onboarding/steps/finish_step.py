"""Finish step: success instructions or the setup error."""

import questionary
from questionary import Choice

from onboarding.controller import StepController
from onboarding.ui import BACK, STYLE, print_heading

_QUIT = "__quit__"

ISSUES_URL = "https://github.com/stashapp/stash/issues"
DISCORD_URL = "https://discord.gg/2TsNFKt"


def run_error_step(controller: StepController) -> bool:
    """Show the failure. Back returns to the paths step; Quit returns False."""
    print_heading("Oh no! Something went wrong")
    print("Something went wrong while setting up your system. Here is the error we received:\n")
    print(f"  {controller.state.setup_error}\n")
    print("If this looks like a problem with your inputs, go back and fix them up.")
    print(f"Otherwise, raise a bug at {ISSUES_URL} or ask for help on Discord ({DISCORD_URL}).\n")

    choice = questionary.select(
        "What would you like to do?",
        choices=[Choice("Back to paths", BACK), Choice("Quit", _QUIT)],
        style=STYLE,
    ).ask()
    if choice != BACK:
        return False
    controller.retreat(2)
    return True


def run_success_step(server_url: str) -> None:
    print_heading("Success! Your system has been created!")
    print("You will be taken to the Configuration page next. It lets you customise")
    print("which files to include and exclude, set a username and password, and more.")
    print("After that, run Tasks > Scan to add your media to Stash.\n")
    print(f"Open {server_url} to continue.")
    print(f"For help, see the in-app manual, {ISSUES_URL} or Discord ({DISCORD_URL}).\n")
    print("Thanks for trying Stash!")
