"""Confirm step: preview the resolved paths and submit."""

import asyncio

import questionary
from questionary import Choice

from onboarding.controller import StepController
from onboarding.paths import preview_lines, resolve_config
from onboarding.submission import SubmissionOrchestrator
from onboarding.ui import BACK, STYLE, print_heading

_CONFIRM = "__confirm__"


def render_preview(controller: StepController) -> str:
    fields = controller.state.fields
    resolved = resolve_config(controller.platform, fields)
    out = []
    for label, value in preview_lines(resolved, fields.library_paths):
        out.append(f"{label}:")
        out.extend(f"  {line}" for line in value.splitlines())
    return "\n".join(out)


def run_confirm_step(
    controller: StepController,
    orchestrator: SubmissionOrchestrator,
) -> bool:
    """Show the summary; submit on confirm. Returns False if cancelled."""
    print_heading("Nearly there!")
    print("Please confirm the following settings.\n")
    print(render_preview(controller))
    print()

    choice = questionary.select(
        "Create your system with these settings?",
        choices=[Choice("Confirm", _CONFIRM), Choice("Back", BACK)],
        style=STYLE,
    ).ask()
    if choice is None:
        return False
    if choice == BACK:
        controller.retreat()
        return True

    print("\nCreating your system...")
    print("If ffmpeg is not yet installed, Stash downloads it now. This may take a while.\n")
    asyncio.run(orchestrator.submit(controller))
    return True
