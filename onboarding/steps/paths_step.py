"""Set-paths step: library directories, database file and storage locations.

Any location prompt accepts "..." to open the folder picker instead of typing.
"""

import os

import questionary
from questionary import Choice

from onboarding.contract import FolderBrowser
from onboarding.controller import StepController
from onboarding.state import WizardState
from onboarding.ui import BACK, NEXT, STYLE, print_heading

_BROWSE = "..."
_ADD = "__add__"
_EDIT = "__edit__"
_REMOVE = "__remove__"
_DONE = "__done__"

_LOCATION_PROMPTS = {
    "generated": (
        "Where can Stash store its generated content (previews, sprites, transcodes)?",
        "generated_location",
    ),
    "cache": (
        "Where can Stash store cache files?",
        "cache_location",
    ),
    "blobs": (
        "Where can Stash store binary data such as covers and images?",
        "blobs_location",
    ),
}


def _expand(path: str) -> str:
    """Expand a leading ~ the way the folder picker does."""
    return os.path.expanduser(path)


def browse_folder() -> str | None:
    """Folder picker: path prompt restricted to directories. None if cancelled."""
    chosen = questionary.path(
        "Select a folder:",
        only_directories=True,
        style=STYLE,
    ).ask()
    if not chosen or not chosen.strip():
        return None
    return _expand(chosen.strip())


def run_paths_step(controller: StepController, browse: FolderBrowser = browse_folder) -> bool:
    """Collect paths, then navigate. Returns False if cancelled."""
    print_heading("Set up your paths")
    state = controller.state
    fields = state.fields

    if not _edit_library_paths(state, browse):
        return False

    database = questionary.text(
        "Database file path (empty for default):",
        default=fields.database_file,
        style=STYLE,
    ).ask()
    if database is None:
        return False
    database = database.strip()
    fields.database_file = _expand(database) if database else database

    prompted = controller.prompted_path_fields()
    for name in ("generated", "cache"):
        if name in prompted and not _ask_location(state, name, browse):
            return False

    if "blobs" in prompted:
        in_db = questionary.confirm(
            "Store blobs in the database?",
            default=fields.store_blobs_in_database,
            style=STYLE,
        ).ask()
        if in_db is None:
            return False
        fields.store_blobs_in_database = in_db
        if not in_db and not _ask_location(state, "blobs", browse):
            return False

    return _navigate(controller)


def _ask_location(state: WizardState, name: str, browse: FolderBrowser) -> bool:
    message, attr = _LOCATION_PROMPTS[name]
    value = questionary.text(
        message,
        default=getattr(state.fields, attr),
        instruction=f"(empty for default, {_BROWSE} to browse)",
        style=STYLE,
    ).ask()
    if value is None:
        return False
    value = value.strip()
    if value == _BROWSE:
        chosen = browse()
        if chosen:
            setattr(state.fields, attr, chosen)
        return True
    setattr(state.fields, attr, _expand(value) if value else value)
    return True


def _library_label(index: int, state: WizardState) -> str:
    entry = state.fields.library_paths[index]
    return f"{entry.path} {entry.exclusions()}".rstrip()


def _edit_library_paths(state: WizardState, browse: FolderBrowser) -> bool:
    """Library directory editor loop. Returns False if cancelled."""
    while True:
        paths = state.fields.library_paths
        if paths:
            print("Library directories:")
            for i in range(len(paths)):
                print(f"  {i + 1}. {_library_label(i, state)}")
            print()
        else:
            print("No library directories yet.\n")

        choices = [Choice("Add a library directory...", _ADD)]
        if paths:
            choices.append(Choice("Edit exclusions...", _EDIT))
            choices.append(Choice("Remove a library directory...", _REMOVE))
        choices.append(Choice("Done", _DONE))

        action = questionary.select(
            "Where is your media located?",
            choices=choices,
            style=STYLE,
        ).ask()
        if action is None:
            return False
        if action == _DONE:
            return True
        if action == _ADD:
            if not _add_library_path(state, browse):
                return False
        elif action == _EDIT:
            if not _edit_exclusions(state):
                return False
        elif action == _REMOVE:
            index = _pick_library_path(state, "Remove which directory?")
            if index is None:
                return False
            state.remove_library_path(index)


def _add_library_path(state: WizardState, browse: FolderBrowser) -> bool:
    path = questionary.text(
        "Library directory:",
        instruction=f"({_BROWSE} to browse)",
        style=STYLE,
    ).ask()
    if path is None:
        return False
    path = path.strip()
    if path == _BROWSE:
        path = browse() or ""
    elif path:
        path = _expand(path)
    if not path:
        print("No directory chosen.\n")
        return True
    excludes = _ask_exclusions(False, False)
    if excludes is None:
        return False
    state.add_library_path(path, *excludes)
    return True


def _ask_exclusions(exclude_video: bool, exclude_image: bool) -> tuple[bool, bool] | None:
    selected = questionary.checkbox(
        "Exclude from this directory:",
        choices=[
            Choice("Videos", "video", checked=exclude_video),
            Choice("Images", "image", checked=exclude_image),
        ],
        style=STYLE,
    ).ask()
    if selected is None:
        return None
    return "video" in selected, "image" in selected


def _edit_exclusions(state: WizardState) -> bool:
    index = _pick_library_path(state, "Edit which directory?")
    if index is None:
        return False
    entry = state.fields.library_paths[index]
    excludes = _ask_exclusions(entry.exclude_video, entry.exclude_image)
    if excludes is None:
        return False
    state.update_library_path(index, exclude_video=excludes[0], exclude_image=excludes[1])
    return True


def _pick_library_path(state: WizardState, prompt: str) -> int | None:
    choices = [
        Choice(_library_label(i, state), i)
        for i in range(len(state.fields.library_paths))
    ]
    return questionary.select(prompt, choices=choices, style=STYLE).ask()


def _navigate(controller: StepController) -> bool:
    choice = questionary.select(
        "Continue?",
        choices=[Choice("Next", NEXT), Choice("Back", BACK)],
        style=STYLE,
    ).ask()
    if choice is None:
        return False
    if choice == BACK:
        controller.retreat()
        return True
    if controller.leave_paths():
        return True

    proceed = questionary.confirm(
        "You have not added any library directories, so no media will be scanned. "
        "Continue anyway?",
        default=False,
        style=STYLE,
    ).ask()
    if proceed is None:
        return False
    if proceed:
        controller.confirm_empty_library()
    else:
        controller.dismiss_library_alert()
    return True
