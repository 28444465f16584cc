"""Shared UI styling and output helpers for the setup wizard."""

from questionary import Style

STYLE = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("disabled", "fg:#858585 italic"),
    ]
)

BACK = "__back__"
NEXT = "__next__"


def print_heading(title: str) -> None:
    print(f"\n{title}\n{'─' * len(title)}\n")
