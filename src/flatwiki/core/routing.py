"""Request path parsing and title validation."""

import re
from enum import Enum
from typing import NamedTuple

# The title alphabet excludes "/" and ".", so a title can never leave the
# storage directory or collide with another title's file.
TITLE_PATTERN = re.compile(r"^[A-Za-z0-9]+$")
ACTION_PATH_PATTERN = re.compile(r"^/(edit|save|view)/([A-Za-z0-9]+)$")


class Operation(str, Enum):
    """Operations a request path can address."""

    VIEW = "view"
    EDIT = "edit"
    SAVE = "save"


class Action(NamedTuple):
    operation: Operation
    title: str


class InvalidPath(ValueError):
    """Raised when a request path does not address a known operation."""

    def __init__(self, path: str):
        super().__init__(f"Invalid path: {path!r}")
        self.path = path


def is_valid_title(title: str) -> bool:
    """Check whether a string is usable as a page title."""
    return TITLE_PATTERN.fullmatch(title) is not None


def parse_action_path(path: str) -> Action:
    """Split a request path into its operation and page title.

    Args:
        path: Request path, e.g. ``/view/FrontPage``.

    Returns:
        The matched ``Action``.

    Raises:
        InvalidPath: If the path is not ``/<edit|save|view>/<title>``.
    """
    match = ACTION_PATH_PATTERN.fullmatch(path)
    if match is None:
        raise InvalidPath(path)
    return Action(Operation(match.group(1)), match.group(2))
