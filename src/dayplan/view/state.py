"""View state using context variables, shared by all renderers."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Context variable for the color theme
# Default is False (light palette)
_dark_mode_var: ContextVar[bool] = ContextVar("dark_mode", default=False)


def set_dark_mode(value: bool) -> None:
    """Set whether views should use the dark palette.

    Args:
        value: True for the dark palette, False for the light one
    """
    _dark_mode_var.set(value)


def get_dark_mode() -> bool:
    """Get whether views should use the dark palette.

    Returns:
        True if the dark palette is active, False otherwise
    """
    return _dark_mode_var.get()
