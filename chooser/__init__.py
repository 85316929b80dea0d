"""Chooser: pick from a list using fzf, rofi or dmenu."""

__version__ = "0.1.0"

from chooser.errors import (
    ChooserError,
    NoExecutablesFound,
    NoSuitableExecutable,
    ProcessExecutionFailed,
    ProcessIOFailed,
    ProcessStartFailed,
    UnknownSelection,
)
from chooser.models import ChooserClass, Invocation, Options, SelectionContext
from chooser.picker import Picker, choose, from_filter, from_map, from_sequence, from_values

__all__ = [
    "__version__",
    "ChooserClass",
    "ChooserError",
    "Invocation",
    "NoExecutablesFound",
    "NoSuitableExecutable",
    "Options",
    "Picker",
    "ProcessExecutionFailed",
    "ProcessIOFailed",
    "ProcessStartFailed",
    "SelectionContext",
    "UnknownSelection",
    "choose",
    "from_filter",
    "from_map",
    "from_sequence",
    "from_values",
]
