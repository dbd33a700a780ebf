"""Input-layer public API for key decoding and action translation.

Exports are split between low-level terminal decoding (`read_key`) and the
logical actions the dispatcher consumes.
"""

from .actions import Action, ActionKind, translate_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .registry import ActionBinding, ActionRegistry

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "Action",
    "ActionKind",
    "translate_key",
    "ActionBinding",
    "ActionRegistry",
]
