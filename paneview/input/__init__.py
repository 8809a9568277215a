"""Input-layer public API for key decoding and the focus state machine.

Exports are split between low-level terminal decoding (`read_key`) and the
key handlers applied by the runtime loop.
"""

from .key_dispatch import KeyContext, QUIT_KEYS, go_back, handle_key, open_file, open_selected_entry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyContext",
    "QUIT_KEYS",
    "go_back",
    "handle_key",
    "open_file",
    "open_selected_entry",
    "read_key",
]
