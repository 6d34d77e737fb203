"""
Utilities to work with the terminal.

The masked input session itself never touches the terminal. This subpackage
provides the pieces it talks to: a context that puts the terminal in raw
no-echo mode, a key source that decodes raw input (including escape
sequences) into key events, and an output sink that draws the masked line.

We don't use curses, because that's Unix only. Using vt100-ish escape
sequences (supported on win10 and up) allows us to target a broad audience,
with nearly the same code.
"""

from ._context import TerminalContext  # noqa
from ._key_source import TerminalKeySource  # noqa
from ._output import TerminalOutput  # noqa
from .input_keys import EscapeCodeDecoder, KEY_MAP  # noqa
