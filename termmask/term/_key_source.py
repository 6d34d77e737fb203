import os
import sys
import logging
from collections import deque
from codecs import getincrementaldecoder

from .input_keys import EscapeCodeDecoder
from ..session import KeyEvent


logger = logging.getLogger("termmask")

if not sys.platform.startswith("win"):
    import select


class TerminalKeySource:
    """Read key events from a file descriptor, one at a time.

    Bytes are read in chunks, decoded as utf-8, and then decoded into keys.
    Keys that arrive in the same chunk are queued, so that exactly one key
    is handed out per call to ``next_key_event()``.

    The terminal should be in raw mode (see ``TerminalContext``), so that
    keys arrive as they are pressed and are not echoed.
    """

    def __init__(self, fd, escape_timeout=0.025):
        self._fd = fd
        self._escape_timeout = escape_timeout
        self._decode_utf8 = getincrementaldecoder("utf-8")(errors="replace").decode
        self._decoder = EscapeCodeDecoder()
        self._keys = deque()
        self._closed = False

    def next_key_event(self):
        """Block until a key is available and return it as a ``KeyEvent``.

        Raises EOFError when the input is closed, and KeyboardInterrupt on
        ctrl-c (in raw mode the terminal no longer sends SIGINT for it).
        """
        while not self._keys:
            self._read()
        key = self._keys.popleft()
        if key == "ctrl+c":
            raise KeyboardInterrupt()
        return KeyEvent.from_key(key)

    def _read(self):
        if self._closed:
            raise EOFError("input is closed")

        bb = os.read(self._fd, 1024)
        if not bb:  # stdin is closed
            logger.info("input closed")
            self._closed = True
            text = self._decode_utf8(b"", final=True)
            self._keys.extend(self._decoder.decode(text, flush=True))
            return

        keys = self._decoder.decode(self._decode_utf8(bb))

        # A lone escape could be the start of an escape sequence that is
        # still underway. Give the terminal a moment to send the rest.
        if self._decoder.pending and not self._more_input_soon():
            keys += self._decoder.decode("", flush=True)

        self._keys.extend(keys)

    def _more_input_soon(self):
        if sys.platform.startswith("win"):
            # Console handles cannot be selected on; the Windows console
            # sends full sequences at once anyway.
            return False
        readable, _, _ = select.select([self._fd], [], [], self._escape_timeout)
        return bool(readable)
