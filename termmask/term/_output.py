import shutil
import logging


logger = logging.getLogger("termmask")


class TerminalOutput:
    """Render sink that draws the masked line on a terminal.

    Writes go to the binary buffer of the given text file, and are flushed
    right away. Keeps track of how long the current line is, so that a line
    that wrapped over multiple rows can still be cleared.
    """

    def __init__(self, file_out, columns=None):
        self._file_out = file_out
        self._columns = columns
        self._line_len = 0

    def _write(self, text):
        self._file_out.buffer.write(
            text.encode(self._file_out.encoding, errors="ignore")
        )
        self._file_out.buffer.flush()

    def _get_columns(self):
        if self._columns:
            return self._columns
        return shutil.get_terminal_size().columns or 80

    def clear_line(self):
        """Erase the current line, including rows it wrapped onto."""
        n = max(0, self._line_len - 1) // self._get_columns()
        text = "\r"
        if n:
            text += f"\x1b[{n}A"
        text += "\x1b[0J"
        self._write(text)
        self._line_len = 0

    def write(self, text):
        self._write(text)
        if "\n" in text:
            self._line_len = len(text.rsplit("\n", 1)[1])
        else:
            self._line_len += len(text)

    def beep(self):
        self._write("\a")
