import io
import os
import sys

import pytest

from termmask import KeyEvent, SessionConfig, MaskedInputSession
from termmask.term import TerminalContext, TerminalKeySource, TerminalOutput


skip_on_windows = pytest.mark.skipif(
    sys.platform.startswith("win"), reason="uses pipes and select"
)


def make_source(bb, close=True):
    fd_read, fd_write = os.pipe()
    os.write(fd_write, bb)
    if close:
        os.close(fd_write)
    return TerminalKeySource(fd_read, escape_timeout=0.01), fd_write


@skip_on_windows
def test_key_source_one_event_per_call():
    source, _ = make_source(b"ab\x1b[Dc\r")
    keys = [source.next_key_event().key for _ in range(5)]
    assert keys == ["a", "b", "left", "c", "enter"]
    with pytest.raises(EOFError):
        source.next_key_event()


@skip_on_windows
def test_key_source_lone_escape():
    source, fd_write = make_source(b"\x1b", close=False)
    assert source.next_key_event() == KeyEvent("escape")
    os.write(fd_write, b"x")
    assert source.next_key_event() == KeyEvent("x", "x")
    os.close(fd_write)


@skip_on_windows
def test_key_source_utf8_and_backspace():
    source, _ = make_source("é\x7f".encode())
    assert source.next_key_event().char == "é"
    assert source.next_key_event().key == "backspace"


@skip_on_windows
def test_key_source_ctrl_c():
    source, _ = make_source(b"a\x03")
    source.next_key_event()
    with pytest.raises(KeyboardInterrupt):
        source.next_key_event()


def make_output(columns=80):
    file_out = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
    return TerminalOutput(file_out, columns=columns), file_out.buffer


def test_output_write_and_clear():
    output, buffer = make_output()
    output.write("Password: ***")
    output.clear_line()
    output.write("Password: **")
    assert buffer.getvalue() == b"Password: ***\r\x1b[0JPassword: **"


def test_output_clear_wrapped_line():
    output, buffer = make_output(columns=10)
    output.write("Password: " + "*" * 15)  # three rows
    output.clear_line()
    assert buffer.getvalue().endswith(b"\r\x1b[2A\x1b[0J")

    # Exactly filling a row does not count as wrapped
    output, buffer = make_output(columns=10)
    output.write("*" * 10)
    output.clear_line()
    assert buffer.getvalue().endswith(b"\r\x1b[0J")


def test_output_newline_resets_line():
    output, buffer = make_output(columns=10)
    output.write("*" * 15)
    output.write("\n")
    output.clear_line()
    assert buffer.getvalue() == b"*" * 15 + b"\n\r\x1b[0J"


def test_output_beep():
    output, buffer = make_output()
    output.beep()
    assert buffer.getvalue() == b"\a"


@skip_on_windows
def test_context_on_non_tty(capsys):
    fd_read, fd_write = os.pipe()
    with os.fdopen(fd_read, "rb") as stdin, os.fdopen(fd_write, "wb") as stdout:
        context = TerminalContext(stdin=stdin, stdout=stdout)
        assert "not a tty" in capsys.readouterr().err
        with context:
            with pytest.raises(RuntimeError):
                context.__enter__()
        # Can be entered again after exit
        with context:
            pass


@skip_on_windows
def test_unix_flags():
    import termios
    from termmask.term._context_unix import patch_lflag, patch_iflag

    lflag = patch_lflag(termios.ECHO | termios.ICANON | termios.ISIG | termios.ECHOE)
    assert lflag == termios.ECHOE
    iflag = patch_iflag(termios.ICRNL | termios.IXON | termios.ISTRIP)
    assert iflag == termios.ISTRIP


def run_session_on_bytes(bb, **options):
    source, _ = make_source(bb)
    output, buffer = make_output()
    session = MaskedInputSession(SessionConfig(**options), source, output)
    return session.run(), buffer.getvalue()


@skip_on_windows
def test_modified_keys_do_not_leak_into_secret():
    for seq in [b"\x1b[1;5H", b"\x1b[15;2~", b"\x1b[1;2P", b"\x1b[1;7P", b"\x1b[99;2~"]:
        result, drawn = run_session_on_bytes(b"ab" + seq + b"c\r")
        assert result.text == "abc", repr(seq)
        assert drawn.endswith(b"***\n")


@skip_on_windows
def test_alt_key_does_not_cancel():
    result, _ = run_session_on_bytes(b"ab\x1bxc\r", cancel_on_escape=True)
    assert not result.is_cancelled
    assert result.text == "abc"

    # But escape itself does
    result, _ = run_session_on_bytes(b"ab\x1b", cancel_on_escape=True)
    assert result.is_cancelled
    assert result.text == ""
