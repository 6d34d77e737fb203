import sys

from .session import SessionConfig, MaskedInputSession
from .term import TerminalContext, TerminalKeySource, TerminalOutput


def ask_secret(label=None, stdin=None, stdout=None, **options):
    """Ask the user for a secret on the terminal, showing a mask instead.

    The keyword arguments are passed to ``SessionConfig``: mask, beep,
    cancel_on_escape and policy. Returns a ``SessionResult``.

    The terminal is in raw mode while the prompt runs, and is restored
    afterwards, also on errors. Ctrl-c raises KeyboardInterrupt.
    """

    # Validate before touching the terminal
    config = SessionConfig(label=label, **options)

    stdin = stdin or sys.__stdin__
    stdout = stdout or sys.__stdout__
    stdout.flush()

    with TerminalContext(stdin=stdin, stdout=stdout):
        key_source = TerminalKeySource(stdin.fileno())
        session = MaskedInputSession(config, key_source, TerminalOutput(stdout))
        return session.run()


def getsecret(label=None, **kwargs):
    """Like ``ask_secret()``, but return the text, or None if cancelled."""
    result = ask_secret(label, **kwargs)
    if result.is_cancelled:
        return None
    return result.text
