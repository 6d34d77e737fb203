"""
The masked input session: a small state machine that consumes key events,
keeps the typed secret in a buffer, and redraws a masked line after every
key.

The session does not touch the terminal itself. It gets its keys from a key
source (anything with a blocking ``next_key_event()``), and draws via a sink
(anything with ``clear_line()``, ``write(text)`` and ``beep()``). See
``termmask.term`` for the implementations that talk to a real terminal.
"""

import logging

from .policy import InvalidConfiguration, CharSetPolicy, as_policy


logger = logging.getLogger("termmask")

# Reserved keys. These are checked in this order, before the acceptance
# policy gets to see an event. Enter arrives as "enter" in raw mode, but as
# "ctrl+j" (a bare newline) when input is piped.
SUBMIT_KEYS = ("enter", "ctrl+j", "ctrl+m")
CANCEL_KEYS = ("escape",)
DELETE_KEYS = ("backspace",)

READING = "reading"
SUBMITTED = "submitted"
CANCELLED = "cancelled"

_default_policy = object()  # sentinel, so that None can be rejected


class KeyEvent:
    """A single keystroke.

    The ``key`` is the logical key name, as produced by the escape code
    decoder, e.g. "enter", "backspace", "up", "ctrl+c", or the character
    itself for normal keys. The ``char`` is the printable character, or the
    empty string if the key does not produce one.
    """

    __slots__ = ("_key", "_char")

    def __init__(self, key, char=""):
        self._key = key
        self._char = char

    @classmethod
    def from_key(cls, key):
        """Create an event from a decoded key name."""
        if len(key) == 1 and key.isprintable():
            return cls(key, key)
        return cls(key)

    @property
    def key(self):
        return self._key

    @property
    def char(self):
        return self._char

    def __eq__(self, other):
        if not isinstance(other, KeyEvent):
            return NotImplemented
        return self._key == other._key and self._char == other._char

    def __hash__(self):
        return hash((self._key, self._char))

    def __repr__(self):
        # Deliberately does not show the char, events may end up in logs.
        kind = "char" if self._char else self._key
        return f"<KeyEvent {kind}>"


class SessionConfig:
    """The options for one masked input session.

    Parameters:
        mask (str): the character to show for each typed character. Default "*".
        beep (bool): whether to beep on every keystroke. Default False.
        cancel_on_escape (bool): whether escape cancels the input. When False,
            escape is ignored. Default False.
        label (str): optional text to show in front of the masked input.
        policy: optional custom acceptance policy; an ``AcceptancePolicy`` or
            a callable that receives a ``KeyEvent`` and returns a bool. When
            given, it replaces the default character set. Passing None
            raises ``InvalidConfiguration``.

    The config is read-only once created.
    """

    def __init__(
        self,
        mask="*",
        beep=False,
        cancel_on_escape=False,
        label=None,
        policy=_default_policy,
    ):
        if not isinstance(mask, str) or len(mask) != 1:
            raise InvalidConfiguration(f"mask must be a single character, not {mask!r}")
        if label is not None:
            if not isinstance(label, str):
                raise InvalidConfiguration(f"label must be a str, not {label!r}")
            if not label:
                raise InvalidConfiguration("label cannot be empty, omit it instead")

        self._mask = mask
        self._beep = bool(beep)
        self._cancel_on_escape = bool(cancel_on_escape)
        self._label = label
        if policy is _default_policy:
            self._policy = CharSetPolicy()
            self._custom_policy = False
        else:
            self._policy = as_policy(policy)
            self._custom_policy = True

    @property
    def mask(self):
        return self._mask

    @property
    def beep(self):
        return self._beep

    @property
    def cancel_on_escape(self):
        return self._cancel_on_escape

    @property
    def label(self):
        return self._label

    @property
    def policy(self):
        """The acceptance policy in use (the default one if none was given)."""
        return self._policy

    @property
    def has_custom_policy(self):
        return self._custom_policy

    def __repr__(self):
        return (
            f"<SessionConfig mask={self._mask!r} beep={self._beep} "
            f"cancel_on_escape={self._cancel_on_escape} label={self._label!r} "
            f"policy={self._policy!r}>"
        )


class SessionResult:
    """The outcome of a session: the captured text and whether it was cancelled."""

    __slots__ = ("_text", "_is_cancelled")

    def __init__(self, text, is_cancelled):
        self._text = text
        self._is_cancelled = is_cancelled

    @property
    def text(self):
        """The captured text. Empty when cancelled."""
        return self._text

    @property
    def is_cancelled(self):
        return self._is_cancelled

    def __repr__(self):
        status = "cancelled" if self._is_cancelled else "submitted"
        return f"<SessionResult {status}, {len(self._text)} chars>"


class MaskedInputSession:
    """Collect a secret from a stream of key events.

    The session can be run only once. Invalid configuration is detected
    when the session is created, before any key is read.
    """

    def __init__(self, config, key_source, sink):
        if config is None:
            config = SessionConfig()
        elif not isinstance(config, SessionConfig):
            raise InvalidConfiguration(f"config must be a SessionConfig, not {config!r}")
        self._config = config
        self._key_source = key_source
        self._sink = sink
        self._buffer = []
        self._state = READING

    @property
    def config(self):
        return self._config

    @property
    def state(self):
        """The current state: "reading", "submitted" or "cancelled"."""
        return self._state

    def run(self):
        """Run the session until the user submits or cancels.

        Returns a ``SessionResult``.
        """
        if self._state != READING:
            raise RuntimeError("A masked input session can only be run once.")

        logger.info("masked input session started")
        self.render()
        while self._state == READING:
            event = self._key_source.next_key_event()
            self.process_event(event)

        self._sink.write("\n")
        if self._state == CANCELLED:
            result = SessionResult("", True)
        else:
            result = SessionResult("".join(self._buffer), False)
        logger.info("masked input session %s", self._state)
        return result

    def process_event(self, event):
        """Process a single key event and redraw."""
        config = self._config

        if config.beep:
            self._sink.beep()

        if event.key in SUBMIT_KEYS:
            logger.debug("submit")
            self._state = SUBMITTED
        elif event.key in CANCEL_KEYS:
            if config.cancel_on_escape:
                logger.debug("cancel")
                self._buffer.clear()
                self._state = CANCELLED
            else:
                logger.debug("escape ignored")
        elif event.key in DELETE_KEYS:
            if self._buffer:
                self._buffer.pop()
            logger.debug("delete, %d chars left", len(self._buffer))
        elif config.policy.accepts(event) and event.char:
            self._buffer.append(event.char)
            logger.debug("accepted, %d chars", len(self._buffer))
        else:
            logger.debug("rejected")

        self.render()

    def render(self):
        """Redraw the label and one mask char per buffered char."""
        text = (self._config.label or "") + self._config.mask * len(self._buffer)
        self._sink.clear_line()
        self._sink.write(text)
