"""
Acceptance policies decide which typed characters end up in the secret.

Reserved keys (enter, escape, backspace) are handled by the session and
never reach a policy.
"""

import string


# The standard printable keyboard characters: letters, digits, the symbols on
# a US keyboard, and space.
DEFAULT_CHARS = tuple(
    sorted(
        set(string.ascii_letters)
        | set(string.digits)
        | set("~!@#$%^&*()_+-=`[{]};:'\"\\,<.>/?")
        | {" "}
    )
)


class InvalidConfiguration(ValueError):
    """Raised when a masked input session is configured incorrectly."""


class AcceptancePolicy:
    """Base class for acceptance policies."""

    def accepts(self, event):
        raise NotImplementedError()

    def __call__(self, event):
        return self.accepts(event)


class CharSetPolicy(AcceptancePolicy):
    """Accept events whose character is in a fixed set.

    Callers who want to extend the default set can do so with e.g.
    ``CharSetPolicy(DEFAULT_CHARS + ("é",))``.
    """

    def __init__(self, chars=DEFAULT_CHARS):
        self._chars = frozenset(chars)
        if not all(isinstance(c, str) and len(c) == 1 for c in self._chars):
            raise InvalidConfiguration("allowed chars must be single characters")

    @property
    def chars(self):
        """The allowed characters, as a sorted tuple."""
        return tuple(sorted(self._chars))

    def accepts(self, event):
        return event.char in self._chars

    def __repr__(self):
        return f"<CharSetPolicy with {len(self._chars)} chars>"


class PredicatePolicy(AcceptancePolicy):
    """Accept events for which a caller-supplied function returns True.

    The function receives the raw ``KeyEvent``. The default character set is
    not applied on top of it.
    """

    def __init__(self, func):
        if func is None:
            raise InvalidConfiguration("custom checker cannot be null")
        if not callable(func):
            raise InvalidConfiguration(f"custom checker must be callable, not {func!r}")
        self._func = func

    def accepts(self, event):
        return bool(self._func(event))

    def __repr__(self):
        name = getattr(self._func, "__name__", repr(self._func))
        return f"<PredicatePolicy {name}>"


def as_policy(policy):
    """Turn a user-supplied policy or predicate into an AcceptancePolicy.

    Passing None is an error, because it almost always means the caller
    meant to pass a checker but did not. Omit the option to get the default.
    """
    if isinstance(policy, AcceptancePolicy):
        return policy
    return PredicatePolicy(policy)


def digits_only(event):
    """A predicate that only accepts the digits 0-9."""
    return len(event.char) == 1 and event.char in string.digits
