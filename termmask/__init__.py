"""
termmask - read secrets from the terminal, showing a mask instead.
"""

from .policy import (  # noqa
    DEFAULT_CHARS,
    InvalidConfiguration,
    AcceptancePolicy,
    CharSetPolicy,
    PredicatePolicy,
    digits_only,
)
from .session import (  # noqa
    KeyEvent,
    SessionConfig,
    SessionResult,
    MaskedInputSession,
)
from ._main import ask_secret, getsecret  # noqa
from ._cli import cli  # noqa

__version__ = "0.1.0"
version_info = tuple(map(int, __version__.split(".")))
