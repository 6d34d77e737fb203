import pytest

import termmask
from termmask import SessionResult, digits_only
from termmask import _main


class FakeAsk:
    def __init__(self, result):
        self.result = result
        self.calls = []

    def __call__(self, label=None, **kwargs):
        self.calls.append((label, kwargs))
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result


@pytest.fixture
def fake_ask(monkeypatch):
    def install(result):
        fake = FakeAsk(result)
        monkeypatch.setattr(_main, "ask_secret", fake)
        return fake

    return install


def test_cli_version(capsys):
    assert termmask.cli(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"termmask {termmask.__version__}"


def test_cli_prints_secret(fake_ask, capsys):
    fake = fake_ask(SessionResult("hunter2", False))
    assert termmask.cli(["--label", "Password: ", "--mask", "#"]) == 0
    assert capsys.readouterr().out == "hunter2\n"

    label, kwargs = fake.calls[0]
    assert label == "Password: "
    assert kwargs["mask"] == "#"
    assert kwargs["beep"] is False
    assert kwargs["cancel_on_escape"] is False
    assert "policy" not in kwargs


def test_cli_options(fake_ask):
    fake = fake_ask(SessionResult("1234", False))
    assert termmask.cli(["--beep", "--cancel-on-escape", "--digits"]) == 0
    label, kwargs = fake.calls[0]
    assert label is None
    assert kwargs["beep"] is True
    assert kwargs["cancel_on_escape"] is True
    assert kwargs["policy"] is digits_only


def test_cli_cancelled(fake_ask, capsys):
    fake_ask(SessionResult("", True))
    assert termmask.cli(["--cancel-on-escape"]) == 1
    assert capsys.readouterr().out == ""


def test_cli_interrupted(fake_ask, capsys):
    fake_ask(KeyboardInterrupt())
    assert termmask.cli([]) == 130
    assert capsys.readouterr().out == ""


def test_getsecret(monkeypatch):
    monkeypatch.setattr(_main, "ask_secret", FakeAsk(SessionResult("abc", False)))
    assert _main.getsecret("Key: ") == "abc"
    monkeypatch.setattr(_main, "ask_secret", FakeAsk(SessionResult("", True)))
    assert _main.getsecret("Key: ") is None


def test_ask_secret_validates_before_touching_terminal():
    # stdin=None would fall back to the real stdin; the error must come first
    with pytest.raises(termmask.InvalidConfiguration):
        termmask.ask_secret("Password: ", policy=None)
    with pytest.raises(termmask.InvalidConfiguration):
        termmask.ask_secret("")


def test_log_forwarding_is_opt_in():
    from termmask.utils import logger, enable_log_forwarding, UDPHandler

    assert not any(isinstance(h, UDPHandler) for h in logger.handlers)
    handler = enable_log_forwarding()
    try:
        assert handler in logger.handlers
    finally:
        logger.removeHandler(handler)
        handler.close()
