import pytest

from core.config import env_flag


@pytest.mark.parametrize("value,expected", [
    ("1", True),
    ("true", True),
    (" Yes ", True),
    ("on", True),
    ("0", False),
    ("false", False),
    ("no", False),
])
def test_env_flag(monkeypatch, value, expected):
    monkeypatch.setenv("ATTENDWISE_TEST_FLAG", value)

    assert env_flag("ATTENDWISE_TEST_FLAG") is expected


def test_env_flag_unset_uses_default(monkeypatch):
    monkeypatch.delenv("ATTENDWISE_TEST_FLAG", raising=False)

    assert env_flag("ATTENDWISE_TEST_FLAG") is False
    assert env_flag("ATTENDWISE_TEST_FLAG", default=True) is True


def test_env_flag_blank_uses_default(monkeypatch):
    monkeypatch.setenv("ATTENDWISE_TEST_FLAG", "  ")

    assert env_flag("ATTENDWISE_TEST_FLAG", default=True) is True
