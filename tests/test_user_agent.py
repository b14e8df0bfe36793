"""Tests for the process-wide user agent."""

import threading

import pytest

from tentacle.user_agent import get_user_agent, set_user_agent


def test_unset_by_default():
    assert get_user_agent() is None


def test_set_once():
    set_user_agent("my-app/1.0")
    assert get_user_agent() == "my-app/1.0"


def test_second_set_fails():
    """Test the user agent cannot be replaced once set."""
    set_user_agent("my-app/1.0")
    with pytest.raises(RuntimeError, match="already been set"):
        set_user_agent("my-app/2.0")
    assert get_user_agent() == "my-app/1.0"


@pytest.mark.parametrize("value", ["", "   "])
def test_empty_value_rejected(value):
    with pytest.raises(ValueError, match="must not be empty"):
        set_user_agent(value)
    assert get_user_agent() is None


def test_concurrent_set_has_single_winner():
    """Test only one of many racing threads sets the value."""
    failures = []

    def attempt(index):
        try:
            set_user_agent(f"agent/{index}")
        except RuntimeError:
            failures.append(index)

    threads = [
        threading.Thread(target=attempt, args=(i,)) for i in range(8)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(failures) == 7
    assert get_user_agent().startswith("agent/")
