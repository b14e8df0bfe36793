"""Tests for the response envelope."""

import pytest

from tentacle.models import Response


def test_case_insensitive_lookup():
    response = Response({"X-RateLimit-Remaining": "59"})
    assert response["x-ratelimit-remaining"] == "59"
    assert response.get("X-RATELIMIT-REMAINING") == "59"
    assert "x-RateLimit-remaining" in response


def test_missing_header():
    response = Response()
    assert len(response) == 0
    assert response.get("ETag") is None
    with pytest.raises(KeyError):
        response["ETag"]


def test_repeated_headers_are_kept():
    """Test every value of a repeated header is available."""
    response = Response([("Link", "<a>"), ("Link", "<b>")])
    assert response.get_all("link") == ["<a>", "<b>"]
    assert response.get_all("Warning") == []


def test_equality_ignores_name_case():
    first = Response({"ETag": '"abc"', "Server": "GitHub.com"})
    second = Response({"server": "GitHub.com", "etag": '"abc"'})
    assert first == second
    assert hash(first) == hash(second)


def test_values_are_case_sensitive():
    assert Response({"ETag": "abc"}) != Response({"ETag": "ABC"})


def test_read_only():
    response = Response({"ETag": "abc"})
    with pytest.raises(TypeError):
        response.headers["ETag"] = "other"
