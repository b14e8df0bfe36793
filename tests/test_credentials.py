"""Tests for request credentials."""

import base64

from tentacle.credentials import BasicCredentials, TokenCredentials


class TestTokenCredentials:
    """Test TokenCredentials class."""

    def test_header_value(self):
        assert (
            TokenCredentials("abc123").authorization_header_value()
            == "token abc123"
        )

    def test_repr_hides_token(self):
        assert "abc123" not in repr(TokenCredentials("abc123"))


class TestBasicCredentials:
    """Test BasicCredentials class."""

    def test_header_value(self):
        value = BasicCredentials("octocat", "hunter2")
        assert value.authorization_header_value() == (
            "Basic b2N0b2NhdDpodW50ZXIy"
        )

    def test_unicode_round_trip(self):
        """Test non-ASCII credentials are encoded as UTF-8."""
        header = BasicCredentials(
            "jürgen", "pässwörd:✓"
        ).authorization_header_value()
        scheme, encoded = header.split(" ")
        assert scheme == "Basic"
        assert base64.b64decode(encoded).decode() == "jürgen:pässwörd:✓"

    def test_repr_hides_password(self):
        text = repr(BasicCredentials("octocat", "hunter2"))
        assert "octocat" in text
        assert "hunter2" not in text

    def test_equality(self):
        assert BasicCredentials("a", "b") == BasicCredentials("a", "b")
        assert BasicCredentials("a", "b") != TokenCredentials("b")
