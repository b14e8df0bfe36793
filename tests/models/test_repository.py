"""Tests for the repository model."""

import pytest

from tentacle.models import Repository, Server


class TestRepository:
    """Test Repository class."""

    def test_defaults_to_dotcom(self):
        assert Repository("octocat", "Hello-World").server == Server.dotcom()

    def test_equality_ignores_case(self):
        first = Repository("OctoCat", "Hello-World")
        second = Repository("octocat", "hello-world")
        assert first == second
        assert hash(first) == hash(second)

    def test_different_server_not_equal(self):
        enterprise = Server.enterprise("https://ghe.example.com")
        assert Repository("o", "r") != Repository("o", "r", enterprise)

    def test_str(self):
        assert str(Repository("octocat", "Hello-World")) == (
            "octocat/Hello-World"
        )


class TestParse:
    """Test Repository.parse."""

    def test_slug(self):
        assert Repository.parse("octocat/Hello-World") == Repository(
            "octocat", "Hello-World"
        )

    def test_with_server(self):
        server = Server.enterprise("https://ghe.example.com")
        assert Repository.parse("team/app", server).server == server

    @pytest.mark.parametrize(
        "slug", ["", "octocat", "a/b/c", "/repo", "owner/"]
    )
    def test_invalid_slug(self, slug):
        with pytest.raises(ValueError, match="expected OWNER/NAME"):
            Repository.parse(slug)
