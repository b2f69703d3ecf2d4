"""Tests for the demonstration script."""

import io
import os
from unittest import mock

import pytest

from pricemath import demo
from pricemath.demo import DOGS, find_where, main, run_demo
from pricemath.errors import ApiError
from pricemath.models import Dog, GitHubUser


class StubGitHubClient:
    """GitHubClient returning a fixed user."""

    def __init__(self):
        self.calls = []

    def get_user(self, username: str) -> GitHubUser:
        self.calls.append(username)
        return GitHubUser(login=username, id=1, name="Stub User")


class FailingGitHubClient:
    """GitHubClient that always fails."""

    def get_user(self, username: str) -> GitHubUser:
        raise ApiError("Cannot connect to http://127.0.0.1:1")

    def close(self) -> None:
        pass


class TestFindWhere:
    """Test find_where function."""

    def test_finds_first_match(self):
        """Test lookup by a single attribute."""
        dog = find_where(DOGS, breed="King Charles")
        assert dog == Dog(name="snickers", age=2, breed="King Charles")

    def test_multiple_attributes(self):
        """Test every attribute must match."""
        assert find_where(DOGS, breed="Poodle", age=5).name == "prudence"
        assert find_where(DOGS, breed="Poodle", age=2) is None

    def test_no_match(self):
        """Test None when nothing matches."""
        assert find_where(DOGS, breed="Beagle") is None
        assert find_where([], breed="Poodle") is None

    def test_unknown_attribute(self):
        """Test items lacking the attribute never match."""
        assert find_where(DOGS, colour="brown") is None

    def test_returns_first_of_several(self):
        """Test order of the input is respected."""
        dogs = [Dog(name="a", age=1, breed="Pug"), Dog(name="b", age=1, breed="Pug")]
        assert find_where(dogs, breed="Pug").name == "a"


class TestRunDemo:
    """Test run_demo function."""

    def test_offline(self):
        """Test offline run prints every local snippet."""
        out = io.StringIO()
        assert run_demo(out, offline=True) == 0
        lines = out.getvalue().splitlines()
        assert lines[0] == "$5,000.00"
        assert "Coupons: BLACKFRIDAY, FREESHIP, HOHOHO" in lines
        assert "100 with tax: $113.00" in lines
        assert "100 at 25% off: $75.00" in lines
        assert any("snickers" in line for line in lines)
        assert "what" in lines
        assert not any(line.startswith("User:") for line in lines)

    def test_with_client(self):
        """Test the user lookup uses the given client."""
        out = io.StringIO()
        client = StubGitHubClient()
        assert run_demo(out, client=client, username="octocat") == 0
        assert client.calls == ["octocat"]
        assert '"login":"octocat"' in out.getvalue()

    def test_failed_lookup_counted(self, capsys):
        """Test a failing lookup is reported and counted."""
        out = io.StringIO()
        assert run_demo(out, client=FailingGitHubClient()) == 1
        assert out.getvalue().startswith("$5,000.00")
        assert "User lookup failed" in capsys.readouterr().err


class TestMain:
    """Test main entry point."""

    def test_offline_exit_code(self, capsys):
        """Test offline run exits 0."""
        assert main(["--offline"]) == 0
        assert "$5,000.00" in capsys.readouterr().out

    def test_failure_exit_code(self, capsys):
        """Test a failed snippet gives exit code 1."""
        with mock.patch.object(demo, "HttpGitHubClient", return_value=FailingGitHubClient()):
            assert main(["--user", "wesbos"]) == 1

    def test_invalid_timeout_reported(self, capsys):
        """Test configuration errors in the HTTP snippet are reported."""
        with mock.patch.dict(os.environ, {"PRICEMATH_HTTP_TIMEOUT": "never"}):
            assert main([]) == 1
        assert "PRICEMATH_HTTP_TIMEOUT" in capsys.readouterr().err

    def test_help(self, capsys):
        """Test --help exits cleanly."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "--offline" in capsys.readouterr().out
