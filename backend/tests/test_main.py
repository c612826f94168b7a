"""Tests for the command line entry point."""

import sys
from unittest.mock import patch

import pytest

from talentgate.__main__ import format_access_matrix, main
from talentgate.config import AppConfig
from talentgate.errors import UnknownUserError
from talentgate.session import Session


@pytest.fixture
def session() -> Session:
    """Create a session over the demo roster."""
    return Session.seeded(AppConfig(email_domain="flowdot.ai"))


def test_access_matrix(session: Session) -> None:
    """Test the capability by user table."""
    lines = format_access_matrix(session).splitlines()

    assert lines[0].split() == ["capability", "u1", "u2", "u3"]
    rows = {line.split()[0]: line.split()[1:] for line in lines[1:10]}
    assert rows["sourcing.can_create_lists"] == ["yes", "yes", "yes"]
    assert rows["evaluation.can_view_pii"] == ["yes", "no", "yes"]
    assert "u2: Mike Ross (ASSOCIATE) views=[interviews, lists, settings] team=no" in lines


def test_access_matrix_single_user(session: Session) -> None:
    """Test restricting the table to selected users."""
    lines = format_access_matrix(session, ["u3"]).splitlines()
    assert lines[0].split() == ["capability", "u3"]


def test_access_matrix_unknown_user(session: Session) -> None:
    """Test that unknown users are reported."""
    with pytest.raises(UnknownUserError):
        format_access_matrix(session, ["u404"])


def test_main(capsys: pytest.CaptureFixture[str], tmp_path) -> None:
    """Test running the entry point."""
    argv = ["talentgate", "--env-file", str(tmp_path / "missing.env"), "--user", "u2"]
    with patch.object(sys, "argv", argv):
        main()

    out = capsys.readouterr().out
    assert out.splitlines()[0].split() == ["capability", "u2"]
    assert "Mike Ross" in out


def test_main_unknown_user(tmp_path) -> None:
    """Test that an unknown user exits with a usage error."""
    argv = ["talentgate", "--env-file", str(tmp_path / "missing.env"), "--user", "u404"]
    with patch.object(sys, "argv", argv), pytest.raises(SystemExit):
        main()
