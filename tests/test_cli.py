"""Tests for the command line front end."""

import re
from pathlib import Path
from unittest.mock import patch

import pytest

from pin_keeper.cli import main


def _run(db_path: Path, *args: str) -> int:
    return main(["--db", str(db_path), "--log-level", "WARNING", *args])


def _create(db_path: Path, capsys: pytest.CaptureFixture, username: str = "alice", *extra: str) -> str:
    assert _run(db_path, "--seed", "42", "create", username, *extra) == 0
    match = re.search(r"Generated PIN for user '.+': (\d+)", capsys.readouterr().out)
    assert match
    return match.group(1)


class TestCli:
    """Tests for pin-keeper subcommands."""

    def test_create_prints_pin(self, db_path: Path, capsys: pytest.CaptureFixture) -> None:
        pin = _create(db_path, capsys)
        assert len(pin) == 4
        assert db_path.exists()

    def test_create_six_digits(self, db_path: Path, capsys: pytest.CaptureFixture) -> None:
        assert len(_create(db_path, capsys, "bob", "--length", "6")) == 6

    def test_create_duplicate(self, db_path: Path, capsys: pytest.CaptureFixture) -> None:
        _create(db_path, capsys)
        assert _run(db_path, "create", "alice") == 1
        assert "already exists" in capsys.readouterr().out

    def test_create_invalid_username(self, db_path: Path, capsys: pytest.CaptureFixture) -> None:
        assert _run(db_path, "create", "a|b") == 1
        assert "INVALID_USERNAME" in capsys.readouterr().out

    def test_create_unencodable_username(self, db_path: Path, capsys: pytest.CaptureFixture) -> None:
        assert _run(db_path, "create", "\udcff") == 1
        assert "INVALID_USERNAME" in capsys.readouterr().out
        assert not db_path.exists()

    def test_auth(self, db_path: Path, capsys: pytest.CaptureFixture) -> None:
        pin = _create(db_path, capsys)
        assert _run(db_path, "auth", "alice", "--pin", pin) == 0
        assert "successful" in capsys.readouterr().out

    def test_auth_prompts_for_pin(self, db_path: Path, capsys: pytest.CaptureFixture) -> None:
        pin = _create(db_path, capsys)
        with patch("pin_keeper.cli.getpass.getpass", return_value=pin):
            assert _run(db_path, "auth", "alice") == 0

    def test_lockout(self, db_path: Path, capsys: pytest.CaptureFixture) -> None:
        pin = _create(db_path, capsys)

        assert _run(db_path, "auth", "alice", "--pin", "0000") == 1
        assert "Attempts remaining: 2" in capsys.readouterr().out
        _run(db_path, "auth", "alice", "--pin", "0000")
        _run(db_path, "auth", "alice", "--pin", "0000")
        assert "locked" in capsys.readouterr().out

        assert _run(db_path, "auth", "alice", "--pin", pin) == 1
        assert "Contact admin" in capsys.readouterr().out

    def test_unknown_user(self, db_path: Path, capsys: pytest.CaptureFixture) -> None:
        assert _run(db_path, "balance", "nobody", "--pin", "4829") == 1
        assert "No such user" in capsys.readouterr().out

    def test_balance_withdraw_deposit(self, db_path: Path, capsys: pytest.CaptureFixture) -> None:
        pin = _create(db_path, capsys)

        assert _run(db_path, "balance", "alice", "--pin", pin) == 0
        assert "Balance: 1000.00" in capsys.readouterr().out

        assert _run(db_path, "withdraw", "alice", "200", "--pin", pin) == 0
        assert "Balance: 800.00" in capsys.readouterr().out

        assert _run(db_path, "deposit", "alice", "12.34", "--pin", pin) == 0
        assert "Balance: 812.34" in capsys.readouterr().out

    def test_withdraw_rejections(self, db_path: Path, capsys: pytest.CaptureFixture) -> None:
        pin = _create(db_path, capsys)

        assert _run(db_path, "withdraw", "alice", "5000", "--pin", pin) == 1
        assert "Insufficient funds" in capsys.readouterr().out
        assert _run(db_path, "withdraw", "alice", "-1", "--pin", pin) == 1
        assert "Invalid amount" in capsys.readouterr().out

    def test_change_pin(self, db_path: Path, capsys: pytest.CaptureFixture) -> None:
        pin = _create(db_path, capsys)

        assert _run(db_path, "change-pin", "alice", "--pin", pin, "--new-pin", "3456") == 1
        assert "weak" in capsys.readouterr().out
        assert _run(db_path, "change-pin", "alice", "--pin", pin, "--new-pin", "50931") == 1
        assert "must be 4 digits" in capsys.readouterr().out
        assert _run(db_path, "change-pin", "alice", "--pin", pin, "--new-pin", "5093") == 0
        assert "changed" in capsys.readouterr().out
        assert _run(db_path, "auth", "alice", "--pin", "5093") == 0

    def test_change_pin_wrong_current(self, db_path: Path, capsys: pytest.CaptureFixture) -> None:
        _create(db_path, capsys)
        assert _run(db_path, "change-pin", "alice", "--pin", "0000", "--new-pin", "5093") == 1
        assert "Wrong PIN" in capsys.readouterr().out

    def test_list(self, db_path: Path, capsys: pytest.CaptureFixture) -> None:
        assert _run(db_path, "list") == 0
        assert "(no accounts)" in capsys.readouterr().out

        pin = _create(db_path, capsys)
        _create(db_path, capsys, "bob")
        for _ in range(3):
            _run(db_path, "auth", "alice", "--pin", "0000")
        capsys.readouterr()

        assert _run(db_path, "list") == 0
        out = capsys.readouterr().out
        assert "alice\t1000.00\tYes" in out
        assert "bob\t1000.00\tNo" in out
        assert pin not in out.replace("1000.00", "")

    def test_persistence_error_exit_code(self, db_path: Path) -> None:
        db_path.mkdir()
        assert _run(db_path, "list") == 2
