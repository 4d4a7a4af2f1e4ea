import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

import apps.entrypoint.main as entrypoint
from libs.core.exceptions import DaemonError, IsqlError
from libs.firebird.isql import IsqlClient


@pytest.fixture()
def runner() -> MagicMock:
    fake = MagicMock()
    fake.run_and_wait.return_value = 0
    return fake


@pytest.fixture()
def patched_main(monkeypatch, settings, runner):
    monkeypatch.setattr(entrypoint, "setup_logging", lambda: None)
    monkeypatch.setattr(entrypoint, "get_settings", lambda: settings)
    monkeypatch.setattr(entrypoint, "DaemonRunner", lambda s: runner)
    for name in ("FIREBIRD_USER", "FIREBIRD_PASSWORD", "FIREBIRD_ROOT_PASSWORD",
                 "FIREBIRD_USE_LEGACY_AUTH"):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(f"{name}_FILE", raising=False)
    return entrypoint.main


def test_other_commands_are_execd(monkeypatch) -> None:
    execvp = MagicMock()
    start = MagicMock()
    monkeypatch.setattr(entrypoint.os, "execvp", execvp)
    monkeypatch.setattr(entrypoint, "start_firebird", start)

    assert entrypoint.main(["bash", "-c", "true"]) == 0

    execvp.assert_called_once_with("bash", ["bash", "-c", "true"])
    start.assert_not_called()


def test_unknown_command_exits_127(monkeypatch, capsys) -> None:
    def missing(file, args):
        raise FileNotFoundError(2, "No such file or directory")

    start = MagicMock()
    monkeypatch.setattr(entrypoint.os, "execvp", missing)
    monkeypatch.setattr(entrypoint, "start_firebird", start)

    assert entrypoint.main(["no-such-command-xyz"]) == 127

    assert "no-such-command-xyz: No such file or directory" in capsys.readouterr().err
    start.assert_not_called()


def test_non_executable_command_exits_126(monkeypatch, capsys) -> None:
    def denied(file, args):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(entrypoint.os, "execvp", denied)

    assert entrypoint.main(["/data/script.sh"]) == 126
    assert "/data/script.sh: Permission denied" in capsys.readouterr().err


def test_start_firebird_runs_all_steps(settings, runner, monkeypatch, caplog) -> None:
    caplog.set_level(logging.INFO)
    executed = []
    monkeypatch.setattr(IsqlClient, "execute", lambda self, script: executed.append(script))
    env = {
        "FIREBIRD_ROOT_PASSWORD": "root",
        "FIREBIRD_USER": "alice",
        "FIREBIRD_PASSWORD": "pw",
        "FIREBIRD_CONF_WireCrypt": "Enabled",
    }

    assert entrypoint.start_firebird(settings, environ=env, runner=runner) == 0

    assert "WireCrypt = Enabled" in Path(settings.firebird_config_file).read_text()
    assert len(executed) == 2
    assert "SYSDBA" in executed[0]
    assert "alice" in executed[1]
    assert f"Data directory: {settings.firebird_data}" in caplog.text
    runner.run_and_wait.assert_called_once_with()


def test_main_default_command_is_firebird(patched_main, runner) -> None:
    assert patched_main([]) == 0
    runner.run_and_wait.assert_called_once_with()


def test_main_returns_daemon_status(patched_main, runner) -> None:
    runner.run_and_wait.return_value = 143
    assert patched_main(["firebird"]) == 143


def test_main_conflicting_secrets(patched_main, runner, monkeypatch, capsys) -> None:
    monkeypatch.setenv("FIREBIRD_PASSWORD", "a")
    monkeypatch.setenv("FIREBIRD_PASSWORD_FILE", "/run/secrets/pw")

    assert patched_main(["firebird"]) == 1

    err = capsys.readouterr().err
    assert "ERROR: Both FIREBIRD_PASSWORD and FIREBIRD_PASSWORD_FILE are set." in err
    runner.run_and_wait.assert_not_called()


def test_main_user_without_password(patched_main, runner, monkeypatch, capsys) -> None:
    monkeypatch.setenv("FIREBIRD_USER", "alice")

    assert patched_main(["firebird"]) == 1

    assert "ERROR: FIREBIRD_PASSWORD variable is not set." in capsys.readouterr().err
    runner.run_and_wait.assert_not_called()


def test_main_isql_failure(patched_main, runner, monkeypatch, capsys) -> None:
    def fail(self, script):
        raise IsqlError(1, "Statement failed")

    monkeypatch.setattr(IsqlClient, "execute", fail)
    monkeypatch.setenv("FIREBIRD_ROOT_PASSWORD", "root")

    assert patched_main(["firebird"]) == 1
    assert "isql exited with status 1." in capsys.readouterr().err
    runner.run_and_wait.assert_not_called()


def test_missing_data_directory_is_reported(settings, runner, tmp_path, caplog) -> None:
    settings.firebird_data = tmp_path / "absent"

    entrypoint.start_firebird(settings, environ={}, runner=runner)

    assert f"Data directory {tmp_path / 'absent'} does not exist" in caplog.text
    runner.run_and_wait.assert_called_once_with()


def test_main_missing_guardian(patched_main, runner, capsys) -> None:
    runner.run_and_wait.side_effect = DaemonError(
        "Cannot start /usr/sbin/fbguard.", "No such file or directory"
    )

    assert patched_main(["firebird"]) == 1

    err = capsys.readouterr().err
    assert err.startswith("-----\nERROR: Cannot start /usr/sbin/fbguard.")
    assert "No such file or directory" in err
