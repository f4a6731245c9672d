"""Integration tests for the orchestra command line."""

import pytest

from orchestra import main as cli


@pytest.fixture
def simulated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ORCHESTRA_BACKEND", "simulated")
    monkeypatch.setenv("ORCHESTRA_LOG_LEVEL", "WARNING")


def test_listener_without_conductor_times_out(simulated_env):
    assert cli.main(["play", "--role", "listener", "--timeout", "0.05"]) == 1


def test_simulated_listener_has_finite_default_timeout(simulated_env, monkeypatch):
    monkeypatch.setattr(cli, "SIMULATED_LISTEN_TIMEOUT", 0.05)
    assert cli.main(["play", "--role", "listener"]) == 1


def test_conductor_plays_demo_line(simulated_env, monkeypatch):
    played = []
    monkeypatch.setattr(cli, "play_line", lambda playback, line: played.append(playback.snapshot()))

    assert cli.main(["play", "--role", "conductor", "--tempo", "200", "--dynamic", "f", "--key", "G"]) == 0
    assert played == [
        {
            "tempo_bpm": 200,
            "dynamic": "f",
            "volume": 180,
            "key_signature": "G",
            "accidentals": 1,
            "notes_played": 0,
        }
    ]


def test_invalid_configuration_exit_code(simulated_env, monkeypatch, capsys):
    monkeypatch.setenv("ORCHESTRA_TEMPO", "10")
    assert cli.main(["play"]) == 2
    assert "Invalid Orchestra configuration" in capsys.readouterr().err


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])
