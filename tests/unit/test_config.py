"""Unit tests for OrchestraConfig environment loading."""

from pathlib import Path

import pytest

from notation.markings import Dynamic, KeySignature
from orchestra.config import get_config
from orchestra.exceptions import ConfigurationError


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)  # no stray .env
    config = get_config()

    assert config.backend == "simulated"
    assert config.tempo == 120
    assert config.default_dynamic is Dynamic.MF
    assert config.default_key is KeySignature.C
    assert config.radio_group == 0
    assert config.soundfont == Path("soundfonts/FluidR3_GM.sf2")


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ORCHESTRA_TEMPO", "90")
    monkeypatch.setenv("ORCHESTRA_DYNAMIC", "pp")
    monkeypatch.setenv("ORCHESTRA_KEY", "Bb")
    monkeypatch.setenv("ORCHESTRA_RADIO_GROUP", "12")

    config = get_config()

    assert config.tempo == 90
    assert config.default_dynamic is Dynamic.PP
    assert config.default_key is KeySignature.Bb
    assert config.radio_group == 12


def test_singleton(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert get_config() is get_config()


@pytest.mark.parametrize(
    "name,value",
    [
        ("ORCHESTRA_TEMPO", "300"),
        ("ORCHESTRA_DYNAMIC", "fff"),
        ("ORCHESTRA_HUB_URL", "http://localhost:8765"),
        ("ORCHESTRA_RADIO_GROUP", "256"),
    ],
)
def test_invalid_values_raise_configuration_error(monkeypatch, tmp_path, name, value):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        get_config()
