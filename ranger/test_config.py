import logging

import pytest

from ranger.config import RangerConfig, load_config, CONFIG_ENV_VAR
from ranger.domain import U8, INT


def test_defaults_when_missing(tmp_path):
    config = load_config(tmp_path / "missing.yml")
    assert config == RangerConfig()
    assert config.int_domain is INT
    assert config.logging_level == logging.INFO


def test_load(tmp_path):
    path = tmp_path / "ranger.yml"
    path.write_text("domain: u8\nlog_level: debug\nverify_rounds: 5\nseed: 42\n")
    config = load_config(path)
    assert config.int_domain is U8
    assert config.log_level == "DEBUG"
    assert config.logging_level == logging.DEBUG
    assert config.verify_rounds == 5
    assert config.seed == 42


def test_empty_file(tmp_path):
    path = tmp_path / "ranger.yml"
    path.write_text("")
    assert load_config(path) == RangerConfig()


def test_env_var(tmp_path, monkeypatch):
    path = tmp_path / "custom.yml"
    path.write_text("domain: i8\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert load_config().domain == "i8"


@pytest.mark.parametrize("content", [
    "- 1\n- 2\n",
    "colour: blue\n",
    "domain: u7\n",
    "domain: 8\n",
    "log_level: loud\n",
    "verify_rounds: -1\n",
    "verify_rounds: many\n",
    "seed: abc\n",
])
def test_invalid(tmp_path, content):
    path = tmp_path / "ranger.yml"
    path.write_text(content)
    with pytest.raises(ValueError):
        load_config(path)
