from __future__ import annotations

from typer.testing import CliRunner

from livesurf_cli import config
from livesurf_client.config_types import DEFAULT_BASE_URL
from livesurf_cli import main


def _use_tmp_config_dir(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))


def test_settings_set_and_get(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(monkeypatch, tmp_path)
    runner = CliRunner()

    result = runner.invoke(
        main.app,
        ["settings", "set", "--rate-limit", "4", "--max-retries", "1", "--base-url", "https://alt.example.test"],
    )
    assert result.exit_code == 0
    assert "Settings updated" in result.output

    cfg = config.load_config()
    assert cfg.rate_limit == 4
    assert cfg.max_retries == 1
    assert cfg.base_url == "https://alt.example.test/"

    result = runner.invoke(main.app, ["settings", "get", "rate_limit"])
    assert result.exit_code == 0
    assert result.output.strip() == "4"


def test_settings_set_rejects_zero_rate_limit(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(monkeypatch, tmp_path)
    result = CliRunner().invoke(main.app, ["settings", "set", "--rate-limit", "0"])
    assert result.exit_code != 0
    assert not tmp_path.joinpath("config.toml").exists()


def test_settings_get_unknown_key(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(monkeypatch, tmp_path)
    result = CliRunner().invoke(main.app, ["settings", "get", "api_key"])
    assert result.exit_code == 2
    assert "Unknown setting" in result.output


def test_settings_init_does_not_overwrite(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(monkeypatch, tmp_path)
    runner = CliRunner()

    assert runner.invoke(main.app, ["settings", "init"]).exit_code == 0
    assert tmp_path.joinpath("config.toml").exists()

    result = runner.invoke(main.app, ["settings", "init", "--base-url", "https://other.test"])
    assert result.exit_code == 0
    assert "already exists" in result.output
    assert config.load_config().base_url == DEFAULT_BASE_URL
