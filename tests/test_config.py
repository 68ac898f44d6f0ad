from __future__ import annotations

from pathlib import Path

from airparif.config import DEFAULT_BASE_URL, Settings, load_settings


def test_defaults(tmp_path: Path) -> None:
    settings = load_settings(tmp_path, env={})

    assert settings.airparif.base_url == DEFAULT_BASE_URL
    assert settings.airparif.api_key == ""
    assert settings.airparif.request_timeout_seconds == 30.0


def test_toml_env_file_and_environment_layering(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "settings.toml").write_text(
        '[airparif]\napi_key = "from-toml"\nbase_url = "http://toml.example/"\nrequest_timeout_seconds = 12\n',
        encoding="utf-8",
    )
    (tmp_path / ".env").write_text('# local\nAIRPARIF_API_KEY="from-env-file"\n', encoding="utf-8")

    settings = load_settings(tmp_path, env={"AIRPARIF_REQUEST_TIMEOUT_SECONDS": "7.5"})

    assert settings.airparif.api_key == "from-env-file"
    assert settings.airparif.base_url == "http://toml.example"
    assert settings.airparif.request_timeout_seconds == 7.5


def test_environment_wins_over_env_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("AIRPARIF_API_KEY=file\n", encoding="utf-8")

    settings = load_settings(tmp_path, env={"AIRPARIF_API_KEY": "process", "AIRPARIF_BASE_URL": "http://x"})

    assert settings.airparif.api_key == "process"
    assert settings.airparif.base_url == "http://x"


def test_for_testing() -> None:
    settings = Settings.for_testing("http://localhost:5000/")

    assert settings.airparif.base_url == "http://localhost:5000"
    assert settings.airparif.api_key == "dummy"
