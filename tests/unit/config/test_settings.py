"""Tests for settings loading and credential resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from terrific.api.app import build_registry
from terrific.config.settings import CredentialSettings, Settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "PORT",
        "TERRIFIC_CONFIG",
        "GUARDIAN_API_KEY",
        "YOUTUBE_API_KEY",
        "NEWSAPI_KEY",
        "NEWS_API_KEY",
        "TERRIFIC_SERVER__PORT",
    ):
        monkeypatch.delenv(name, raising=False)


class TestCredentialSettings:
    def test_reads_bare_env_names(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GUARDIAN_API_KEY", "g-key")
        monkeypatch.setenv("YOUTUBE_API_KEY", "y-key")
        credentials = CredentialSettings(_env_file=None)
        assert credentials.resolve("GUARDIAN_API_KEY") == "g-key"
        assert credentials.resolve("YOUTUBE_API_KEY") == "y-key"

    def test_first_configured_name_wins(self) -> None:
        credentials = CredentialSettings(_env_file=None, newsapi_key="primary", news_api_key="alias")
        assert credentials.resolve("NEWSAPI_KEY", "NEWS_API_KEY") == "primary"

    def test_falls_back_to_alias(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEWS_API_KEY", "alias")
        credentials = CredentialSettings(_env_file=None)
        assert credentials.resolve("NEWSAPI_KEY", "NEWS_API_KEY") == "alias"

    def test_empty_values_are_unset(self) -> None:
        credentials = CredentialSettings(_env_file=None, newsapi_key="", news_api_key="")
        assert credentials.resolve("NEWSAPI_KEY", "NEWS_API_KEY") is None

    def test_unknown_names_skipped(self) -> None:
        credentials = CredentialSettings(_env_file=None, guardian_api_key="g")
        assert credentials.resolve("NOT_A_KEY", "GUARDIAN_API_KEY") == "g"

    def test_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("GUARDIAN_API_KEY=from-file\n")
        credentials = CredentialSettings(_env_file=env_file)
        assert credentials.resolve("GUARDIAN_API_KEY") == "from-file"


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.server.port == 4000
        assert settings.server.cors_origins == ["*"]
        assert settings.upstream.timeout is None
        assert settings.reddit.subreddits == ["PoliticalHumor", "NonCredibleDefense"]
        assert settings.newswire.key_chain == ["NEWSAPI_KEY", "NEWS_API_KEY"]
        assert settings.newswire.degrade_on_error is True

    def test_port_from_platform_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        assert Settings(_env_file=None).server.port == 8080

    def test_prefixed_env_overrides_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("TERRIFIC_SERVER__PORT", "9090")
        assert Settings(_env_file=None).server.port == 9090

    def test_nested_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERRIFIC_UPSTREAM__TIMEOUT", "7.5")
        monkeypatch.setenv("TERRIFIC_NEWSWIRE__DEGRADE_ON_ERROR", "false")
        settings = Settings(_env_file=None)
        assert settings.upstream.timeout == 7.5
        assert settings.newswire.degrade_on_error is False

    def test_from_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "config.yaml"
        config.write_text(
            "server:\n"
            "  port: 5050\n"
            "  cors_origins: ['https://app.example']\n"
            "reddit:\n"
            "  subreddits: [dankmemes]\n"
            "upstream:\n"
            "  timeout: 12\n"
        )
        settings = Settings.from_yaml(config)
        assert settings.server.port == 5050
        assert settings.server.cors_origins == ["https://app.example"]
        assert settings.reddit.subreddits == ["dankmemes"]
        assert settings.upstream.timeout == 12.0

    def test_from_yaml_empty_file(self, tmp_path: Path) -> None:
        config = tmp_path / "empty.yaml"
        config.write_text("")
        assert Settings.from_yaml(config).server.port == 4000

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "absent.yaml")


class TestLoadSettings:
    def test_config_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config = tmp_path / "custom.yaml"
        config.write_text("server:\n  port: 6060\n")
        monkeypatch.setenv("TERRIFIC_CONFIG", str(config))
        assert load_settings().server.port == 6060

    def test_default_file_in_working_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "terrific-config.yaml").write_text("server:\n  port: 7070\n")
        monkeypatch.chdir(tmp_path)
        assert load_settings().server.port == 7070

    def test_environment_only(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert load_settings().server.port == 4000


class TestBuildRegistry:
    def test_all_routes_registered(self, settings: Settings) -> None:
        registry = build_registry(settings)
        assert sorted(registry.active_adapters) == sorted(
            ["wars", "explainers", "wars_article", "memes", "sports", "youtube"]
        )
        assert all(status.configured for status in registry.statuses().values())

    def test_unconfigured_providers(self, settings: Settings) -> None:
        bare = settings.model_copy(update={"credentials": CredentialSettings(_env_file=None)})
        statuses = build_registry(bare).statuses()
        assert statuses["wars"].configured is False
        assert statuses["wars_article"].configured is False
        assert statuses["sports"].configured is False
        assert statuses["youtube"].configured is False
        assert statuses["memes"].configured is True
