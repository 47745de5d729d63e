# tests/commands/test_config.py
"""Tests for the config command."""

from pathlib import Path

from docrag.commands import config_cmd


def _settings(result) -> dict[str, tuple[str, str]]:
    return {s.name: (s.value, s.source) for s in result.settings}


class TestConfigCommand:
    def test_defaults(self, clean_env):
        result = config_cmd.config()

        assert result.success is True
        assert result.provider == "litellm"
        assert result.config_path is None
        assert result.llm_model == "openai/gpt-4o-mini"
        settings = _settings(result)
        assert settings["chunk_size"] == ("2048", "default")
        assert settings["default_k"] == ("2", "default")
        assert settings["synthesis_prompt"] == ("default", "default")

    def test_sources(self, clean_env, monkeypatch):
        config_path = Path(clean_env) / "docrag.yaml"
        config_path.write_text(
            "data_dir: ./mine\nsettings:\n  chunk_size: 500\n  default_k: 3\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("DOCRAG_DEFAULT_K", "7")

        result = config_cmd.config()

        assert Path(result.config_path or "").resolve() == config_path.resolve()
        assert result.data_dir == "./mine"
        settings = _settings(result)
        assert settings["chunk_size"] == ("500", "yaml")
        assert settings["default_k"] == ("7", "env var")
        assert settings["num_retries"] == ("3", "default")

    def test_invalid_settings(self, clean_env):
        (Path(clean_env) / "docrag.yaml").write_text(
            "settings:\n  chunk_size: -4\n", encoding="utf-8"
        )
        result = config_cmd.config()
        assert result.success is False
