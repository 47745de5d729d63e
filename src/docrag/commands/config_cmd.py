# src/docrag/commands/config_cmd.py
"""Config command - display current configuration."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from docrag.commands.base import ConfigResult, SettingInfo
from docrag.config import (
    DEFAULT_DATA_DIR,
    build_settings,
    find_config_file,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
)


def _get_setting_source(key: str, yaml_settings: dict, env_settings: dict) -> str:
    """Determine the source of a setting value."""
    if key in env_settings:
        return "env var"
    if key in yaml_settings:
        return "yaml"
    return "default"


def config(config_path: str | Path | None = None) -> ConfigResult:
    """Get current configuration settings.

    Args:
        config_path: Override config file path

    Returns:
        ConfigResult with all settings and their sources
    """
    from docrag.providers.litellm import ChatModels, EmbeddingModels

    try:
        cli_config = load_config(config_path)
    except (OSError, yaml.YAMLError) as e:
        return ConfigResult(success=False, error=f"Failed to read config: {e}")

    env_settings = get_settings_from_env()
    yaml_settings = get_settings_from_yaml(cli_config)

    try:
        settings = build_settings(cli_config, env_settings)
    except ValidationError as e:
        return ConfigResult(success=False, error=f"Invalid settings: {e}")

    found_config_path = Path(config_path) if config_path is not None else find_config_file()

    result = ConfigResult(success=True)
    result.config_path = str(found_config_path) if found_config_path else None
    result.provider = cli_config.get("provider", "litellm")
    result.llm_model = (
        os.environ.get("DOCRAG_LLM_MODEL") or cli_config.get("llm_model") or ChatModels.GPT_4O_MINI
    )
    result.embedding_model = (
        os.environ.get("DOCRAG_EMBEDDING_MODEL")
        or cli_config.get("embedding_model")
        or EmbeddingModels.TEXT_3_SMALL
    )
    result.data_dir = (
        os.environ.get("DOCRAG_DATA_DIR") or cli_config.get("data_dir") or DEFAULT_DATA_DIR
    )

    setting_values = [
        ("chunk_size", str(settings.chunk_size)),
        ("embedding_batch_size", str(settings.embedding_batch_size)),
        ("default_k", str(settings.default_k)),
        ("synthesis_prompt", "custom" if settings.synthesis_prompt else "default"),
        ("synthesis_temperature", str(settings.synthesis_temperature)),
        ("num_retries", str(settings.num_retries)),
    ]

    for key, value in setting_values:
        result.settings.append(
            SettingInfo(
                name=key,
                value=value,
                source=_get_setting_source(key, yaml_settings, env_settings),
            )
        )

    return result
