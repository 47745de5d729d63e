# src/docrag/config.py
"""Configuration loading utilities for docrag.

This module provides configuration loading that can be used by:
- CLI commands
- External applications using docrag as a library

It handles:
- Finding and loading docrag.yaml config files
- Loading .env files for API keys
- Building Settings objects from multiple sources
- Creating DocRAG instances from configuration
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from docrag.docrag import DocRAG
    from docrag.library import DocumentLibrary
    from docrag.settings import Settings

logger = logging.getLogger(__name__)

# Default paths
DEFAULT_DATA_DIR = "./docrag_data"
CONFIG_FILES = ["docrag.yaml", "docrag.yml", ".docragrc"]
ENV_FILE = ".env"

SUPPORTED_PROVIDERS = ("litellm",)


@dataclass
class ConfigError:
    """Error during configuration loading."""

    message: str
    suggestion: str | None = None


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Load environment variables from a .env file if it exists.

    Existing environment variables are never overridden.

    Args:
        env_path: Path to .env file (default: .env in current directory)
    """
    path = Path(env_path)
    if not path.exists():
        return

    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip().strip("'\"")
            if key not in os.environ:
                os.environ[key] = value


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a configuration file in the current directory or its parents.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


VALID_ROOT_KEYS = {
    "provider",
    "llm_model",
    "embedding_model",
    "data_dir",
    "settings",
}

VALID_SETTINGS_KEYS = {
    "chunk_size",
    "embedding_batch_size",
    "default_k",
    "synthesis_prompt",
    "synthesis_temperature",
    "num_retries",
}


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for error messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None:
        return {}

    with open(path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        logger.warning("Ignoring %s: expected a mapping at the top level", path)
        return {}

    for warning in validate_config(config, path):
        logger.warning(warning)

    logger.debug("Loaded config from %s", path)
    return config


def resolve_data_dir(data_dir: str | None = None, config_path: str | Path | None = None) -> str:
    """Resolve the data directory: argument, DOCRAG_DATA_DIR, YAML data_dir, default."""
    config = load_config(config_path)
    return str(
        data_dir or os.environ.get("DOCRAG_DATA_DIR") or config.get("data_dir") or DEFAULT_DATA_DIR
    )


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _safe_float(value: str | None) -> float | None:
    """Parse float from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from DOCRAG_* environment variables.

    Returns only values that are explicitly set, so YAML settings are used
    unless overridden by env vars.
    """
    result: dict[str, Any] = {}

    if (val := _safe_int(os.environ.get("DOCRAG_CHUNK_SIZE"))) is not None:
        result["chunk_size"] = val
    if (val := _safe_int(os.environ.get("DOCRAG_EMBEDDING_BATCH_SIZE"))) is not None:
        result["embedding_batch_size"] = val
    if (val := _safe_int(os.environ.get("DOCRAG_DEFAULT_K"))) is not None:
        result["default_k"] = val
    if "DOCRAG_SYNTHESIS_PROMPT" in os.environ:
        result["synthesis_prompt"] = os.environ["DOCRAG_SYNTHESIS_PROMPT"] or None
    if (fval := _safe_float(os.environ.get("DOCRAG_SYNTHESIS_TEMPERATURE"))) is not None:
        result["synthesis_temperature"] = fval
    if (val := _safe_int(os.environ.get("DOCRAG_NUM_RETRIES"))) is not None:
        result["num_retries"] = val

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract the 'settings:' section from a loaded YAML config."""
    yaml_settings = config.get("settings", {}) or {}
    if not isinstance(yaml_settings, dict):
        return {}
    return {key: yaml_settings[key] for key in VALID_SETTINGS_KEYS if key in yaml_settings}


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build a Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML settings: section
    3. Settings class defaults

    Args:
        config: YAML configuration dictionary
        env_settings: Environment variable overrides (if None, reads from env)

    Raises:
        pydantic.ValidationError: If a merged value is out of range
    """
    from docrag.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    return Settings(**{**yaml_settings, **env_settings})


@dataclass
class DocRAGConfig:
    """Configuration for creating a DocRAG instance."""

    provider: str
    llm_model: str
    embedding_model: str
    data_dir: str
    settings: Settings
    llm_api_key: str | None = None
    embedding_api_key: str | None = None
    config_path: Path | None = None


def get_docrag_config(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> DocRAGConfig | ConfigError:
    """Get configuration for creating a DocRAG instance.

    This extracts configuration without creating the instance, allowing
    the caller to handle errors appropriately.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        DocRAGConfig with all settings, or ConfigError if invalid
    """
    from pydantic import ValidationError

    from docrag.providers.litellm import ChatModels, EmbeddingModels

    resolved_path = Path(config_path) if config_path is not None else find_config_file()
    if resolved_path is not None and not resolved_path.exists():
        return ConfigError(
            message=f"Config file not found: {resolved_path}",
            suggestion="Check the --config path",
        )

    try:
        config = load_config(resolved_path) if resolved_path is not None else {}
    except yaml.YAMLError as e:
        return ConfigError(message=f"Invalid YAML in {resolved_path}: {e}")

    provider = config.get("provider", "litellm")
    if provider not in SUPPORTED_PROVIDERS:
        return ConfigError(
            message=f"Unknown provider '{provider}'",
            suggestion=f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}",
        )

    try:
        settings = build_settings(config)
    except ValidationError as e:
        return ConfigError(message=f"Invalid settings: {e}")

    effective_data_dir = (
        data_dir
        or os.environ.get("DOCRAG_DATA_DIR")
        or config.get("data_dir")
        or DEFAULT_DATA_DIR
    )
    llm_model = (
        os.environ.get("DOCRAG_LLM_MODEL") or config.get("llm_model") or ChatModels.GPT_4O_MINI
    )
    embedding_model = (
        os.environ.get("DOCRAG_EMBEDDING_MODEL")
        or config.get("embedding_model")
        or EmbeddingModels.TEXT_3_SMALL
    )

    return DocRAGConfig(
        provider=provider,
        llm_model=llm_model,
        embedding_model=embedding_model,
        data_dir=str(effective_data_dir),
        settings=settings,
        llm_api_key=os.environ.get("DOCRAG_LLM_API_KEY"),
        embedding_api_key=os.environ.get("DOCRAG_EMBEDDING_API_KEY"),
        config_path=resolved_path,
    )


def create_docrag(config: DocRAGConfig) -> DocRAG:
    """Create a DocRAG instance from configuration.

    Raises:
        ValueError: If the provider is not supported
    """
    from docrag.configuration import LiteLLMProvider, LocalStorage
    from docrag.docrag import DocRAG

    if config.provider != "litellm":
        raise ValueError(f"Unknown provider: {config.provider}")

    return DocRAG(
        provider=LiteLLMProvider(
            llm=config.llm_model,
            embedding=config.embedding_model,
            llm_api_key=config.llm_api_key,
            embedding_api_key=config.embedding_api_key,
        ),
        storage=LocalStorage(config.data_dir),
        settings=config.settings,
    )


def get_docrag(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> DocRAG | ConfigError:
    """Create a DocRAG instance based on configuration.

    Convenience wrapper around get_docrag_config and create_docrag.
    """
    config = get_docrag_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return config
    return create_docrag(config)


def get_library(data_dir: str | Path) -> DocumentLibrary:
    """Open the document library for read-only operations (list, remove).

    This doesn't require provider configuration since it only touches storage.
    """
    from docrag.configuration import LocalStorage
    from docrag.library import DocumentLibrary

    return DocumentLibrary(LocalStorage(str(data_dir)).build_store())
