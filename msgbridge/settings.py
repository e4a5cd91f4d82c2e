"""Typed settings built from a loaded configuration mapping.

Expected layout::

    logging:
      level: INFO
    translation:
      emit_tool_result_images: false
    api:
      api_provider: openai
      openai_api_key: ${OPENAI_API_KEY}
    embedding:
      provider: openai-native
      model_id: text-embedding-3-small
      sync_with_api: true
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from .config_loader import load_config
from .core.exceptions import ConfigurationError
from .embeddings import (
    ApiConfiguration,
    EmbeddingConfiguration,
    EmbeddingSelection,
    normalize_embedding_configuration,
    sync_with_api_configuration,
)
from .messages.translator import TranslationOptions

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"'{name}' must be a mapping, got {type(value).__name__}")
    return value


def _as_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "1", "yes", "on"):
        return True
    if isinstance(value, str) and value.strip().lower() in ("false", "0", "no", "off", ""):
        return False
    raise ConfigurationError(f"'{name}' must be a boolean, got {value!r}")


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    translation: TranslationOptions = field(default_factory=TranslationOptions)
    api: ApiConfiguration = field(default_factory=dict)  # type: ignore[assignment]
    embedding: EmbeddingConfiguration = field(default_factory=dict)  # type: ignore[assignment]
    sync_embedding_with_api: bool = False

    @classmethod
    def from_config(cls, data: Mapping[str, Any]) -> "Settings":
        """Build settings from a configuration mapping.

        Raises:
            ConfigurationError: On unknown log levels or mistyped values.
        """
        log_level = str(_section(data, "logging").get("level", "INFO")).upper()
        if log_level not in _LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {log_level!r}")

        translation = _section(data, "translation")
        options = TranslationOptions(
            emit_tool_result_images=_as_bool(
                translation.get("emit_tool_result_images", False),
                "translation.emit_tool_result_images",
            ),
        )

        embedding = dict(_section(data, "embedding"))
        sync = _as_bool(embedding.pop("sync_with_api", False), "embedding.sync_with_api")

        return cls(
            log_level=log_level,
            translation=options,
            api=dict(_section(data, "api")),  # type: ignore[arg-type]
            embedding=embedding,  # type: ignore[arg-type]
            sync_embedding_with_api=sync,
        )

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    def effective_embedding(self) -> EmbeddingConfiguration:
        """Embedding configuration after optional credential syncing."""
        if self.sync_embedding_with_api:
            return sync_with_api_configuration(self.embedding, self.api)
        return dict(self.embedding)  # type: ignore[return-value]

    def embedding_selection(self) -> EmbeddingSelection:
        return normalize_embedding_configuration(self.effective_embedding())


def load_settings(path: str | None = None, env_path: str | None = None) -> Settings:
    """Load a YAML config file and build Settings from it."""
    return Settings.from_config(load_config(path, env_path=env_path))
