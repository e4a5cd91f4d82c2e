"""Embedding provider catalogs and default model selection.

The settings layer stores whatever provider/model the user picked. Before the
configuration is used, it is normalized here: an unknown provider falls back
to OpenAI and a model id missing from the provider's catalog falls back to
the provider default.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Mapping

from typing_extensions import TypedDict

logger = logging.getLogger("msgbridge")

EmbeddingProvider = Literal["bedrock", "openai-native", "openai"]

DEFAULT_EMBEDDING_PROVIDER: EmbeddingProvider = "openai-native"


@dataclass(frozen=True)
class EmbeddingModelInfo:
    """Display metadata for an embedding model.

    Attributes:
        max_dimensions: Size of the produced vectors.
        input_price: USD per million input tokens.
        supports_batching: Whether several inputs can go in one request.
    """
    max_dimensions: int
    input_price: float
    supports_batching: bool = False


OPENAI_NATIVE_EMBEDDING_DEFAULT_MODEL_ID = "text-embedding-3-small"
OPENAI_NATIVE_EMBEDDING_MODELS: dict[str, EmbeddingModelInfo] = {
    "text-embedding-3-small": EmbeddingModelInfo(1536, 0.02, supports_batching=True),
    "text-embedding-3-large": EmbeddingModelInfo(3072, 0.13, supports_batching=True),
    "text-embedding-ada-002": EmbeddingModelInfo(1536, 0.1, supports_batching=True),
}

BEDROCK_EMBEDDING_DEFAULT_MODEL_ID = "amazon.titan-embed-text-v1"
BEDROCK_EMBEDDING_MODELS: dict[str, EmbeddingModelInfo] = {
    "amazon.titan-embed-text-v1": EmbeddingModelInfo(1536, 0.1),
    "amazon.titan-embed-text-v2:0": EmbeddingModelInfo(1024, 0.02),
    "cohere.embed-english-v3": EmbeddingModelInfo(1024, 0.1, supports_batching=True),
    "cohere.embed-multilingual-v3": EmbeddingModelInfo(1024, 0.1, supports_batching=True),
}

EMBEDDING_PROVIDER_MODELS: dict[str, dict[str, EmbeddingModelInfo]] = {
    "bedrock": BEDROCK_EMBEDDING_MODELS,
    "openai-native": OPENAI_NATIVE_EMBEDDING_MODELS,
    "openai": OPENAI_NATIVE_EMBEDDING_MODELS,
}

_DEFAULT_MODEL_IDS: dict[str, str] = {
    "bedrock": BEDROCK_EMBEDDING_DEFAULT_MODEL_ID,
    "openai-native": OPENAI_NATIVE_EMBEDDING_DEFAULT_MODEL_ID,
    "openai": OPENAI_NATIVE_EMBEDDING_DEFAULT_MODEL_ID,
}

# Credential fields copied from the LLM API configuration, per provider
_SYNCED_FIELDS: dict[str, tuple[str, ...]] = {
    "openai-native": ("openai_native_api_key",),
    "bedrock": ("aws_access_key", "aws_secret_key", "aws_session_token", "aws_region"),
    "openai": ("openai_api_key", "openai_base_url"),
}


class EmbeddingConfiguration(TypedDict, total=False):
    """Embedding provider settings as stored by the settings layer."""
    provider: str
    model_id: str
    openai_native_api_key: str
    openai_api_key: str
    openai_base_url: str
    aws_access_key: str
    aws_secret_key: str
    aws_session_token: str
    aws_region: str
    azure_openai_api_version: str


class ApiConfiguration(TypedDict, total=False):
    """LLM API provider settings, the source for credential syncing."""
    api_provider: str
    api_model_id: str
    openai_native_api_key: str
    openai_api_key: str
    openai_base_url: str
    aws_access_key: str
    aws_secret_key: str
    aws_session_token: str
    aws_region: str


@dataclass(frozen=True)
class EmbeddingSelection:
    provider: str
    model_id: str
    model_info: EmbeddingModelInfo


def normalize_embedding_configuration(
    configuration: Mapping[str, str] | None = None,
) -> EmbeddingSelection:
    """Resolve the provider and model to use for an embedding configuration.

    The provider defaults to "openai-native". Providers without their own
    catalog use the OpenAI one. A model id that is not in the catalog is
    replaced by the catalog default.
    """
    configuration = configuration or {}
    provider = configuration.get("provider") or DEFAULT_EMBEDDING_PROVIDER
    model_id = configuration.get("model_id")

    catalog_key = provider if provider in EMBEDDING_PROVIDER_MODELS else DEFAULT_EMBEDDING_PROVIDER
    models = EMBEDDING_PROVIDER_MODELS[catalog_key]
    default_id = _DEFAULT_MODEL_IDS[catalog_key]
    if model_id and model_id in models:
        return EmbeddingSelection(provider, model_id, models[model_id])

    if model_id:
        logger.info(
            f"Embedding model {model_id!r} not available for {provider!r}, "
            f"using {default_id!r}"
        )
    return EmbeddingSelection(provider, default_id, models[default_id])


def sync_with_api_configuration(
    embedding: EmbeddingConfiguration | None,
    api: ApiConfiguration | None,
) -> EmbeddingConfiguration:
    """Reuse the LLM API credentials for embeddings.

    Only providers that also serve embeddings are synced; for any other API
    provider the embedding configuration is returned as is. The inputs are
    never mutated.
    """
    result: EmbeddingConfiguration = dict(embedding or {})  # type: ignore[assignment]
    if not api:
        return result

    provider = api.get("api_provider", "")
    fields = _SYNCED_FIELDS.get(provider)
    if fields is None:
        return result

    result["provider"] = provider
    for field in fields:
        if field in api:
            result[field] = api[field]  # type: ignore[literal-required]
    return result
