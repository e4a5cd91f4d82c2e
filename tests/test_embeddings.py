"""Tests for embedding provider default selection and credential syncing."""

import pytest

from msgbridge.embeddings import (
    BEDROCK_EMBEDDING_DEFAULT_MODEL_ID,
    BEDROCK_EMBEDDING_MODELS,
    EMBEDDING_PROVIDER_MODELS,
    OPENAI_NATIVE_EMBEDDING_DEFAULT_MODEL_ID,
    normalize_embedding_configuration,
    sync_with_api_configuration,
)


class TestNormalizeEmbeddingConfiguration:
    """Tests for normalize_embedding_configuration()."""

    def test_empty_configuration_uses_openai_default(self):
        selection = normalize_embedding_configuration(None)

        assert selection.provider == "openai-native"
        assert selection.model_id == OPENAI_NATIVE_EMBEDDING_DEFAULT_MODEL_ID

    def test_known_model_is_kept(self):
        selection = normalize_embedding_configuration(
            {"provider": "bedrock", "model_id": "amazon.titan-embed-text-v2:0"}
        )

        assert selection.model_id == "amazon.titan-embed-text-v2:0"
        assert selection.model_info is BEDROCK_EMBEDDING_MODELS["amazon.titan-embed-text-v2:0"]

    def test_model_from_other_catalog_falls_back(self):
        selection = normalize_embedding_configuration(
            {"provider": "bedrock", "model_id": "text-embedding-3-large"}
        )

        assert selection.model_id == BEDROCK_EMBEDDING_DEFAULT_MODEL_ID

    @pytest.mark.parametrize("provider", ["openai", "azure", "something-else"])
    def test_other_providers_use_openai_catalog(self, provider):
        selection = normalize_embedding_configuration(
            {"provider": provider, "model_id": "text-embedding-3-large"}
        )

        assert selection.provider == provider
        assert selection.model_id == "text-embedding-3-large"


    @pytest.mark.parametrize("provider", sorted(EMBEDDING_PROVIDER_MODELS))
    def test_default_model_comes_from_provider_catalog(self, provider):
        selection = normalize_embedding_configuration({"provider": provider})

        assert selection.model_info is EMBEDDING_PROVIDER_MODELS[provider][selection.model_id]


class TestSyncWithApiConfiguration:
    """Tests for sync_with_api_configuration()."""

    def test_openai_native_copies_key(self):
        embedding = {"provider": "bedrock", "model_id": "x"}

        result = sync_with_api_configuration(
            embedding, {"api_provider": "openai-native", "openai_native_api_key": "sk-1"}
        )

        assert result == {"provider": "openai-native", "model_id": "x", "openai_native_api_key": "sk-1"}
        assert embedding == {"provider": "bedrock", "model_id": "x"}

    def test_openai_compatible_copies_base_url(self):
        result = sync_with_api_configuration(
            {},
            {"api_provider": "openai", "openai_api_key": "k", "openai_base_url": "http://local/v1"},
        )

        assert result == {"provider": "openai", "openai_api_key": "k", "openai_base_url": "http://local/v1"}

    def test_unsupported_provider_leaves_configuration(self):
        embedding = {"provider": "openai-native", "openai_native_api_key": "sk"}

        result = sync_with_api_configuration(embedding, {"api_provider": "anthropic"})

        assert result == embedding

    def test_no_api_configuration(self):
        assert sync_with_api_configuration({"provider": "openai"}, None) == {"provider": "openai"}
