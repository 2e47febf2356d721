from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.core.config import Settings
from app.services.enhancement_service import (
    LLM_MAX_TOKENS,
    SYSTEM_PROMPT,
    EnhancementService,
    build_user_prompt,
)

ORIGINAL = "You are always late to meetings and it's annoying."


def _service_with_response(content) -> EnhancementService:
    service = EnhancementService()
    service.initialized = True
    service.model = "gpt-4o"
    service.client = MagicMock()

    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    service.client.chat.completions.create = AsyncMock(return_value=response)
    return service


class TestPrompt:
    def test_includes_name_when_given(self):
        prompt = build_user_prompt(ORIGINAL, "Michael Chen")
        assert "for Michael Chen" in prompt
        assert f'Original feedback: "{ORIGINAL}"' in prompt

    def test_omits_name_when_blank(self):
        assert " for " not in build_user_prompt("hi", "   ").split("\n")[0]

    def test_system_prompt_mentions_safety_filtering(self):
        assert "SAFETY FILTERING" in SYSTEM_PROMPT


class TestInitialize:
    @pytest.mark.anyio
    async def test_missing_credentials_leaves_service_uninitialized(self):
        service = EnhancementService()
        await service.initialize(Settings(OPENAI_ENDPOINT="", OPENAI_API_KEY=""))
        assert service.initialized is False
        assert service.client is None

    @pytest.mark.anyio
    async def test_with_credentials(self):
        service = EnhancementService()
        await service.initialize(
            Settings(OPENAI_ENDPOINT="https://example.openai.azure.com", OPENAI_API_KEY="key")
        )
        assert service.initialized is True
        assert service.model == "gpt-4o"
        await service.close()
        assert service.initialized is False


class TestEnhance:
    @pytest.mark.anyio
    async def test_not_initialized_returns_original(self):
        service = EnhancementService()
        assert await service.enhance(ORIGINAL) == ORIGINAL

    @pytest.mark.anyio
    async def test_returns_stripped_llm_text(self):
        service = _service_with_response("  I have noticed meetings often start late.  ")

        result = await service.enhance(ORIGINAL, "Michael")

        assert result == "I have noticed meetings often start late."
        kwargs = service.client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["max_tokens"] == LLM_MAX_TOKENS
        assert kwargs["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
        assert "for Michael" in kwargs["messages"][1]["content"]

    @pytest.mark.anyio
    async def test_upstream_failure_returns_original(self):
        service = _service_with_response("unused")
        service.client.chat.completions.create = AsyncMock(side_effect=Exception("upstream unavailable"))

        assert await service.enhance(ORIGINAL) == ORIGINAL

    @pytest.mark.anyio
    async def test_timeout_returns_original(self):
        service = _service_with_response("unused")
        service.client.chat.completions.create = AsyncMock(side_effect=TimeoutError())

        assert await service.enhance(ORIGINAL) == ORIGINAL

    @pytest.mark.anyio
    @pytest.mark.parametrize("content", [None, "", "   "])
    async def test_empty_response_returns_original(self, content):
        service = _service_with_response(content)
        assert await service.enhance(ORIGINAL) == ORIGINAL

    @pytest.mark.anyio
    async def test_malformed_response_returns_original(self):
        service = _service_with_response("unused")
        response = MagicMock()
        response.choices = []
        service.client.chat.completions.create = AsyncMock(return_value=response)

        assert await service.enhance(ORIGINAL) == ORIGINAL
