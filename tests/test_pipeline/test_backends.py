"""Tests for the rule-based and LLM generator backends."""

from unittest.mock import AsyncMock, patch

from cv_copilot.clients.llm_client import LLMResponse
from cv_copilot.config import AppConfig, BackendConfig
from cv_copilot.pipeline.backends import LLMBackend, RuleBasedBackend, create_backend
from cv_copilot.pipeline.cover_letter import build_cover_letter
from cv_copilot.pipeline.suggestion_generator import generate_suggestions


class TestRuleBasedBackend:
    async def test_matches_generator(self, sample_cv, sample_job):
        backend = RuleBasedBackend()
        assert await backend.suggest(sample_cv, sample_job) == generate_suggestions(sample_cv, sample_job)

    async def test_cover_letter(self, sample_cv, sample_job):
        letter = await RuleBasedBackend().cover_letter(sample_job, sample_cv, "Hello there.")
        assert letter == build_cover_letter(sample_job, sample_cv, "Hello there.")


class TestLLMBackendSuggest:
    async def test_parses_and_sorts(self, mock_llm_client, sample_cv, sample_job):
        mock_llm_client.generate_json.return_value = [
            {"category": "Tone", "original": "a", "suggested": "b", "reasoning": "c", "priority": "low"},
            {"category": "Skills", "original": "d", "suggested": "e", "reasoning": "f", "priority": "high"},
        ]
        backend = LLMBackend(mock_llm_client)
        result = await backend.suggest(sample_cv, sample_job, "cv text", "job text")
        assert [s.category for s in result] == ["Skills", "Tone"]
        prompt = mock_llm_client.generate_json.call_args.kwargs["prompt"]
        assert "cv text" in prompt
        assert "job text" in prompt

    async def test_accepts_wrapped_list_and_skips_bad_items(self, mock_llm_client, sample_cv, sample_job):
        mock_llm_client.generate_json.return_value = {
            "suggestions": [
                {"category": "", "original": "a", "suggested": "b", "reasoning": "c", "priority": "high"},
                {"category": "X", "original": "a", "suggested": "b", "reasoning": "c", "priority": "urgent"},
                "not a dict",
                {"category": "Ok", "original": "a", "suggested": "b", "reasoning": "c", "priority": "medium"},
            ]
        }
        result = await LLMBackend(mock_llm_client).suggest(sample_cv, sample_job)
        assert [s.category for s in result] == ["Ok"]

    async def test_respects_max_suggestions(self, mock_llm_client, sample_cv, sample_job):
        item = {"category": "C", "original": "a", "suggested": "b", "reasoning": "c", "priority": "high"}
        mock_llm_client.generate_json.return_value = [item] * 5
        result = await LLMBackend(mock_llm_client, max_suggestions=2).suggest(sample_cv, sample_job)
        assert len(result) == 2

    async def test_falls_back_on_error(self, mock_llm_client, sample_cv, sample_job):
        mock_llm_client.generate_json.side_effect = RuntimeError("API down")
        result = await LLMBackend(mock_llm_client).suggest(sample_cv, sample_job)
        assert result == generate_suggestions(sample_cv, sample_job)

    async def test_falls_back_on_empty_result(self, mock_llm_client, sample_cv, sample_job):
        mock_llm_client.generate_json.return_value = {"unexpected": True}
        result = await LLMBackend(mock_llm_client).suggest(sample_cv, sample_job)
        assert result == generate_suggestions(sample_cv, sample_job)


class TestLLMBackendCoverLetter:
    async def test_returns_model_text(self, mock_llm_client, sample_cv, sample_job):
        mock_llm_client.generate.return_value = LLMResponse(
            text="  Dear Hiring Manager,\n\nHi.  ", input_tokens=10, output_tokens=5
        )
        letter = await LLMBackend(mock_llm_client).cover_letter(sample_job, sample_cv, "My note.")
        assert letter == "Dear Hiring Manager,\n\nHi."
        assert "My note." in mock_llm_client.generate.call_args.kwargs["prompt"]

    async def test_falls_back_on_blank_text(self, mock_llm_client, sample_cv, sample_job):
        letter = await LLMBackend(mock_llm_client).cover_letter(sample_job, sample_cv)
        assert letter == build_cover_letter(sample_job, sample_cv)

    async def test_falls_back_on_error(self, mock_llm_client, sample_cv, sample_job):
        mock_llm_client.generate = AsyncMock(side_effect=TimeoutError())
        letter = await LLMBackend(mock_llm_client).cover_letter(sample_job, sample_cv, "Note.")
        assert letter == build_cover_letter(sample_job, sample_cv, "Note.")


class TestCreateBackend:
    def test_default_is_rule_based(self):
        assert isinstance(create_backend(AppConfig()), RuleBasedBackend)

    def test_llm_with_injected_client(self, mock_llm_client):
        config = AppConfig(backend=BackendConfig(kind="llm", max_tokens=1024))
        backend = create_backend(config, llm=mock_llm_client)
        assert isinstance(backend, LLMBackend)
        assert backend.llm is mock_llm_client
        assert backend.max_tokens == 1024

    def test_llm_builds_client_from_config(self):
        config = AppConfig(backend=BackendConfig(kind="llm", timeout=30))
        with patch("cv_copilot.pipeline.backends.LLMClient") as mock_cls:
            create_backend(config)
        mock_cls.assert_called_once_with(timeout=30, model=config.backend.model)
