"""Best-effort AI rewrite of feedback text via Azure OpenAI chat completions."""

from __future__ import annotations

import logging

from openai import AsyncAzureOpenAI

from app.core.config import Settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional HR feedback enhancement assistant. Your role is to transform any employee "
    "feedback into constructive, professional, and actionable workplace communication.\n\n"
    "SAFETY FILTERING (CRITICAL):\n"
    "- Remove or rephrase any profanity, harsh language, or toxic expressions\n"
    "- Eliminate personal accusations or character attacks\n"
    "- Convert complaints into constructive suggestions\n"
    "- Transform negative statements into growth opportunities\n"
    "- Replace vague criticisms with specific, actionable feedback\n\n"
    "ENHANCEMENT REQUIREMENTS:\n"
    "- Use the actual person's name if provided\n"
    "- Make it constructive and solution-focused\n"
    "- Keep the original meaning but improve tone\n"
    "- Be specific and actionable\n"
    "- Sound natural, not robotic\n"
    "- Focus on behaviors and outcomes, not personality traits\n"
    '- Use "I" statements and observation-based language\n\n'
    "Answer with the enhanced feedback only."
)

LLM_TEMPERATURE = 0.7
LLM_MAX_TOKENS = 400


def build_user_prompt(text: str, employee_name: str | None = None) -> str:
    name_context = f" for {employee_name.strip()}" if employee_name and employee_name.strip() else ""
    return (
        f"Transform this workplace feedback{name_context} into professional, constructive communication. "
        "Keep it concise (2-3 sentences max) and natural.\n\n"
        f'Original feedback: "{text}"\n\n'
        "Enhanced version:"
    )


class EnhancementService:
    def __init__(self) -> None:
        self.client: AsyncAzureOpenAI | None = None
        self.initialized = False
        self.model = ""

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.OPENAI_ENDPOINT or not settings.OPENAI_API_KEY:
            logger.warning("OpenAI credentials missing, EnhancementService not initialized")
            return

        self.client = AsyncAzureOpenAI(
            azure_endpoint=settings.OPENAI_ENDPOINT,
            api_key=settings.OPENAI_API_KEY,
            api_version=settings.OPENAI_API_VERSION,
            timeout=settings.OPENAI_TIMEOUT_SECONDS,
            max_retries=0,
        )
        self.model = settings.OPENAI_CHAT_MODEL
        self.initialized = True
        logger.info("EnhancementService initialized (model=%s)", self.model)

    async def close(self) -> None:
        if self.client:
            await self.client.close()
        self.client = None
        self.initialized = False

    def _build_messages(self, text: str, employee_name: str | None) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_user_prompt(text, employee_name)},
        ]

    async def enhance(self, text: str, employee_name: str | None = None) -> str:
        """Return the rewritten text, or ``text`` unchanged if anything goes wrong."""
        if not self.initialized or not self.client:
            logger.info("Enhancement skipped, service not configured")
            return text

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=self._build_messages(text, employee_name),  # type: ignore[arg-type]
                temperature=LLM_TEMPERATURE,
                max_tokens=LLM_MAX_TOKENS,
            )
            content = response.choices[0].message.content
        except Exception:
            logger.exception("AI enhancement failed, returning original text")
            return text

        if not isinstance(content, str) or not content.strip():
            logger.warning("No enhanced text in LLM response, returning original text")
            return text

        enhanced = content.strip()
        logger.info("Feedback enhanced (%d -> %d chars)", len(text), len(enhanced))
        return enhanced


enhancement_service = EnhancementService()
