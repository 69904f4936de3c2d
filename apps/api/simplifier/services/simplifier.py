from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from simplifier.core.llm import LLMClient
from simplifier.schemas.summary import SummaryRecord
from simplifier.services.json_extractor import extract_json_object
from simplifier.services.normalizer import normalize_summary, recognized_keys
from simplifier.services.prompts import (
    FENCED_FALLBACK_INSTRUCTION,
    STRICT_JSON_INSTRUCTION,
    Tone,
    build_system_prompt,
    build_user_prompt,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_INPUT_CHARS = 12_000

UNAVAILABLE_TLDR = "Summary unavailable — please retry."

# inputs at or below this length may legitimately produce an empty tldr
MIN_CHARS_FOR_PLACEHOLDER = 20


class EmptyInputError(Exception):
    pass


@dataclass(frozen=True)
class SummaryOrchestrator:
    """
    Turns contract text into a SummaryRecord with at most two LLM calls.

    1. strict pass: provider JSON mode + "JSON only" instruction
    2. fallback pass (only if nothing recognizable was extracted): same
       system prompt, asks for a ```json fenced block instead

    Whatever the last pass produced is normalized; parse failures degrade to
    field defaults. LLM transport/auth/quota errors propagate untouched and
    are never retried here.
    """

    llm: LLMClient
    max_input_chars: int = DEFAULT_MAX_INPUT_CHARS

    def _clip(self, text: str) -> str:
        if len(text) <= self.max_input_chars:
            return text
        logger.info(
            "Input clipped from %d to %d chars", len(text), self.max_input_chars
        )
        return text[: self.max_input_chars]

    async def _attempt(
        self,
        *,
        user_prompt: str,
        tone: Tone,
        instruction: str,
        json_mode: bool,
    ) -> dict[str, Any]:
        raw_completion = await self.llm.generate(
            prompt=user_prompt,
            system=build_system_prompt(tone, extra_instruction=instruction),
            json_mode=json_mode,
        )
        return extract_json_object(raw_completion)

    async def summarize(self, text: str | None, tone: object = None) -> SummaryRecord:
        if not isinstance(text, str) or not text.strip():
            raise EmptyInputError("Missing 'text'.")

        if not isinstance(tone, Tone):
            tone = Tone.parse(tone)

        user_prompt = build_user_prompt(self._clip(text))

        parsed = await self._attempt(
            user_prompt=user_prompt,
            tone=tone,
            instruction=STRICT_JSON_INSTRUCTION,
            json_mode=True,
        )
        attempt = "strict"

        if not recognized_keys(parsed):
            logger.warning(
                "Strict pass from %s:%s yielded no summary fields; retrying with fenced fallback",
                self.llm.provider_name,
                self.llm.model_name,
            )
            parsed = await self._attempt(
                user_prompt=user_prompt,
                tone=tone,
                instruction=FENCED_FALLBACK_INSTRUCTION,
                json_mode=False,
            )
            attempt = "fallback"
            if not recognized_keys(parsed):
                logger.error("Fallback pass also yielded no summary fields; using defaults")

        record = normalize_summary(parsed)

        if not record.tldr and len(text.strip()) > MIN_CHARS_FOR_PLACEHOLDER:
            record = record.model_copy(update={"tldr": UNAVAILABLE_TLDR})

        logger.info(
            "Summary ready (tone=%s, attempt=%s, input_chars=%d, confidence=%d)",
            tone.value,
            attempt,
            len(text),
            record.confidence,
        )
        return record
