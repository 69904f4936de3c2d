from __future__ import annotations

from enum import Enum


class Tone(str, Enum):
    PLAIN = "plain"  # verbose, educational
    EXECUTIVE = "executive"  # compact, for decision makers

    @classmethod
    def parse(cls, value: object) -> "Tone":
        """Only 'executive' selects compact mode; anything else is plain."""
        if isinstance(value, str) and value.strip().lower() == cls.EXECUTIVE.value:
            return cls.EXECUTIVE
        return cls.PLAIN


OUTPUT_SCHEMA = """{
  "tldr": string,
  "partiesPurpose": string,
  "obligations": { "you": [string, ...], "them": [string, ...] },
  "moneyAndDates": { "payments": [string, ...], "dates": [string, ...] },
  "riskFlags": [string, ...],
  "actions": [string, ...],
  "unknowns": [string, ...],
  "excerpt": string,
  "confidence": number
}"""

_TONE_DIRECTIVES: dict[Tone, str] = {
    Tone.PLAIN: """Style:
- Write for a non-lawyer reading this contract for the first time.
- Explain legal terms in everyday words the first time they appear.
- "tldr" is 3-5 sentences. List items are full sentences that say why they matter.
- Prefer "you" and "they" over party names in obligations.""",
    Tone.EXECUTIVE: """Style:
- Write for a busy executive. Be terse and concrete.
- "tldr" is at most 2 sentences. List items are short phrases (max ~12 words).
- Lead with amounts, dates and deal-breakers. Skip explanations of legal terms.""",
}

SYSTEM_PROMPT_TEMPLATE = """You are a contract and policy simplifier.
Write plain-English briefs for non-lawyers.

Identify:
1. the parties and the purpose of the agreement
2. what each side must do (obligations)
3. money terms and key dates or deadlines
4. risk flags (penalties, auto-renewal, indemnity, termination, IP, jurisdiction, data use)
5. concrete next steps the reader should take
6. anything important the text does not say (unknowns)

Return a JSON object that matches EXACTLY this schema:

{schema}

Rules:
- Use only what the text says. Put gaps in "unknowns" instead of guessing.
- "obligations.you" is the reader's side; "obligations.them" is the counterparty.
- "excerpt" is a short verbatim quote (max ~40 words) of the most important clause, or "".
- "confidence" is 0 to 100: how well the text supported the summary.
- Use [] for empty lists and "" for empty strings. Never use null.

{tone_directives}"""

STRICT_JSON_INSTRUCTION = (
    "Respond ONLY with the JSON object. No markdown, no code fences, no extra text."
)

FENCED_FALLBACK_INSTRUCTION = (
    "Respond with the JSON object. If you cannot produce strict JSON output, "
    "wrap the JSON object in a ```json fenced code block and add nothing else."
)


def build_system_prompt(tone: Tone, *, extra_instruction: str | None = None) -> str:
    prompt = SYSTEM_PROMPT_TEMPLATE.format(
        schema=OUTPUT_SCHEMA,
        tone_directives=_TONE_DIRECTIVES[tone],
    )
    if extra_instruction:
        prompt = f"{prompt}\n\n{extra_instruction}"
    return prompt


def build_user_prompt(text: str) -> str:
    return f"--- CONTRACT / POLICY TEXT ---\n{text}\n--- END ---"
