from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .base import LLMClient


@dataclass(frozen=True)
class RecordedCall:
    prompt: str
    system: str | None
    json_mode: bool
    options: Mapping[str, Any] | None


class DummyLLMClient(LLMClient):
    """
    Dev/test implementation of LLMClient that does not call any real model.

    Replays a queue of scripted replies. A queued Exception instance is
    raised instead of returned. Once the queue is empty, `default_reply`
    is returned for every call.

    Useful for:
    - unit tests (every call is recorded in `calls`)
    - local dev when you don't want to pay for API calls
    """

    def __init__(
        self,
        responses: Iterable[str | Exception] = (),
        *,
        model: str = "dummy-model",
        default_reply: str = '{"tldr": "Dummy summary.", "confidence": 50}',
    ) -> None:
        self._model = model
        self._responses: deque[str | Exception] = deque(responses)
        self._default_reply = default_reply
        self.calls: list[RecordedCall] = []

    def queue(self, *responses: str | Exception) -> None:
        """Append scripted replies (or exceptions to raise) to the queue."""
        self._responses.extend(responses)

    @property
    def provider_name(self) -> str:
        return "dummy"

    @property
    def model_name(self) -> str:
        return self._model

    async def generate(
        self,
        *,
        prompt: str,
        system: str | None = None,
        json_mode: bool = False,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        self.calls.append(
            RecordedCall(prompt=prompt, system=system, json_mode=json_mode, options=options)
        )

        if not self._responses:
            return self._default_reply

        reply = self._responses.popleft()
        if isinstance(reply, Exception):
            raise reply
        return reply
