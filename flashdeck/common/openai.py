import json
from typing import Any, Dict, List, Optional, Tuple

import openai
from openai import OpenAI
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from flashdeck.common.errors import (
    ConfigError,
    EmptyResponse,
    MissingFields,
    ParseError,
    TransportError,
)
from flashdeck.common.logging import log, log_debug


DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TIMEOUT_S = 60.0

# JSON schema for structured outputs
TRANSLATION_SCHEMA = {
    "name": "translation",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "zh": {"type": "string"},
            "pinyin": {"type": "string"},
        },
        "required": ["zh", "pinyin"],
        "additionalProperties": False,
    },
}

SYSTEM_PROMPT = "Translate the provided English sentence into Chinese, including pinyin and Chinese characters."

EXAMPLE_INPUT = "I'll probably have time next week. Is that okay?"
EXAMPLE_OUTPUT = json.dumps(
    {
        "zh": "我下周可能有时间，可以吗？",
        "pinyin": "Wǒ xià zhōu kěnéng yǒu shíjiān, kěyǐ ma?",
    },
    ensure_ascii=False,
)


def build_messages(sentence: str) -> List[Dict[str, str]]:
    """Few-shot conversation: instruction, one worked example, then the sentence."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": EXAMPLE_INPUT},
        {"role": "assistant", "content": EXAMPLE_OUTPUT},
        {"role": "user", "content": sentence},
    ]


class TranslationClient:
    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT_S,
        max_attempts: int = 1,
        client: Optional[Any] = None,
        verbose: bool = False,
    ) -> None:
        if not api_key or not model:
            raise ConfigError("OpenAI API key and model must be provided")
        self.model = model
        self.max_attempts = max(1, max_attempts)
        self.verbose = verbose
        self.wait = wait_exponential(multiplier=1, min=1, max=8)
        self.client = client if client is not None else OpenAI(api_key=api_key, timeout=timeout)

    def _create(self, messages: List[Dict[str, str]]) -> Any:
        """Single chat completions request, with SDK errors mapped to ours."""
        try:
            return self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                response_format={"type": "json_schema", "json_schema": TRANSLATION_SCHEMA},
            )
        except openai.APIResponseValidationError as e:
            raise ParseError(f"malformed response from OpenAI API: {e}") from e
        except openai.APIError as e:
            raise TransportError(f"OpenAI API request failed: {e}") from e
        except ValueError as e:
            # Non-JSON reply body
            raise ParseError(f"malformed response from OpenAI API: {e}") from e

    def complete_structured(self, messages: List[Dict[str, str]]) -> Dict[str, Any]:
        """Complete with structured outputs and return the decoded JSON object."""
        resp = None
        for attempt in Retrying(
            reraise=True,
            stop=stop_after_attempt(self.max_attempts),
            wait=self.wait,
            retry=retry_if_exception_type(TransportError),
        ):
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    log("api", f"Retrying request (attempt {attempt.retry_state.attempt_number}/{self.max_attempts})")
                resp = self._create(messages)

        choices = getattr(resp, "choices", None) or []
        if not choices:
            raise EmptyResponse(f"no response from OpenAI API: {resp!r}")

        text = choices[0].message.content or ""
        log_debug(self.verbose, f"Raw reply: {text}")
        try:
            data = json.loads(text)
        except ValueError as e:
            raise ParseError(f"reply content is not valid JSON: {text!r}") from e
        if not isinstance(data, dict):
            raise ParseError(f"reply content is not a JSON object: {text!r}")
        return data

    def translate(self, sentence: str) -> Tuple[str, str]:
        """Return the Chinese translation and pinyin of an English sentence."""
        log("api", f"Translating: {sentence}")
        data = self.complete_structured(build_messages(sentence))

        zh = data.get("zh")
        pinyin = data.get("pinyin")
        if not isinstance(zh, str) or not isinstance(pinyin, str) or not zh or not pinyin:
            raise MissingFields("no translation found")
        return zh, pinyin
