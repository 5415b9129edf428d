import json
import os
import sys
from types import SimpleNamespace

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flashdeck.deck import Card


SAMPLE_CARDS = [
    {"id": 1, "en": "Good morning", "zh": "早上好", "pinyin": "Zǎoshang hǎo"},
    {"id": 2, "en": "Thank you", "zh": "谢谢", "pinyin": "Xièxie"},
    {"id": 3, "en": "See you tomorrow", "zh": "明天见", "pinyin": "Míngtiān jiàn"},
]


def write_jsonl(path, records):
    with open(path, "w", encoding="utf-8") as f:
        for rec in records:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")
    return path


@pytest.fixture
def deck_file(tmp_path):
    return write_jsonl(tmp_path / "flashcards.jsonl", SAMPLE_CARDS)


@pytest.fixture
def sample_deck():
    return [Card.from_dict(rec) for rec in SAMPLE_CARDS]


class StubTranslator:
    """Returns a fixed translation, or raises the configured error."""

    def __init__(self, result=("你好", "Nǐ hǎo"), error=None):
        self.result = result
        self.error = error
        self.calls = []

    def translate(self, sentence):
        self.calls.append(sentence)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def stub_translator():
    return StubTranslator()


class FakeCompletions:
    """Stands in for ``OpenAI().chat.completions``."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def fake_openai(*responses):
    completions = FakeCompletions(responses)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


def chat_reply(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )
