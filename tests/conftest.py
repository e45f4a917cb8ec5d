from pathlib import Path
from types import SimpleNamespace
import os
import sys
import tempfile

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep test runs from writing into the project's logs/ directory
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="dgv-logs-"))

from src.models import NewsItem, NewsletterContent, Quote, Subscriber, TriviaQuestion


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else ("" if payload is None else str(payload))

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise RuntimeError(f"HTTP {self.status_code}")


def make_completion(text):
    """Shape of an OpenAI chat completion response."""
    message = SimpleNamespace(content=text)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    def __init__(self, text=None, error=None):
        self.calls = []
        self._text = text
        self._error = error
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self._error:
            raise self._error
        return make_completion(self._text)


@pytest.fixture
def sample_content():
    return NewsletterContent(
        quote=Quote(text="Keep going.", author="Someone"),
        trivia=[
            TriviaQuestion(
                number=1,
                question="Which planet is largest?",
                category="Science",
                difficulty="easy",
                options=["Mars", "Jupiter", "Venus", "Earth"],
                correct_answer="Jupiter",
            )
        ],
        ai_news=[
            NewsItem(headline=f"Headline {i}", summary=f"Summary {i}", why_it_matters=f"Matters {i}")
            for i in range(1, 6)
        ],
    )


@pytest.fixture
def subscribers():
    return [
        Subscriber(email="first@example.com", unsubscribe_token="tok-1"),
        Subscriber(email="second@example.com", unsubscribe_token="tok-2"),
        Subscriber(email="third@example.com", unsubscribe_token="tok-3"),
    ]
