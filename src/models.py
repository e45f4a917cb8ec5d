"""
Data types shared by the newsletter pipeline and the subscription flow.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Quote:
    text: str
    author: str


@dataclass
class TriviaQuestion:
    number: int
    question: str
    category: str
    difficulty: str
    options: List[str]
    correct_answer: str


@dataclass
class NewsItem:
    headline: str
    summary: str
    why_it_matters: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NewsItem":
        """
        Build a news item from a parsed JSON object.

        Args:
            data: Object with headline, summary and why_it_matters keys

        Returns:
            NewsItem with missing keys set to empty strings

        Raises:
            TypeError: If data is not a JSON object
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected news item object, got {type(data).__name__}")
        return cls(
            headline=str(data.get("headline", "")),
            summary=str(data.get("summary", "")),
            why_it_matters=str(data.get("why_it_matters", "")),
        )


@dataclass
class NewsletterContent:
    """One issue's content, rendered identically for every subscriber."""

    quote: Quote
    trivia: List[TriviaQuestion] = field(default_factory=list)
    ai_news: List[NewsItem] = field(default_factory=list)


@dataclass
class Subscriber:
    email: str
    unsubscribe_token: Optional[str] = None
    is_active: bool = True
    subscribed_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Subscriber":
        """Build a subscriber from a row returned by the subscriber table."""
        return cls(
            email=row.get("email", ""),
            unsubscribe_token=row.get("unsubscribe_token"),
            is_active=bool(row.get("is_active", True)),
            subscribed_at=row.get("subscribed_at"),
        )


@dataclass
class BatchResult:
    """Outcome of one batch send."""

    attempted: int = 0
    success_count: int = 0
    error_count: int = 0
