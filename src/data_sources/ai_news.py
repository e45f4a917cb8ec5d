"""
Module for generating the daily AI news summaries with a language model.
"""

from typing import Any, List, Optional

import openai

from .base import DataSource
from .fallbacks import fallback_ai_news, filler_news_item
from .news_parser import parse_news_items, strip_code_fences
from ..models import NewsItem

NEWS_ITEM_COUNT = 5

NEWS_PROMPT = """You are a tech news curator. Generate exactly 5 AI news summaries.

Return ONLY valid JSON (no markdown, no code blocks, no extra text):

[
  {
    "headline": "headline text",
    "summary": "summary text",
    "why_it_matters": "importance text"
  }
]

Requirements:
- Exactly 5 news items
- Headlines: max 15 words
- Summaries: 2-3 sentences, max 100 words each
- Focus on: AI breakthroughs, products, policy, research, industry news
- Make it engaging for tech readers"""

class AINews(DataSource):
    """
    Data source for AI news, written by an OpenAI chat model.

    Always yields exactly five items: short responses are padded with a filler
    item, long ones truncated, and any failure replaced by the fallback set.
    """

    def __init__(self,
                 api_key: Optional[str] = None,
                 model: str = "gpt-4-turbo",
                 client: Optional[Any] = None,
                 max_tokens: int = 2500,
                 temperature: float = 0.7):
        super().__init__(name="AI News")
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.client = client
        if self.client is None and api_key:
            try:
                self.client = openai.OpenAI(api_key=api_key)
            except Exception as e:
                self.logger.error(f"Failed to initialize OpenAI client: {e}", exc_info=True)

    def fetch_data(self) -> List[NewsItem]:
        """
        Generate five AI news items.

        Returns:
            Exactly five news items, live or fallback
        """
        self.log_fetch_attempt(model=self.model, items=NEWS_ITEM_COUNT)

        try:
            if self.client is None:
                raise RuntimeError("OpenAI client not initialized")

            response_text = self._request_completion()
            items = parse_news_items(strip_code_fences(response_text))

            if not isinstance(items, list) or not items:
                raise ValueError(f"Expected array of news items, got: {type(items).__name__}")

            news = [NewsItem.from_dict(item) for item in items[:NEWS_ITEM_COUNT]]

            if len(news) < NEWS_ITEM_COUNT:
                self.logger.warning(f"Only got {len(news)} AI news items, padding with fallbacks")
                while len(news) < NEWS_ITEM_COUNT:
                    news.append(filler_news_item())

            self.log_fetch_success(len(news))
            return news

        except Exception as e:
            self.log_fetch_error(e)
            return self.fallback()

    def _request_completion(self) -> str:
        """Send the curator prompt and return the text of the first choice."""
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": NEWS_PROMPT}],
            temperature=self.temperature,
            max_tokens=self.max_tokens
        )
        content = response.choices[0].message.content
        return content.strip() if content else ""

    def fallback(self) -> List[NewsItem]:
        return fallback_ai_news()
