from concurrent.futures import ThreadPoolExecutor
import logging
from typing import Optional

from ..config import Settings
from ..data_sources import AINews, QuoteOfTheDay, TriviaQuestions
from ..data_sources.base import DataSource
from ..models import NewsletterContent

logger = logging.getLogger(__name__)

class NewsletterGenerator:
    """
    Gathers one issue's content from the quote, trivia and AI news sources.

    The three sources are fetched concurrently and joined before returning.
    Each source falls back to static content on failure, so generation never
    raises.
    """

    def __init__(self,
                 settings: Optional[Settings] = None,
                 quote_source: Optional[DataSource] = None,
                 trivia_source: Optional[DataSource] = None,
                 news_source: Optional[DataSource] = None):
        """Initialize the generator and its data sources."""
        settings = settings or Settings.from_env()
        self.quote_source = quote_source or QuoteOfTheDay(
            api_url=settings.quote_api_url, timeout=settings.request_timeout)
        self.trivia_source = trivia_source or TriviaQuestions(
            api_url=settings.trivia_api_url, amount=settings.trivia_amount,
            timeout=settings.request_timeout)
        self.news_source = news_source or AINews(
            api_key=settings.openai_api_key, model=settings.openai_model)

    def generate_content(self) -> NewsletterContent:
        """Fetch all three content sections in parallel."""
        logger.info("Generating content...")
        sources = (self.quote_source, self.trivia_source, self.news_source)

        with ThreadPoolExecutor(max_workers=len(sources)) as executor:
            futures = [executor.submit(source.fetch_data) for source in sources]
            quote, trivia, ai_news = [
                self._result_or_fallback(source, future)
                for source, future in zip(sources, futures)
            ]

        content = NewsletterContent(quote=quote, trivia=trivia, ai_news=ai_news)
        logger.info("Content generated successfully")
        logger.info(f"  - Quote: \"{quote.text[:50]}...\"")
        logger.info(f"  - Trivia: {len(trivia)} questions")
        logger.info(f"  - AI News: {len(ai_news)} stories")
        return content

    @staticmethod
    def _result_or_fallback(source: DataSource, future):
        # fetch_data is written not to raise; a source that does still gets its fallback
        try:
            return future.result()
        except Exception as e:
            logger.error(f"Unexpected error from {source.name}: {e}", exc_info=True)
            return source.fallback()
