"""
Data sources package for the Daily Good Vibes newsletter.
Contains modules for fetching the quote, trivia and AI news content.
"""

from .base import DataSource
from .quotes import QuoteOfTheDay
from .trivia import TriviaQuestions
from .ai_news import AINews
from .news_parser import NewsParseError, parse_news_items, strip_code_fences

__all__ = [
    'DataSource', 'QuoteOfTheDay', 'TriviaQuestions', 'AINews',
    'NewsParseError', 'parse_news_items', 'strip_code_fences'
]
