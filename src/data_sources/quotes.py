"""
Module for fetching the quote of the day.
"""

import requests

from .base import DataSource
from .fallbacks import fallback_quote
from ..models import Quote

class QuoteOfTheDay(DataSource):
    """
    Data source for the quote of the day.

    Reads the first element of the ZenQuotes "today" payload.
    """

    def __init__(self, api_url: str = "https://zenquotes.io/api/today", timeout: float = 10.0):
        """
        Initialize the quote data source.

        Args:
            api_url: Endpoint returning a JSON array of {"q": ..., "a": ...} objects
            timeout: HTTP timeout in seconds
        """
        super().__init__(name="Quote of the Day", timeout=timeout)
        self.api_url = api_url

    def fetch_data(self) -> Quote:
        """
        Fetch today's quote.

        Returns:
            The live quote, or the fallback quote on any failure
        """
        self.log_fetch_attempt(url=self.api_url)

        try:
            response = requests.get(self.api_url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()

            if not isinstance(data, list) or not data:
                raise ValueError("Quote payload is empty")

            first = data[0]
            if not isinstance(first, dict) or not first.get("q"):
                raise ValueError("Quote payload has no text")

            quote = Quote(text=first["q"], author=first.get("a") or "Unknown")
            self.log_fetch_success(1)
            return quote

        except Exception as e:
            self.log_fetch_error(e)
            return self.fallback()

    def fallback(self) -> Quote:
        return fallback_quote()
