"""
Base class for content sources used in the newsletter.
"""

from abc import ABC, abstractmethod
from typing import Any

# Import the logger from config
from config.logger import logger

class DataSource(ABC):
    """
    Abstract base class for all content sources.

    Subclasses implement fetch_data, which must never raise, and fallback,
    which returns the static content used when the live fetch fails.
    """

    def __init__(self, name: str, timeout: float = 10.0):
        """
        Initialize the data source.

        Args:
            name: A descriptive name for the data source
            timeout: HTTP timeout in seconds for live requests
        """
        self.name = name
        self.timeout = timeout
        self.logger = logger.getChild(self.__class__.__name__)

    @abstractmethod
    def fetch_data(self) -> Any:
        """
        Fetch content from the source.

        Returns:
            Live content, or the fallback content if the fetch failed
        """
        pass

    @abstractmethod
    def fallback(self) -> Any:
        """Return the static content used when the live fetch fails."""
        pass

    def log_fetch_attempt(self, **kwargs):
        """
        Log an attempt to fetch data.

        Args:
            **kwargs: Parameters used for the fetch attempt
        """
        self.logger.info(f"Fetching data from {self.name} with parameters: {kwargs}")

    def log_fetch_success(self, data_size: int):
        """
        Log a successful data fetch.

        Args:
            data_size: Size or count of the fetched data
        """
        self.logger.info(f"Successfully fetched {data_size} items from {self.name}")

    def log_fetch_error(self, error: Exception):
        """
        Log an error during data fetch.

        Args:
            error: The exception that occurred
        """
        self.logger.error(f"Error fetching data from {self.name}: {str(error)}")
        self.logger.info(f"Using fallback content for {self.name}")
