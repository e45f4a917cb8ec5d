"""
Module for managing newsletter subscribers in the hosted subscriber table.

The table is served through a PostgREST endpoint (Supabase), so every
operation is a plain HTTP request with query-string filters.
"""

from datetime import datetime, timezone
from typing import List, Optional

import requests

from config.logger import logger
from ..models import Subscriber

SUBSCRIBER_COLUMNS = "email,unsubscribe_token,is_active,subscribed_at"

class SubscriberStoreError(Exception):
    """Raised when the subscriber table cannot be read or written."""

class DuplicateSubscriberError(SubscriberStoreError):
    """Raised when an insert violates the unique email constraint."""

class SubscriberManager:
    """
    Gateway to the subscriber table.

    Handles fetching active subscribers for delivery and inserting new
    subscribers from the signup flow.
    """

    def __init__(self,
                 base_url: Optional[str],
                 api_key: Optional[str],
                 table: str = "subscribers",
                 timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        """
        Initialize the subscriber manager.

        Args:
            base_url: Project URL of the hosted database
            api_key: Service key for the pipeline, anonymous key for signups
            table: Name of the subscriber table
            timeout: HTTP timeout in seconds
            session: Optional requests session (a new one is created if None)
        """
        self.logger = logger.getChild(self.__class__.__name__)

        if not base_url or not api_key:
            self.logger.error("Subscriber database URL or key is missing. Subscriber lookups will fail.")

        self.base_url = (base_url or "").rstrip("/")
        self.api_key = api_key or ""
        self.table = table
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/rest/v1/{self.table}"

    def _headers(self, **extra) -> dict:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        headers.update(extra)
        return headers

    def _select(self, params: dict) -> List[dict]:
        if not self.base_url:
            raise SubscriberStoreError("Subscriber database URL is not configured")

        try:
            response = self.session.get(self.endpoint, params=params,
                                        headers=self._headers(), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise SubscriberStoreError(f"Could not reach subscriber database: {e}") from e

        if response.status_code >= 400:
            raise SubscriberStoreError(
                f"Subscriber query failed: HTTP {response.status_code} - {response.text}")

        try:
            rows = response.json()
        except ValueError as e:
            raise SubscriberStoreError(f"Subscriber query returned invalid JSON: {e}") from e

        if not isinstance(rows, list):
            raise SubscriberStoreError(f"Subscriber query returned {type(rows).__name__}, expected list")
        return rows

    def fetch_active_subscribers(self, limit: int = 100) -> List[Subscriber]:
        """
        Get active subscribers, oldest first.

        Only the first `limit` active subscribers are returned, so later
        subscribers are skipped for the run once the table outgrows it.

        Args:
            limit: Maximum number of subscribers to fetch

        Returns:
            List of active subscribers ordered by subscribed_at ascending

        Raises:
            SubscriberStoreError: If the query fails for any reason
        """
        params = {
            "select": SUBSCRIBER_COLUMNS,
            "is_active": "eq.true",
            "order": "subscribed_at.asc",
            "limit": str(limit),
        }
        rows = self._select(params)
        subscribers = [Subscriber.from_row(row) for row in rows]
        self.logger.info(f"Found {len(subscribers)} active subscribers")
        return subscribers

    def find_subscriber(self, email: str) -> Optional[Subscriber]:
        """
        Look up a subscriber by exact email match.

        Args:
            email: Subscriber's email address

        Returns:
            The matching subscriber, or None
        """
        rows = self._select({"select": SUBSCRIBER_COLUMNS, "email": f"eq.{email}", "limit": "1"})
        return Subscriber.from_row(rows[0]) if rows else None

    def insert_subscriber(self, email: str, subscribed_at: Optional[datetime] = None) -> Subscriber:
        """
        Insert a new active subscriber.

        The unsubscribe token is filled in by the database default.

        Args:
            email: Subscriber's email address
            subscribed_at: Signup time (defaults to now, UTC)

        Returns:
            The subscriber that was inserted

        Raises:
            DuplicateSubscriberError: If the email already exists
            SubscriberStoreError: If the insert fails for any other reason
        """
        if not self.base_url:
            raise SubscriberStoreError("Subscriber database URL is not configured")

        subscribed_at = subscribed_at or datetime.now(timezone.utc)
        row = {
            "email": email,
            "subscribed_at": subscribed_at.isoformat(),
            "is_active": True,
        }

        try:
            response = self.session.post(self.endpoint, json=[row],
                                         headers=self._headers(Prefer="return=minimal"),
                                         timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise SubscriberStoreError(f"Could not reach subscriber database: {e}") from e

        if response.status_code == 409:
            raise DuplicateSubscriberError(f"Subscriber already exists: {email}")
        if response.status_code >= 400:
            raise SubscriberStoreError(
                f"Subscriber insert failed: HTTP {response.status_code} - {response.text}")

        self.logger.info(f"Added new subscriber: {email}")
        return Subscriber.from_row(row)
