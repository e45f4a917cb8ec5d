"""
Configuration module for the Daily Good Vibes newsletter.
Loads environment variables from .env file and provides access to configuration settings.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


# Load environment variables from .env file
load_dotenv()

# Subscriber database (hosted Postgres REST API)
SUPABASE_URL = os.getenv('SUPABASE_URL')
SUPABASE_SERVICE_KEY = os.getenv('SUPABASE_SERVICE_KEY')
SUPABASE_ANON_KEY = os.getenv('SUPABASE_ANON_KEY')

# Language model configuration
OPENAI_API_KEY = os.getenv('OPENAI_API_KEY')
OPENAI_MODEL = os.getenv('OPENAI_MODEL', 'gpt-4-turbo')

# Email Configuration
SENDGRID_API_KEY = os.getenv('SENDGRID_API_KEY')
EMAIL_SENDER = os.getenv('EMAIL_SENDER', 'onboarding@dailygoodvibes.dev')
EMAIL_SENDER_NAME = os.getenv('EMAIL_SENDER_NAME', 'Daily Good Vibes')

# Public website, used for unsubscribe links
WEBSITE_URL = os.getenv('WEBSITE_URL', 'http://localhost:8000')

# Content sources
QUOTE_API_URL = os.getenv('QUOTE_API_URL', 'https://zenquotes.io/api/today')
TRIVIA_API_URL = os.getenv('TRIVIA_API_URL', 'https://opentdb.com/api.php')
TRIVIA_AMOUNT = int(os.getenv('TRIVIA_AMOUNT', '10'))
REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', '10'))

# Newsletter Configuration
NEWSLETTER_TITLE = os.getenv('NEWSLETTER_TITLE', 'Daily Good Vibes')
NEWSLETTER_SEND_TIME = os.getenv('NEWSLETTER_SEND_TIME', '07:00')
SUBSCRIBER_LIMIT = int(os.getenv('SUBSCRIBER_LIMIT', '100'))
SEND_INTERVAL_SECONDS = float(os.getenv('SEND_INTERVAL_SECONDS', '0.1'))


@dataclass
class Settings:
    """
    Explicit settings passed into each component.

    Built from the environment by from_env(); tests construct it directly.
    """

    supabase_url: Optional[str] = None
    supabase_service_key: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    openai_model: str = 'gpt-4-turbo'
    sendgrid_api_key: Optional[str] = None
    email_sender: str = 'onboarding@dailygoodvibes.dev'
    email_sender_name: str = 'Daily Good Vibes'
    website_url: str = 'http://localhost:8000'
    quote_api_url: str = 'https://zenquotes.io/api/today'
    trivia_api_url: str = 'https://opentdb.com/api.php'
    trivia_amount: int = 10
    request_timeout: float = 10.0
    newsletter_title: str = 'Daily Good Vibes'
    newsletter_send_time: str = '07:00'
    subscriber_limit: int = 100
    send_interval: float = 0.1

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the module-level environment values."""
        return cls(
            supabase_url=SUPABASE_URL,
            supabase_service_key=SUPABASE_SERVICE_KEY,
            supabase_anon_key=SUPABASE_ANON_KEY,
            openai_api_key=OPENAI_API_KEY,
            openai_model=OPENAI_MODEL,
            sendgrid_api_key=SENDGRID_API_KEY,
            email_sender=EMAIL_SENDER,
            email_sender_name=EMAIL_SENDER_NAME,
            website_url=WEBSITE_URL,
            quote_api_url=QUOTE_API_URL,
            trivia_api_url=TRIVIA_API_URL,
            trivia_amount=TRIVIA_AMOUNT,
            request_timeout=REQUEST_TIMEOUT,
            newsletter_title=NEWSLETTER_TITLE,
            newsletter_send_time=NEWSLETTER_SEND_TIME,
            subscriber_limit=SUBSCRIBER_LIMIT,
            send_interval=SEND_INTERVAL_SECONDS,
        )

    @property
    def public_database_key(self) -> Optional[str]:
        # The signup flow uses the anonymous key when one is configured
        return self.supabase_anon_key or self.supabase_service_key
