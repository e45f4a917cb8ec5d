"""
Module for sending newsletter emails using SendGrid.
"""

import time
from datetime import date
from pathlib import Path
from typing import Any, Callable, List, Optional

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from config.logger import logger
from ..models import BatchResult, NewsletterContent, Subscriber
from ..newsletter_generator.renderer import build_subject, build_unsubscribe_url, render_email_html

class EmailDeliveryError(Exception):
    """Raised when a single email could not be handed to SendGrid."""

class EmailSender:
    """
    Sender for newsletter emails.

    Sends one personalised message per subscriber, sequentially, with a
    fixed pause between sends.
    """

    def __init__(self,
                 api_key: Optional[str],
                 sender_email: str,
                 sender_name: str = "Daily Good Vibes",
                 website_url: str = "http://localhost:8000",
                 send_interval: float = 0.1,
                 title: str = "Daily Good Vibes",
                 client: Optional[Any] = None,
                 sleep: Callable[[float], None] = time.sleep):
        """
        Initialize the email sender.

        Args:
            api_key: SendGrid API key
            sender_email: Fixed sender address
            sender_name: Display name for the sender
            website_url: Public site base URL, used for unsubscribe links
            send_interval: Seconds to wait after each successful send
            title: Newsletter name used in the subject and the email header
            client: SendGrid client (created from api_key if None)
            sleep: Function used to wait between sends
        """
        self.logger = logger.getChild(self.__class__.__name__)

        # Check for SendGrid API key
        if not api_key and client is None:
            self.logger.error("SendGrid API key is missing. Email sending will fail.")

        # Check for sender email
        if not sender_email:
            self.logger.error("Sender email is missing. Email sending will fail.")

        self.sender_email = sender_email
        self.sender_name = sender_name
        self.website_url = website_url
        self.send_interval = send_interval
        self.title = title
        self.client = client if client is not None else (SendGridAPIClient(api_key) if api_key else None)
        self.sleep = sleep

    def send_email(self, to_email: str, subject: str, html_content: str) -> None:
        """
        Send one email.

        Args:
            to_email: Recipient address
            subject: Email subject
            html_content: HTML body

        Raises:
            EmailDeliveryError: If the client is missing, raises, or SendGrid rejects the message
        """
        if self.client is None:
            raise EmailDeliveryError("SendGrid client not initialized")

        message = Mail(
            from_email=(self.sender_email, self.sender_name),
            to_emails=to_email,
            subject=subject,
            html_content=html_content
        )

        try:
            response = self.client.send(message)
        except Exception as e:
            raise EmailDeliveryError(str(e)) from e

        if not 200 <= response.status_code < 300:
            raise EmailDeliveryError(f"SendGrid returned {response.status_code} - {response.body}")

    def send_newsletter(self,
                        content: NewsletterContent,
                        subscribers: List[Subscriber],
                        test_mode: bool = False,
                        today: Optional[date] = None) -> BatchResult:
        """
        Send the newsletter to each subscriber in turn.

        A failure for one recipient is logged and counted and never stops the
        batch.

        Args:
            content: Issue content, identical for every subscriber
            subscribers: Recipients, in delivery order
            test_mode: If True, send only to the first subscriber
            today: Date used in the subject and header

        Returns:
            BatchResult with success and error counts
        """
        if test_mode:
            self.logger.info("TEST MODE - Sending to first subscriber only")
            subscribers = subscribers[:1]

        today = today or date.today()
        subject = build_subject(today, title=self.title)
        result = BatchResult()

        self.logger.info("Sending newsletters...")
        for subscriber in subscribers:
            result.attempted += 1
            try:
                unsubscribe_url = build_unsubscribe_url(self.website_url, subscriber.unsubscribe_token)
                html_content = render_email_html(content, unsubscribe_url, today=today, title=self.title)
                self.send_email(subscriber.email, subject, html_content)
            except Exception as e:
                result.error_count += 1
                self.logger.error(f"Failed to send to {subscriber.email}: {e}")
                continue

            result.success_count += 1
            self.logger.info(f"Sent to {subscriber.email}")

            # Small delay to avoid rate limits
            self.sleep(self.send_interval)

        self.logger.info(f"Newsletter sent: {result.success_count} succeeded, {result.error_count} failed")
        return result

    def save_newsletter_to_file(self, html_content: str, output_dir: Optional[str] = None,
                                today: Optional[date] = None) -> Optional[str]:
        """
        Save a rendered newsletter to a file for previewing.

        Args:
            html_content: Rendered HTML document
            output_dir: Directory to save the file (defaults to 'newsletters' in project root)
            today: Date used in the file name

        Returns:
            Path to the saved file, or None if failed
        """
        try:
            # Set default output directory if none provided
            if output_dir is None:
                output_dir = Path(__file__).parent.parent.parent / 'newsletters'
            else:
                output_dir = Path(output_dir)

            output_dir.mkdir(parents=True, exist_ok=True)

            if not html_content:
                self.logger.error("Newsletter content is empty")
                return None

            today = today or date.today()
            file_path = output_dir / f"{self.title.replace(' ', '_')}_{today.isoformat()}.html"

            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(html_content)

            self.logger.info(f"Saved newsletter to {file_path}")
            return str(file_path)

        except Exception as e:
            self.logger.error(f"Error saving newsletter to file: {str(e)}")
            return None
