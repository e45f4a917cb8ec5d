"""
Main script for the Daily Good Vibes newsletter.

This script orchestrates the entire workflow:
1. Gathers the quote, trivia and AI news content
2. Fetches the active subscribers
3. Sends the newsletter to each subscriber
4. Schedules the process to run daily
"""

import sys
import time
import argparse
from typing import Optional

import schedule

from config.logger import logger
from src.config import Settings
from src.email_service import EmailSender, SubscriberManager
from src.models import BatchResult
from src.newsletter_generator import NewsletterGenerator, build_unsubscribe_url, render_email_html
from src.subscription import FormView, SubmissionOutcome, SubscriptionForm

# Initialize logger
logger = logger.getChild(__name__)

class ConsoleFormView(FormView):
    """Form view that reports to the terminal."""

    def show_message(self, text, kind):
        print(text, file=sys.stderr if kind == "error" else sys.stdout)

    def set_busy(self, busy, label):
        if busy:
            print(label)

    def clear_input(self):
        pass

def generate_and_send_newsletter(test_mode: bool = False,
                                 save_only: bool = False,
                                 settings: Optional[Settings] = None,
                                 generator: Optional[NewsletterGenerator] = None,
                                 subscriber_manager: Optional[SubscriberManager] = None,
                                 email_sender: Optional[EmailSender] = None) -> BatchResult:
    """
    Generate and send the newsletter.

    Args:
        test_mode: If True, send only to the first subscriber
        save_only: If True, only save a preview to file without sending
        settings: Settings to use (read from the environment if None)
        generator: Content generator (built from settings if None)
        subscriber_manager: Subscriber gateway (built from settings if None)
        email_sender: Email sender (built from settings if None)

    Returns:
        BatchResult with the send counts

    Raises:
        SubscriberStoreError: If the subscriber list cannot be fetched
    """
    start_time = time.time()
    logger.info("Starting Daily Good Vibes newsletter generation...")

    settings = settings or Settings.from_env()
    generator = generator or NewsletterGenerator(settings)
    email_sender = email_sender or EmailSender(
        api_key=settings.sendgrid_api_key,
        sender_email=settings.email_sender,
        sender_name=settings.email_sender_name,
        website_url=settings.website_url,
        send_interval=settings.send_interval,
        title=settings.newsletter_title
    )

    content = generator.generate_content()

    if save_only:
        preview = render_email_html(content, build_unsubscribe_url(settings.website_url, "preview"),
                                    title=settings.newsletter_title)
        newsletter_path = email_sender.save_newsletter_to_file(preview)
        logger.info(f"Newsletter preview saved to {newsletter_path}")
        return BatchResult()

    subscriber_manager = subscriber_manager or SubscriberManager(
        settings.supabase_url, settings.supabase_service_key, timeout=settings.request_timeout)

    logger.info("Fetching active subscribers...")
    subscribers = subscriber_manager.fetch_active_subscribers(limit=settings.subscriber_limit)

    if not subscribers:
        logger.warning("No active subscribers found")
        return BatchResult()

    result = email_sender.send_newsletter(content, subscribers, test_mode=test_mode)

    elapsed_time = time.time() - start_time
    logger.info(f"Newsletter process completed in {elapsed_time:.2f} seconds")
    logger.info(f"  - Success: {result.success_count}")
    logger.info(f"  - Errors: {result.error_count}")
    return result

def run_generate(test_mode: bool = False, save_only: bool = False) -> int:
    """Run the pipeline and map the outcome to a process exit code."""
    try:
        generate_and_send_newsletter(test_mode=test_mode, save_only=save_only)
    except Exception as e:
        logger.error(f"Error in newsletter process: {str(e)}", exc_info=True)
        return 1
    logger.info("Process completed")
    return 0

def add_subscriber(email: str, settings: Optional[Settings] = None) -> bool:
    """
    Subscribe an email address through the signup form logic.

    Args:
        email: Subscriber's email address
        settings: Settings to use (read from the environment if None)

    Returns:
        True if a new subscriber was added
    """
    settings = settings or Settings.from_env()
    store = SubscriberManager(settings.supabase_url, settings.public_database_key,
                              timeout=settings.request_timeout)
    form = SubscriptionForm(store, ConsoleFormView())
    return form.submit(email) is SubmissionOutcome.SUBSCRIBED

def list_subscribers(settings: Optional[Settings] = None):
    """
    List active subscribers, oldest first.

    Returns:
        List of Subscriber objects
    """
    settings = settings or Settings.from_env()
    store = SubscriberManager(settings.supabase_url, settings.supabase_service_key,
                              timeout=settings.request_timeout)
    return store.fetch_active_subscribers(limit=settings.subscriber_limit)

def schedule_newsletter(settings: Optional[Settings] = None):
    """
    Schedule the newsletter to run daily.
    """
    settings = settings or Settings.from_env()
    time_str = settings.newsletter_send_time or "07:00"

    schedule.every().day.at(time_str).do(run_generate)
    logger.info(f"Newsletter scheduled to run every day at {time_str}")

    # Run the scheduler
    while True:
        schedule.run_pending()
        time.sleep(60)  # Check every minute

def main(argv=None) -> int:
    """
    Main function to parse arguments and run the appropriate command.
    """
    parser = argparse.ArgumentParser(description="Daily Good Vibes Newsletter")

    # Create subparsers for different commands
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Generate command
    generate_parser = subparsers.add_parser("generate", help="Generate and send newsletter")
    generate_parser.add_argument("--test", action="store_true", help="Send to the first subscriber only")
    generate_parser.add_argument("--save-only", action="store_true", help="Only save a preview without sending")

    # Schedule command
    subparsers.add_parser("schedule", help="Send the newsletter every day")

    # Subscriber commands
    add_parser = subparsers.add_parser("add", help="Subscribe an email address")
    add_parser.add_argument("email", help="Subscriber's email address")

    subparsers.add_parser("list", help="List active subscribers")

    # Parse arguments
    args = parser.parse_args(argv)

    # Run the appropriate command
    if args.command == "generate":
        return run_generate(test_mode=args.test, save_only=args.save_only)
    elif args.command == "schedule":
        schedule_newsletter()
    elif args.command == "add":
        return 0 if add_subscriber(args.email) else 1
    elif args.command == "list":
        try:
            subscribers = list_subscribers()
        except Exception as e:
            logger.error(f"Error listing subscribers: {str(e)}")
            return 1
        print(f"Total active subscribers: {len(subscribers)}")
        for s in subscribers:
            print(f"{s.email} - subscribed {s.subscribed_at or 'N/A'}")
    else:
        parser.print_help()
    return 0

if __name__ == "__main__":
    sys.exit(main())
