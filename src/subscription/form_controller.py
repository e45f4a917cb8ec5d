"""
Subscription form controller.

Validates an email address, checks whether it is already subscribed and
inserts a new subscriber row. The controller drives a view object so the same
logic serves a web form or the command line.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from config.logger import logger
from ..email_service.subscriber_manager import DuplicateSubscriberError, SubscriberManager

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

INVALID_EMAIL_MESSAGE = "Please enter a valid email address."
ALREADY_SUBSCRIBED_MESSAGE = "This email is already subscribed!"
SUCCESS_MESSAGE = "🎉 Successfully subscribed! Check your inbox at 7 AM ET tomorrow."
FAILURE_MESSAGE = "Something went wrong. Please try again later."

SUBMIT_LABEL = "Subscribe Free"
BUSY_LABEL = "Subscribing..."

class FormState(Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    DONE = "done"

class SubmissionOutcome(Enum):
    INVALID = "invalid"
    DUPLICATE = "duplicate"
    SUBSCRIBED = "subscribed"
    FAILED = "failed"

class FormView(ABC):
    """Display surface for the subscription form."""

    @abstractmethod
    def show_message(self, text: str, kind: str) -> None:
        """Show a transient message; kind is 'success' or 'error'."""

    @abstractmethod
    def set_busy(self, busy: bool, label: str) -> None:
        """Disable (busy) or re-enable the submit control."""

    @abstractmethod
    def clear_input(self) -> None:
        """Empty the email field."""

def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None

class SubscriptionForm:
    """
    State machine for one subscription form: IDLE -> SUBMITTING -> DONE.

    The control is always re-enabled once a submission finishes, whether it
    succeeded or not.
    """

    def __init__(self, store: Optional[SubscriberManager], view: FormView):
        self.store = store
        self.view = view
        self.state = FormState.IDLE
        self.logger = logger.getChild(self.__class__.__name__)

    def submit(self, raw_email: str) -> SubmissionOutcome:
        """
        Handle a form submission.

        Args:
            raw_email: Email address as typed by the user

        Returns:
            The outcome of the submission
        """
        email = (raw_email or "").strip().lower()

        if not is_valid_email(email):
            self.view.show_message(INVALID_EMAIL_MESSAGE, "error")
            self.state = FormState.IDLE
            return SubmissionOutcome.INVALID

        self.state = FormState.SUBMITTING
        self.view.set_busy(True, BUSY_LABEL)

        try:
            outcome = self._subscribe(email)
        except Exception as e:
            self.logger.error(f"Subscription error: {e}")
            self.view.show_message(FAILURE_MESSAGE, "error")
            outcome = SubmissionOutcome.FAILED
        finally:
            self.view.set_busy(False, SUBMIT_LABEL)

        self.state = FormState.DONE if outcome is SubmissionOutcome.SUBSCRIBED else FormState.IDLE
        return outcome

    def _subscribe(self, email: str) -> SubmissionOutcome:
        if self.store is None:
            raise RuntimeError("Database connection not ready. Please refresh and try again.")

        if self.store.find_subscriber(email) is not None:
            self.view.show_message(ALREADY_SUBSCRIBED_MESSAGE, "error")
            return SubmissionOutcome.DUPLICATE

        try:
            self.store.insert_subscriber(email)
        except DuplicateSubscriberError:
            # Another signup for the same address won the race
            self.view.show_message(ALREADY_SUBSCRIBED_MESSAGE, "error")
            return SubmissionOutcome.DUPLICATE

        self.view.show_message(SUCCESS_MESSAGE, "success")
        self.view.clear_input()
        return SubmissionOutcome.SUBSCRIBED
