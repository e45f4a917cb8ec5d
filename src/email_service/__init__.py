"""
Email service package for the Daily Good Vibes newsletter.
Contains modules for managing subscribers and sending emails.
"""

from .email_sender import EmailDeliveryError, EmailSender
from .subscriber_manager import DuplicateSubscriberError, SubscriberManager, SubscriberStoreError

__all__ = [
    'EmailSender', 'EmailDeliveryError',
    'SubscriberManager', 'SubscriberStoreError', 'DuplicateSubscriberError'
]
