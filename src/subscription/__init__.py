"""
Subscription package for the Daily Good Vibes newsletter.
Contains the signup form controller.
"""

from .form_controller import FormState, FormView, SubmissionOutcome, SubscriptionForm, is_valid_email

__all__ = ['FormState', 'FormView', 'SubmissionOutcome', 'SubscriptionForm', 'is_valid_email']
