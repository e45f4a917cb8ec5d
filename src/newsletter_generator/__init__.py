"""
Newsletter generator package for the Daily Good Vibes newsletter.
Contains modules for gathering issue content and rendering the email.
"""

from .generator import NewsletterGenerator
from .renderer import build_subject, build_unsubscribe_url, render_email_html

__all__ = ['NewsletterGenerator', 'build_subject', 'build_unsubscribe_url', 'render_email_html']
