"""
HTML rendering for the Daily Good Vibes email.

Everything here is a pure function of its arguments: the same content is
rendered for every subscriber and only the unsubscribe link changes.
"""

import html
from datetime import date
from typing import Optional
from urllib.parse import quote

from ..models import NewsItem, NewsletterContent, TriviaQuestion

def _esc(value) -> str:
    return html.escape("" if value is None else str(value))

def build_subject(today: Optional[date] = None, title: str = "Daily Good Vibes") -> str:
    """Subject line with the date written as M/D/YYYY."""
    today = today or date.today()
    return f"☀️ Your {title} - {today.month}/{today.day}/{today.year}"

def build_unsubscribe_url(website_url: str, token: Optional[str]) -> str:
    """Per-subscriber unsubscribe link embedding the subscriber's token."""
    return f"{website_url.rstrip('/')}/unsubscribe.html?token={quote(token or '', safe='')}"

def _render_trivia(question: TriviaQuestion) -> str:
    options = "".join(
        f"""
                    <p style="margin: 5px 0; padding: 10px; background-color: #ffffff; border-radius: 5px; color: #333;">
                      {chr(65 + i)}. {_esc(option)}
                    </p>"""
        for i, option in enumerate(question.options)
    )
    return f"""
                <div style="margin-bottom: 25px; padding: 20px; background-color: #f8f9fa; border-radius: 8px;">
                  <p style="margin: 0 0 5px 0; color: #666; font-size: 14px;"><strong>Question {question.number}</strong> • {_esc(question.category)} • {_esc(question.difficulty)}</p>
                  <p style="margin: 0 0 15px 0; color: #333; font-size: 16px; font-weight: 500;">{_esc(question.question)}</p>{options}
                  <details style="margin-top: 15px;">
                    <summary style="cursor: pointer; color: #4ECDC4; font-weight: bold;">Show Answer</summary>
                    <p style="margin: 10px 0 0 0; padding: 15px; background-color: #d4f4dd; border-radius: 5px; color: #1a535c;">
                      ✓ <strong>{_esc(question.correct_answer)}</strong>
                    </p>
                  </details>
                </div>"""

def _render_news(index: int, item: NewsItem) -> str:
    return f"""
                <div style="margin-bottom: 20px; padding: 20px; background-color: #ffffff; border-radius: 8px; border-left: 4px solid #4ECDC4;">
                  <h3 style="margin: 0 0 10px 0; color: #1a535c; font-size: 18px;">{index}. {_esc(item.headline)}</h3>
                  <p style="margin: 0 0 10px 0; color: #333; line-height: 1.6;">{_esc(item.summary)}</p>
                  <p style="margin: 0; color: #666; font-size: 14px; font-style: italic;"><strong>Why it matters:</strong> {_esc(item.why_it_matters)}</p>
                </div>"""

def render_email_html(content: NewsletterContent,
                      unsubscribe_url: str,
                      today: Optional[date] = None,
                      title: str = "Daily Good Vibes") -> str:
    """
    Render the newsletter as a complete HTML document.

    Args:
        content: Quote, trivia and news for this issue
        unsubscribe_url: Link placed in the footer
        today: Date shown in the header (defaults to today)
        title: Newsletter name shown in the header and footer

    Returns:
        HTML document string
    """
    today = today or date.today()
    quote_block = content.quote
    trivia_html = "".join(_render_trivia(q) for q in content.trivia)
    news_html = "".join(_render_news(i + 1, item) for i, item in enumerate(content.ai_news))

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{_esc(title)}</title>
</head>
<body style="margin: 0; padding: 0; font-family: 'Segoe UI', Arial, sans-serif; background-color: #f5f5f5;">
  <table width="100%" cellpadding="0" cellspacing="0" style="background-color: #f5f5f5; padding: 20px;">
    <tr>
      <td align="center">
        <table width="600" cellpadding="0" cellspacing="0" style="background-color: #ffffff; border-radius: 10px; overflow: hidden; box-shadow: 0 2px 10px rgba(0,0,0,0.1);">

          <!-- Header -->
          <tr>
            <td style="background: linear-gradient(135deg, #4ECDC4 0%, #44A08D 100%); padding: 30px; text-align: center;">
              <h1 style="color: #ffffff; margin: 0; font-size: 32px;">☀️ {_esc(title)}</h1>
              <p style="color: #ffffff; margin: 10px 0 0 0; opacity: 0.95;">{today.strftime('%a %b %d %Y')}</p>
            </td>
          </tr>

          <!-- Quote -->
          <tr>
            <td style="padding: 30px; background-color: #f8f9fa;">
              <h2 style="color: #1a535c; margin: 0 0 15px 0; font-size: 24px;">💡 Quote of the Day</h2>
              <blockquote style="margin: 0; padding: 20px; background-color: #ffffff; border-left: 4px solid #4ECDC4; border-radius: 5px;">
                <p style="font-size: 18px; font-style: italic; color: #333; margin: 0 0 10px 0; line-height: 1.6;">"{_esc(quote_block.text)}"</p>
                <p style="text-align: right; color: #666; margin: 0; font-size: 16px;">— {_esc(quote_block.author)}</p>
              </blockquote>
            </td>
          </tr>

          <!-- Trivia -->
          <tr>
            <td style="padding: 30px;">
              <h2 style="color: #1a535c; margin: 0 0 20px 0; font-size: 24px;">🧠 Today's Trivia Challenge</h2>{trivia_html}
            </td>
          </tr>

          <!-- AI News -->
          <tr>
            <td style="padding: 30px; background-color: #f8f9fa;">
              <h2 style="color: #1a535c; margin: 0 0 20px 0; font-size: 24px;">🤖 Top {len(content.ai_news)} AI News</h2>{news_html}
            </td>
          </tr>

          <!-- Footer -->
          <tr>
            <td style="padding: 30px; text-align: center; background-color: #1a535c; color: #ffffff;">
              <p style="margin: 0 0 10px 0; font-size: 14px;">You're receiving this because you subscribed to {_esc(title)}</p>
              <p style="margin: 0; font-size: 14px;">
                <a href="{_esc(unsubscribe_url)}" style="color: #4ECDC4; text-decoration: underline;">Unsubscribe</a>
              </p>
            </td>
          </tr>

        </table>
      </td>
    </tr>
  </table>
</body>
</html>
"""
