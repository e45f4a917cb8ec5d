from datetime import date
from types import SimpleNamespace

import pytest

from src.email_service import EmailDeliveryError, EmailSender


class FakeSendGrid:
    def __init__(self, fail_for=(), status_code=202):
        self.fail_for = set(fail_for)
        self.status_code = status_code
        self.messages = []

    def send(self, message):
        payload = message.get()
        recipient = payload["personalizations"][0]["to"][0]["email"]
        self.messages.append(payload)
        if recipient in self.fail_for:
            raise RuntimeError("mailbox unavailable")
        return SimpleNamespace(status_code=self.status_code, body="")

    @property
    def recipients(self):
        return [m["personalizations"][0]["to"][0]["email"] for m in self.messages]


def make_sender(client, sleeps=None):
    return EmailSender(
        api_key=None,
        sender_email="hello@goodvibes.test",
        sender_name="Daily Good Vibes",
        website_url="https://goodvibes.test",
        send_interval=0.25,
        client=client,
        sleep=(sleeps.append if sleeps is not None else lambda seconds: None),
    )


def test_sends_personalised_email_to_each_subscriber(sample_content, subscribers):
    client = FakeSendGrid()
    sleeps = []

    result = make_sender(client, sleeps).send_newsletter(
        sample_content, subscribers, today=date(2026, 10, 18))

    assert client.recipients == ["first@example.com", "second@example.com", "third@example.com"]
    assert result.success_count == 3 and result.error_count == 0
    assert sleeps == [0.25, 0.25, 0.25]

    first = client.messages[0]
    assert first["from"] == {"email": "hello@goodvibes.test", "name": "Daily Good Vibes"}
    assert first["subject"] == "☀️ Your Daily Good Vibes - 10/18/2026"
    body = first["content"][0]["value"]
    assert "https://goodvibes.test/unsubscribe.html?token=tok-1" in body
    assert "token=tok-2" not in body


def test_test_mode_sends_only_to_first_subscriber(sample_content, subscribers):
    client = FakeSendGrid()

    result = make_sender(client).send_newsletter(sample_content, subscribers, test_mode=True)

    assert client.recipients == ["first@example.com"]
    assert result.attempted == 1
    assert result.success_count == 1


def test_failure_for_one_recipient_does_not_stop_batch(sample_content, subscribers):
    client = FakeSendGrid(fail_for={"second@example.com"})
    sleeps = []

    result = make_sender(client, sleeps).send_newsletter(sample_content, subscribers)

    assert client.recipients == ["first@example.com", "second@example.com", "third@example.com"]
    assert result.success_count == 2
    assert result.error_count == 1
    assert len(sleeps) == 2


def test_rejected_status_counts_as_error(sample_content, subscribers):
    client = FakeSendGrid(status_code=400)

    result = make_sender(client).send_newsletter(sample_content, subscribers)

    assert result.success_count == 0
    assert result.error_count == 3


def test_send_email_without_client_raises():
    sender = EmailSender(api_key=None, sender_email="hello@goodvibes.test")

    with pytest.raises(EmailDeliveryError):
        sender.send_email("a@example.com", "Subject", "<p>Hi</p>")


def test_empty_subscriber_list_sends_nothing(sample_content):
    client = FakeSendGrid()

    result = make_sender(client).send_newsletter(sample_content, [])

    assert client.messages == []
    assert result.attempted == 0


def test_save_newsletter_to_file(tmp_path):
    sender = make_sender(FakeSendGrid())

    path = sender.save_newsletter_to_file("<html></html>", tmp_path, today=date(2026, 10, 18))

    assert path.endswith("Daily_Good_Vibes_2026-10-18.html")
    assert (tmp_path / "Daily_Good_Vibes_2026-10-18.html").read_text() == "<html></html>"


def test_save_newsletter_rejects_empty_content(tmp_path):
    assert make_sender(FakeSendGrid()).save_newsletter_to_file("", tmp_path) is None


def test_configured_title_reaches_subject_body_and_preview(sample_content, subscribers, tmp_path):
    client = FakeSendGrid()
    sender = make_sender(client)
    sender.title = "Morning Sparks"

    sender.send_newsletter(sample_content, subscribers[:1], today=date(2026, 10, 18))
    path = sender.save_newsletter_to_file("<html></html>", tmp_path, today=date(2026, 10, 18))

    message = client.messages[0]
    assert message["subject"] == "☀️ Your Morning Sparks - 10/18/2026"
    assert "<title>Morning Sparks</title>" in message["content"][0]["value"]
    assert "Daily Good Vibes</h1>" not in message["content"][0]["value"]
    assert path.endswith("Morning_Sparks_2026-10-18.html")
