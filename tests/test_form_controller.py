import pytest

from src.email_service import DuplicateSubscriberError, SubscriberStoreError
from src.models import Subscriber
from src.subscription import FormState, FormView, SubmissionOutcome, SubscriptionForm, is_valid_email
from src.subscription.form_controller import (
    ALREADY_SUBSCRIBED_MESSAGE,
    FAILURE_MESSAGE,
    INVALID_EMAIL_MESSAGE,
    SUCCESS_MESSAGE,
)


class RecordingView(FormView):
    def __init__(self):
        self.messages = []
        self.busy_changes = []
        self.cleared = False

    def show_message(self, text, kind):
        self.messages.append((text, kind))

    def set_busy(self, busy, label):
        self.busy_changes.append(busy)

    def clear_input(self):
        self.cleared = True


class FakeStore:
    def __init__(self, existing=(), insert_error=None, lookup_error=None):
        self.existing = set(existing)
        self.insert_error = insert_error
        self.lookup_error = lookup_error
        self.lookups = []
        self.inserted = []

    def find_subscriber(self, email):
        self.lookups.append(email)
        if self.lookup_error:
            raise self.lookup_error
        return Subscriber(email=email) if email in self.existing else None

    def insert_subscriber(self, email):
        if self.insert_error:
            raise self.insert_error
        self.inserted.append(email)
        return Subscriber(email=email)


@pytest.mark.parametrize("email", ["not-an-email", "", "a@b", "two words@example.com", "@example.com"])
def test_invalid_email_never_touches_store(email):
    store, view = FakeStore(), RecordingView()
    form = SubscriptionForm(store, view)

    assert form.submit(email) is SubmissionOutcome.INVALID
    assert store.lookups == [] and store.inserted == []
    assert view.messages == [(INVALID_EMAIL_MESSAGE, "error")]
    assert view.busy_changes == []
    assert form.state is FormState.IDLE


def test_new_email_is_normalised_and_inserted():
    store, view = FakeStore(), RecordingView()
    form = SubscriptionForm(store, view)

    outcome = form.submit("  New.Person@Example.COM ")

    assert outcome is SubmissionOutcome.SUBSCRIBED
    assert store.lookups == ["new.person@example.com"]
    assert store.inserted == ["new.person@example.com"]
    assert view.messages == [(SUCCESS_MESSAGE, "success")]
    assert view.cleared
    assert view.busy_changes == [True, False]
    assert form.state is FormState.DONE


def test_duplicate_email_shows_message_and_skips_insert():
    store, view = FakeStore(existing={"fan@example.com"}), RecordingView()
    form = SubscriptionForm(store, view)

    outcome = form.submit("fan@example.com")

    assert outcome is SubmissionOutcome.DUPLICATE
    assert store.inserted == []
    assert view.messages == [(ALREADY_SUBSCRIBED_MESSAGE, "error")]
    assert view.busy_changes == [True, False]
    assert form.state is FormState.IDLE


def test_unique_violation_on_insert_reports_duplicate():
    store = FakeStore(insert_error=DuplicateSubscriberError("exists"))
    view = RecordingView()

    outcome = SubscriptionForm(store, view).submit("race@example.com")

    assert outcome is SubmissionOutcome.DUPLICATE
    assert view.messages == [(ALREADY_SUBSCRIBED_MESSAGE, "error")]


@pytest.mark.parametrize("store", [
    FakeStore(insert_error=SubscriberStoreError("HTTP 500")),
    FakeStore(lookup_error=SubscriberStoreError("offline")),
])
def test_store_failure_shows_generic_message_and_reenables(store):
    view = RecordingView()
    form = SubscriptionForm(store, view)

    outcome = form.submit("someone@example.com")

    assert outcome is SubmissionOutcome.FAILED
    assert view.messages == [(FAILURE_MESSAGE, "error")]
    assert view.busy_changes == [True, False]
    assert not view.cleared
    assert form.state is FormState.IDLE


def test_missing_store_fails_gracefully():
    view = RecordingView()

    outcome = SubscriptionForm(None, view).submit("someone@example.com")

    assert outcome is SubmissionOutcome.FAILED
    assert view.messages == [(FAILURE_MESSAGE, "error")]


def test_form_can_be_resubmitted_after_error():
    store, view = FakeStore(), RecordingView()
    form = SubscriptionForm(store, view)

    form.submit("bad")
    assert form.submit("good@example.com") is SubmissionOutcome.SUBSCRIBED


def test_is_valid_email():
    assert is_valid_email("a@b.co")
    assert not is_valid_email("a@b")


def test_is_valid_email_rejects_trailing_newline():
    assert not is_valid_email("a@b.co\n")
    assert not is_valid_email("a@b.co\nextra")
