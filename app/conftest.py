"""
Shared pytest fixtures for the website tests.
"""
import pytest
from django.core.cache import cache

from contact.notifications import ListNotifier


class FakeHandler:
    """Submission handler double that records every payload it receives."""

    def __init__(self, response=None, exc=None, side_effect=None):
        self.response = {'success': True} if response is None else response
        self.exc = exc
        self.side_effect = side_effect
        self.calls = []

    def __call__(self, payload):
        self.calls.append(payload)
        if self.side_effect is not None:
            self.side_effect(payload)
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture(autouse=True)
def clear_cache():
    """Clear cache before and after each test so sessions and guards don't leak."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def notifier():
    return ListNotifier()


@pytest.fixture
def valid_data():
    return {
        'name': 'Jane Doe',
        'email': 'jane@example.com',
        'subject': 'Life Insurance',
        'message': 'Please call me back',
    }


@pytest.fixture
def install_handler(monkeypatch):
    """Route submissions made through the configured handler to a FakeHandler."""
    def install(handler=None, **kwargs):
        handler = handler or FakeHandler(**kwargs)
        monkeypatch.setattr('contact.submission.get_submission_handler', lambda: handler)
        return handler
    return install


@pytest.fixture
def make_handler():
    return FakeHandler
