"""
Submission adapter for the contact form.

Bridges validated form values to the configured submission handler and
turns the outcome into notifications. A handler is any callable that takes
the flat payload built by :func:`build_payload` and returns either a
:class:`SubmissionResult` or a mapping ``{'success': bool, 'error': str}``
(``error`` optional). Handlers may raise; the adapter never lets that
escape.
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from contact.exceptions import InvalidSubmissionResult
from contact.forms import FIELD_NAMES
from contact.notifications import DESTRUCTIVE, Notification
from contact.signals import contact_message_sent

logger = logging.getLogger(__name__)

SUCCESS_TITLE = 'Message Sent!'
SUCCESS_DESCRIPTION = 'Thank you for contacting us. We will get back to you soon.'
FAILURE_TITLE = 'Sending Failed'
FAILURE_FALLBACK = 'An error occurred. Please try again.'
ERROR_TITLE = 'Error'
UNEXPECTED_ERROR = 'An unexpected error occurred. Please try again later.'


@dataclass(frozen=True)
class SubmissionResult:
    success: bool
    error: Optional[str] = None

    @classmethod
    def from_response(cls, response):
        """Accept a SubmissionResult or a ``{'success', 'error'}`` mapping, nothing else."""
        if isinstance(response, cls):
            return response
        if not isinstance(response, Mapping):
            raise InvalidSubmissionResult(response)
        if set(response) - {'success', 'error'} or not isinstance(response.get('success'), bool):
            raise InvalidSubmissionResult(response)
        error = response.get('error')
        if error is not None and not isinstance(error, str):
            raise InvalidSubmissionResult(response)
        return cls(success=response['success'], error=error)


def get_submission_handler():
    """Import the handler named by ``CONTACT_SUBMISSION_HANDLER``."""
    path = settings.CONTACT_SUBMISSION_HANDLER
    try:
        return import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(
            f"CONTACT_SUBMISSION_HANDLER '{path}' could not be imported: {e}"
        ) from e


def build_payload(values):
    """Flat mapping of the four form fields to strings."""
    return {field: str(getattr(values, field)) for field in FIELD_NAMES}


def submit_contact(values, handler=None):
    """Call the submission handler once with ``values`` and return its SubmissionResult."""
    if handler is None:
        handler = get_submission_handler()
    return SubmissionResult.from_response(handler(build_payload(values)))


class ContactSubmissionAdapter:
    """
    Deliver validated values and report the outcome through ``notifier``.

    Exactly one handler call per :meth:`deliver`; there is no retry.
    """

    def __init__(self, notifier, handler=None):
        self.notifier = notifier
        self.handler = handler

    def deliver(self, values, on_success=None):
        """
        Submit ``values`` and notify the user.

        ``on_success`` runs only when the handler reports success (the form
        controller passes its ``reset``). Returns the SubmissionResult; a
        raised fault is logged and reported as a failed result.
        """
        try:
            result = submit_contact(values, handler=self.handler)
        except Exception:
            logger.exception(f"Contact form submission error for {values.email}")
            self.notifier.notify(Notification(ERROR_TITLE, UNEXPECTED_ERROR, DESTRUCTIVE))
            return SubmissionResult(success=False, error=UNEXPECTED_ERROR)

        if result.success:
            self.notifier.notify(Notification(SUCCESS_TITLE, SUCCESS_DESCRIPTION))
            if on_success is not None:
                on_success()
            self._announce(values)
        else:
            logger.warning(f"Contact form submission failed for {values.email}: {result.error}")
            self.notifier.notify(
                Notification(FAILURE_TITLE, result.error or FAILURE_FALLBACK, DESTRUCTIVE)
            )
        return result

    def _announce(self, values):
        for receiver, response in contact_message_sent.send_robust(sender=self.__class__, values=values):
            if isinstance(response, Exception):
                logger.error(f"contact_message_sent receiver {receiver!r} failed: {response}")
