"""
Form controller for the contact page.

One controller per page visit: it owns the field values and inline errors,
the ``is_mounted`` ready flag the templates check, and the busy flag that
keeps a second submission from starting while one is in flight.
"""
import logging

from django.conf import settings
from django.core.cache import cache

from contact.forms import FIELD_NAMES, ContactForm, ContactFormValues

logger = logging.getLogger(__name__)


class InMemorySubmissionGuard:
    """Busy flag for a single controller instance."""

    def __init__(self):
        self._held = False

    @property
    def held(self):
        return self._held

    def acquire(self):
        if self._held:
            return False
        self._held = True
        return True

    def release(self):
        self._held = False


class CacheSubmissionGuard:
    """
    Busy flag shared by every request of one visitor.

    ``cache.add`` only stores the key when it is absent, so at most one
    request per owner holds the guard. The timeout frees the key if a worker
    dies mid-submission.
    """

    key_template = 'contact:submitting:{owner}'

    def __init__(self, owner, timeout=None):
        self.key = self.key_template.format(owner=owner)
        self.timeout = timeout or settings.CONTACT_SUBMISSION_LOCK_TIMEOUT
        self._acquired = False

    @classmethod
    def for_request(cls, request):
        """Guard keyed by the request's session, creating the session if needed."""
        session = request.session
        if not session.session_key:
            session.save()
        return cls(session.session_key)

    @property
    def held(self):
        return self._acquired or cache.get(self.key) is not None

    def acquire(self):
        self._acquired = cache.add(self.key, 1, self.timeout)
        return self._acquired

    def release(self):
        if self._acquired:
            cache.delete(self.key)
            self._acquired = False


class ContactFormController:
    """
    Contact form state: Idle -> Submitting -> Idle.

    ``submit`` validates, then hands valid values to the submission adapter
    while holding the guard. The guard is released whatever the adapter
    does, and the adapter calls back into :meth:`reset` on success.
    """

    def __init__(self, adapter, guard=None):
        self.adapter = adapter
        self.guard = guard or InMemorySubmissionGuard()
        self.is_mounted = False
        self.values = ContactFormValues.empty().as_dict()
        self.errors = {}

    @property
    def is_submitting(self):
        return self.guard.held

    @property
    def is_valid(self):
        form = ContactForm(data=self.values)
        return form.is_valid()

    def mount(self):
        """Mark the page ready to show interactive controls; views call this once the request context exists."""
        self.is_mounted = True

    def set_field(self, name, value):
        """Update one field and refresh its inline errors."""
        if name not in self.values:
            raise KeyError(name)
        if self.is_submitting:
            return
        self.values[name] = value
        form = ContactForm(data=self.values)
        form.is_valid()
        if name in form.errors:
            self.errors[name] = list(form.errors[name])
        else:
            self.errors.pop(name, None)

    def load(self, data):
        """Set every known field present in ``data`` (a dict or QueryDict)."""
        for name in FIELD_NAMES:
            if name in data:
                self.set_field(name, data.get(name))

    def reset(self):
        self.values = ContactFormValues.empty().as_dict()
        self.errors = {}

    def as_initial(self):
        return dict(self.values)

    def submit(self):
        """
        Validate and deliver the current values.

        Returns the SubmissionResult, or None when nothing was sent because
        the input is invalid (see ``errors``) or a submission is already in
        flight.
        """
        if self.is_submitting:
            logger.info("Ignoring contact form submit while another is in flight")
            return None

        form = ContactForm(data=self.values)
        if not form.is_valid():
            self.errors = {field: list(messages) for field, messages in form.errors.items()}
            return None
        self.errors = {}

        if not self.guard.acquire():
            logger.info("Ignoring contact form submit while another is in flight")
            return None
        try:
            return self.adapter.deliver(form.values(), on_success=self.reset)
        finally:
            self.guard.release()
