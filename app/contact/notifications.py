"""
Toast notifications for the contact page.

Notifiers are fire-and-forget: callers hand over a Notification and never
look at a return value.
"""
from dataclasses import asdict, dataclass

from django.contrib import messages

DEFAULT = 'default'
DESTRUCTIVE = 'destructive'


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: str = DEFAULT

    @property
    def is_destructive(self) -> bool:
        return self.variant == DESTRUCTIVE

    def as_dict(self):
        return asdict(self)


class MessagesNotifier:
    """
    Queue notifications on the messages framework for the next rendered page.

    The toast title travels in ``extra_tags``; the variant maps onto the
    message level (``default`` -> SUCCESS, ``destructive`` -> ERROR).
    """

    def __init__(self, request):
        self.request = request

    def notify(self, notification):
        level = messages.ERROR if notification.is_destructive else messages.SUCCESS
        messages.add_message(
            self.request,
            level,
            notification.description,
            extra_tags=notification.title,
        )


class ListNotifier:
    """Collect notifications in memory, e.g. to return them from an API call."""

    def __init__(self):
        self.notifications = []

    def notify(self, notification):
        self.notifications.append(notification)

    def as_list(self):
        return [notification.as_dict() for notification in self.notifications]
