"""
Contact signals.

``contact_message_sent`` fires after the submission handler reports success,
with the delivered ``values`` (a ContactFormValues).
"""
import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

contact_message_sent = Signal()


@receiver(contact_message_sent)
def log_contact_message_sent(sender, values, **kwargs):
    """Record each delivered message; hook further integrations here."""
    logger.info(f"Contact message sent by {values.email} about '{values.subject}'")
