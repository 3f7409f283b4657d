"""
Default submission handler: email the message to the site's contact inbox.
"""
import logging
import smtplib

from django.conf import settings
from django.core.mail import EmailMessage

logger = logging.getLogger(__name__)

DELIVERY_FAILED = 'We could not send your message right now. Please try again later.'


def send_contact_email(payload):
    """
    Send a contact form payload to ``CONTACT_EMAIL``.

    Replies go straight to the visitor through ``reply_to``. Mail server
    problems come back as a failed result; anything else is raised.
    """
    # Header values must stay on one line
    subject = ' '.join(f"Website enquiry: {payload['subject']}".split())
    body = f"""New enquiry from {payload['name']} ({payload['email']}):

Subject: {payload['subject']}

Message:
{payload['message']}
"""

    email = EmailMessage(
        subject=subject,
        body=body,
        from_email=settings.DEFAULT_FROM_EMAIL,
        to=[settings.CONTACT_EMAIL],
        reply_to=[payload['email']],
    )

    try:
        email.send(fail_silently=False)
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"Failed to send contact email from {payload['email']}: {str(e)}")
        return {'success': False, 'error': DELIVERY_FAILED}

    logger.info(f"Contact email from {payload['email']} sent to {settings.CONTACT_EMAIL}")
    return {'success': True}
