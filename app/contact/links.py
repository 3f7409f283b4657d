from dataclasses import dataclass

from django.conf import settings
from django.urls import reverse

CONSULTATION_SERVICE = 'Consultation'


@dataclass(frozen=True)
class ContactLink:
    label: str
    href: str
    icon: str
    external: bool = False


def consultation_url():
    return f"{reverse('contact:contact')}?service={CONSULTATION_SERVICE}"


def direct_contact_links():
    """The "Get in Touch Directly" links shown beside the form."""
    phone = settings.CONTACT_PHONE_NUMBER
    phone_display = settings.CONTACT_PHONE_DISPLAY
    email = settings.CONTACT_EMAIL

    return [
        ContactLink(
            label=f'WhatsApp Us ({phone_display})',
            href=f"https://wa.me/{phone.lstrip('+')}",
            icon='whatsapp',
            external=True,
        ),
        ContactLink(label=f'Call {phone_display}', href=f'tel:{phone}', icon='telephone'),
        ContactLink(label=f'Email: {email}', href=f'mailto:{email}', icon='envelope'),
        ContactLink(label='Schedule a Free Consultation', href=consultation_url(), icon='file-text'),
    ]
