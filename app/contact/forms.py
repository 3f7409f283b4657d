from dataclasses import asdict, dataclass

from django import forms
from django.conf import settings

from contact import catalog

FIELD_NAMES = ('name', 'email', 'subject', 'message')

MESSAGE_MIN_LENGTH = 5

NAME_REQUIRED = 'Name is required'
EMAIL_REQUIRED = 'Email is required'
EMAIL_INVALID = 'Invalid email address'
SUBJECT_REQUIRED = 'Subject is required'
SUBJECT_NOT_IN_CATALOG = 'Select a valid subject'
MESSAGE_TOO_SHORT = f'Message must be at least {MESSAGE_MIN_LENGTH} characters long'


@dataclass(frozen=True)
class ContactFormValues:
    """Validated contact form input."""
    name: str
    email: str
    subject: str
    message: str

    @classmethod
    def empty(cls):
        return cls(name='', email='', subject='', message='')

    @classmethod
    def from_cleaned_data(cls, cleaned_data):
        return cls(**{field: cleaned_data[field] for field in FIELD_NAMES})

    def as_dict(self):
        return asdict(self)


class ContactForm(forms.Form):
    name = forms.CharField(
        label='Name',
        strip=False,
        error_messages={'required': NAME_REQUIRED},
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Your Name',
        })
    )
    # EmailField always strips; the other fields keep what the visitor typed.
    email = forms.EmailField(
        label='Email',
        error_messages={'required': EMAIL_REQUIRED, 'invalid': EMAIL_INVALID},
        widget=forms.EmailInput(attrs={
            'class': 'form-control',
            'placeholder': 'your.email@example.com',
        })
    )
    # A CharField rather than a ChoiceField: the picker limits the options,
    # validation only requires a value unless the catalog check is enabled.
    subject = forms.CharField(
        label='Subject',
        strip=False,
        error_messages={'required': SUBJECT_REQUIRED},
        widget=forms.Select(
            choices=catalog.subject_choices(),
            attrs={'class': 'form-select'},
        )
    )
    message = forms.CharField(
        label='Message',
        strip=False,
        min_length=MESSAGE_MIN_LENGTH,
        error_messages={'required': MESSAGE_TOO_SHORT, 'min_length': MESSAGE_TOO_SHORT},
        widget=forms.Textarea(attrs={
            'class': 'form-control',
            'rows': 4,
            'placeholder': 'How can we help you?',
        })
    )

    def __init__(self, *args, **kwargs):
        submitting = kwargs.pop('submitting', False)
        super().__init__(*args, **kwargs)
        if submitting:
            for field in self.fields.values():
                field.widget.attrs['disabled'] = True

    def clean_subject(self):
        subject = self.cleaned_data['subject']
        if getattr(settings, 'CONTACT_ENFORCE_SUBJECT_CATALOG', False) and not catalog.is_subject(subject):
            raise forms.ValidationError(SUBJECT_NOT_IN_CATALOG, code='invalid_choice')
        return subject

    def values(self):
        """The validated input as a ContactFormValues. Only call after is_valid()."""
        return ContactFormValues.from_cleaned_data(self.cleaned_data)


def validate_contact(data):
    """
    Run the contact form rules against a mapping of raw field values.

    Returns a ``(values, errors)`` pair: ``values`` is a ContactFormValues
    when every rule passes and None otherwise, ``errors`` maps field names to
    lists of messages and is empty on success.
    """
    form = ContactForm(data={field: data.get(field, '') for field in FIELD_NAMES})
    if form.is_valid():
        return form.values(), {}
    return None, {field: list(messages) for field, messages in form.errors.items()}
