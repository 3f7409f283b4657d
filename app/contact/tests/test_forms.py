"""
Tests for contact form validation.
"""
import pytest

from contact.forms import (
    ContactForm,
    ContactFormValues,
    EMAIL_INVALID,
    EMAIL_REQUIRED,
    MESSAGE_TOO_SHORT,
    NAME_REQUIRED,
    SUBJECT_NOT_IN_CATALOG,
    SUBJECT_REQUIRED,
    validate_contact,
)


class TestValidateContact:

    def test_valid_input(self, valid_data):
        values, errors = validate_contact(valid_data)

        assert errors == {}
        assert values == ContactFormValues(
            name='Jane Doe',
            email='jane@example.com',
            subject='Life Insurance',
            message='Please call me back',
        )

    def test_every_empty_field_is_reported(self):
        values, errors = validate_contact({})

        assert values is None
        assert errors == {
            'name': [NAME_REQUIRED],
            'email': [EMAIL_REQUIRED],
            'subject': [SUBJECT_REQUIRED],
            'message': [MESSAGE_TOO_SHORT],
        }

    @pytest.mark.parametrize('field, message', [
        ('name', NAME_REQUIRED),
        ('email', EMAIL_REQUIRED),
        ('subject', SUBJECT_REQUIRED),
        ('message', MESSAGE_TOO_SHORT),
    ])
    def test_single_empty_field(self, valid_data, field, message):
        valid_data[field] = ''

        values, errors = validate_contact(valid_data)

        assert values is None
        assert errors == {field: [message]}

    def test_whitespace_counts_towards_message_length(self, valid_data):
        valid_data['message'] = 'hi   '

        values, errors = validate_contact(valid_data)

        assert errors == {}
        assert values.message == 'hi   '

    def test_whitespace_only_name_is_not_empty(self, valid_data):
        valid_data['name'] = '   '
        values, errors = validate_contact(valid_data)
        assert errors == {}
        assert values.name == '   '

    def test_email_is_stripped(self, valid_data):
        valid_data['email'] = ' jane@example.com '
        values, errors = validate_contact(valid_data)
        assert errors == {}
        assert values.email == 'jane@example.com'

    @pytest.mark.parametrize('email', [
        'jane.example.com',
        'jane@',
        '@example.com',
        'jane@example',
        'jane doe@example.com',
    ])
    def test_invalid_email(self, valid_data, email):
        valid_data['email'] = email
        _, errors = validate_contact(valid_data)
        assert errors == {'email': [EMAIL_INVALID]}

    @pytest.mark.parametrize('email', [
        'jane@example.com',
        'someone@no-such-domain-for-sure.io',
        'first.last+tag@sub.example.co.in',
    ])
    def test_valid_email_syntax_passes(self, valid_data, email):
        valid_data['email'] = email
        _, errors = validate_contact(valid_data)
        assert errors == {}

    @pytest.mark.parametrize('message', ['a', 'abcd', 'abc\U0001F600'])
    def test_short_message(self, valid_data, message):
        valid_data['message'] = message
        _, errors = validate_contact(valid_data)
        assert errors == {'message': [MESSAGE_TOO_SHORT]}

    @pytest.mark.parametrize('message', ['abcde', 'ñññññ', 'Please call me back'])
    def test_message_of_five_characters_passes(self, valid_data, message):
        valid_data['message'] = message
        _, errors = validate_contact(valid_data)
        assert errors == {}


class TestSubjectCatalogCheck:

    def test_subject_outside_catalog_passes_by_default(self, valid_data):
        valid_data['subject'] = 'Something else'
        values, errors = validate_contact(valid_data)
        assert errors == {}
        assert values.subject == 'Something else'

    def test_subject_outside_catalog_rejected_when_enforced(self, settings, valid_data):
        settings.CONTACT_ENFORCE_SUBJECT_CATALOG = True
        valid_data['subject'] = 'Something else'

        _, errors = validate_contact(valid_data)

        assert errors == {'subject': [SUBJECT_NOT_IN_CATALOG]}

    def test_catalog_subject_accepted_when_enforced(self, settings, valid_data):
        settings.CONTACT_ENFORCE_SUBJECT_CATALOG = True
        _, errors = validate_contact(valid_data)
        assert errors == {}


class TestContactForm:

    def test_widgets(self):
        form = ContactForm()

        assert form.fields['name'].widget.attrs['placeholder'] == 'Your Name'
        assert form.fields['email'].widget.input_type == 'email'
        assert form.fields['message'].widget.attrs['rows'] == 4

    def test_subject_renders_grouped_options(self):
        html = str(ContactForm()['subject'])

        assert '<optgroup label="Insurance">' in html
        assert '<optgroup label="Software Solutions">' in html
        assert '<option value="Beart Foundation">General Enquiry</option>' in html
        assert 'Select a subject' in html

    def test_inputs_disabled_while_submitting(self):
        form = ContactForm(submitting=True)

        for name in ('name', 'email', 'subject', 'message'):
            assert form.fields[name].widget.attrs['disabled'] is True

    def test_values_as_dict(self, valid_data):
        form = ContactForm(data=valid_data)
        assert form.is_valid()
        assert form.values().as_dict() == valid_data

    def test_empty_values(self):
        assert ContactFormValues.empty().as_dict() == {
            'name': '', 'email': '', 'subject': '', 'message': '',
        }
