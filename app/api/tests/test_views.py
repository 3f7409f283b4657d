"""
Tests for the contact submission API.
"""
import pytest
from django.conf import settings as django_settings
from rest_framework import status
from rest_framework.test import APIClient

from contact.controller import CacheSubmissionGuard
from contact.submission import UNEXPECTED_ERROR

SUBMIT_URL = '/api/contact/submit/'


@pytest.fixture
def api_client():
    return APIClient()


class TestContactSubmitAPI:

    def test_api_root(self, api_client):
        response = api_client.get('/api/')

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['contact-submit'].endswith(SUBMIT_URL)

    def test_submit_valid_contact_form(self, api_client, install_handler, valid_data):
        handler = install_handler(response={'success': True})

        response = api_client.post(SUBMIT_URL, valid_data, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            'success': True,
            'error': None,
            'notifications': [{
                'title': 'Message Sent!',
                'description': 'Thank you for contacting us. We will get back to you soon.',
                'variant': 'default',
            }],
        }
        assert handler.calls == [valid_data]

    def test_form_encoded_submission(self, api_client, install_handler, valid_data):
        install_handler()

        response = api_client.post(SUBMIT_URL, valid_data)

        assert response.status_code == status.HTTP_200_OK

    def test_submit_missing_required_fields(self, api_client, install_handler):
        handler = install_handler()

        response = api_client.post(SUBMIT_URL, {'name': 'Test User'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data['success'] is False
        assert data['fields'] == {
            'email': ['Email is required'],
            'subject': ['Subject is required'],
            'message': ['Message must be at least 5 characters long'],
        }
        assert handler.calls == []

    @pytest.mark.parametrize('body', [['name'], 'Jane Doe', 42])
    def test_submit_non_object_body(self, api_client, install_handler, body):
        handler = install_handler()

        response = api_client.post(SUBMIT_URL, body, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'] == 'Validation failed'
        assert handler.calls == []

    def test_submit_invalid_email(self, api_client, install_handler, valid_data):
        install_handler()

        response = api_client.post(SUBMIT_URL, {**valid_data, 'email': 'invalid-email'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['fields'] == {'email': ['Invalid email address']}

    def test_handler_failure(self, api_client, install_handler, valid_data):
        install_handler(response={'success': False, 'error': 'Mailbox full'})

        response = api_client.post(SUBMIT_URL, valid_data, format='json')

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        data = response.json()
        assert data['error'] == 'Mailbox full'
        assert data['notifications'][0]['variant'] == 'destructive'

    def test_handler_fault(self, api_client, install_handler, valid_data):
        install_handler(exc=RuntimeError('boom'))

        response = api_client.post(SUBMIT_URL, valid_data, format='json')

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json()['error'] == UNEXPECTED_ERROR

    def test_rejected_while_in_flight(self, api_client, install_handler, valid_data):
        handler = install_handler()
        api_client.get('/contact/')
        session_key = api_client.cookies[django_settings.SESSION_COOKIE_NAME].value
        CacheSubmissionGuard(session_key).acquire()

        response = api_client.post(SUBMIT_URL, valid_data, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()['success'] is False
        assert handler.calls == []
