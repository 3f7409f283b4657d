"""
Tests for the show_subject_catalog management command.
"""
import json
from io import StringIO

from django.core.management import call_command


class TestShowSubjectCatalog:

    def test_text_output(self):
        out = StringIO()

        call_command('show_subject_catalog', stdout=out)
        output = out.getvalue()

        assert output.startswith('=== Subject catalog v1 ===')
        assert 'Insurance\n' in output
        assert '  - Life Insurance\n' in output
        assert '  - Beart Foundation (General Enquiry)\n' in output

    def test_json_output(self):
        out = StringIO()

        call_command('show_subject_catalog', '--json', stdout=out)
        data = json.loads(out.getvalue())

        assert data['version'] == 1
        assert [group['category'] for group in data['groups']] == [
            'Insurance', 'Software Solutions', 'Beart Foundation',
        ]
        assert data['groups'][2]['subjects'] == [
            {'value': 'Beart Foundation', 'label': 'General Enquiry'},
        ]
