import json

from django.core.management.base import BaseCommand

from contact.catalog import CATALOG_VERSION, SUBJECT_CATALOG


class Command(BaseCommand):
    help = 'Show the subjects offered by the contact form'

    def add_arguments(self, parser):
        parser.add_argument('--json', action='store_true', help='Print the catalog as JSON')

    def handle(self, *args, **options):
        if options['json']:
            data = {
                'version': CATALOG_VERSION,
                'groups': [
                    {
                        'category': group.category,
                        'subjects': [
                            {'value': subject.value, 'label': subject.display}
                            for subject in group.subjects
                        ],
                    }
                    for group in SUBJECT_CATALOG
                ],
            }
            self.stdout.write(json.dumps(data, indent=2))
            return

        self.stdout.write(f"=== Subject catalog v{CATALOG_VERSION} ===")
        for group in SUBJECT_CATALOG:
            self.stdout.write(group.category)
            for subject in group.subjects:
                if subject.label:
                    self.stdout.write(f"  - {subject.value} ({subject.label})")
                else:
                    self.stdout.write(f"  - {subject.value}")
