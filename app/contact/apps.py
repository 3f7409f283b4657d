from django.apps import AppConfig


class ContactConfig(AppConfig):
    name = 'contact'
    verbose_name = 'Contact'

    def ready(self):
        """Import signals when app is ready."""
        import contact.signals  # noqa
