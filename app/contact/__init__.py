"""
Contact page for the Beart website.

- Contact form with a grouped subject picker
- Pluggable submission handler (email by default)
- Toast-style feedback through the messages framework
- Direct contact links (WhatsApp, phone, email, consultation)
"""
