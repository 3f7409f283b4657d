"""
Subject catalog for the contact form.

The catalog is the single source of truth for the subject picker, the
optional membership check in the form, the ``?service=`` pre-selection and
the ``show_subject_catalog`` command. Bump ``CATALOG_VERSION`` whenever an
entry is added, renamed or removed.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

CATALOG_VERSION = 1


@dataclass(frozen=True)
class Subject:
    """A selectable subject. ``label`` defaults to the submitted value."""
    value: str
    label: Optional[str] = None

    @property
    def display(self) -> str:
        return self.label or self.value


@dataclass(frozen=True)
class SubjectGroup:
    category: str
    subjects: Tuple[Subject, ...]


def _group(category, *subjects):
    return SubjectGroup(
        category=category,
        subjects=tuple(s if isinstance(s, Subject) else Subject(s) for s in subjects),
    )


SUBJECT_CATALOG = (
    _group(
        'Insurance',
        'Mutual Fund Planning',
        'Equity Portfolio Advisory',
        'NRI Investment Services',
        'Wealth Building Workshops',
        'Alternative Investment Funds',
        'Portfolio Management Services',
        'Non-Convertible Debentures',
        'Smallcase Portfolios',
        'Life Insurance',
        'Health Insurance',
        'Bonds',
        'Invoice Discounting / FDs',
        'Home Loans',
        'Education Loans',
        'Loan Against Mutual Funds',
    ),
    _group(
        'Software Solutions',
        'Website Hosting & Domain',
        'Google Workspace',
        'SME Digital Launch Pack',
        'Technical Consulting',
    ),
    _group(
        'Beart Foundation',
        Subject('Beart Foundation', label='General Enquiry'),
    ),
)


def all_subjects():
    """Every subject value, in catalog order."""
    return [subject.value for group in SUBJECT_CATALOG for subject in group.subjects]


def is_subject(value):
    return value in all_subjects()


def category_for(value):
    """Return the category a subject belongs to, or None if it is not listed."""
    for group in SUBJECT_CATALOG:
        if any(subject.value == value for subject in group.subjects):
            return group.category
    return None


def subject_choices(blank_label='Select a subject'):
    """
    Grouped choices for a Django select widget.

    Returns a list with an optional blank entry followed by one
    ``(category, [(value, label), ...])`` pair per group.
    """
    choices = [('', blank_label)] if blank_label is not None else []
    for group in SUBJECT_CATALOG:
        choices.append(
            (group.category, [(subject.value, subject.display) for subject in group.subjects])
        )
    return choices
