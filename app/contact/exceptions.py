class ContactSubmissionError(Exception):
    """Base class for errors raised while submitting the contact form."""
    pass


class InvalidSubmissionResult(ContactSubmissionError):
    """Raised when a submission handler returns something other than a result record."""

    def __init__(self, response):
        self.response = response
        super().__init__(f"Submission handler returned an unexpected result: {response!r}")
