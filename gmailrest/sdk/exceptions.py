class GmailError(Exception):
    """Base class for all gmailrest exceptions."""
    pass

class ConfigurationError(GmailError):
    """Raised when credentials or settings cannot be resolved."""
    pass

class ApiError(GmailError):
    """Raised for an error envelope returned by the Gmail API.

    `details` is the value of the envelope's "error" key, passed through verbatim.
    """

    def __init__(self, details):
        super().__init__(details)
        self.details = details

class NotFoundError(ApiError):
    """Raised when the API reports code 404."""

    def __init__(self, details=None):
        super().__init__(details if details is not None else {"code": 404})

    def __str__(self):
        return "not found"

class BadRequestError(ApiError):
    """Raised when the API reports code 400; carries the first error message only."""

    def __init__(self, message, details=None):
        super().__init__(details if details is not None else {"code": 400})
        self.message = message

    def __str__(self):
        return self.message

class UnexpectedShapeError(GmailError):
    """Raised when a response matches no known success or error shape."""

    def __init__(self, response):
        super().__init__(f"Unexpected response shape: {response!r}")
        self.response = response
