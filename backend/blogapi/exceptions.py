"""Blog API exceptions."""


class BlogAPIError(Exception):
    """Base exception for blog post API errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BlogAPIError):
    """Missing or malformed field in a request."""

    status_code = 400


class NotFoundError(BlogAPIError):
    """No blog post with the requested id."""

    status_code = 404


class StoreError(BlogAPIError):
    """Underlying persistence failure."""

    status_code = 500
