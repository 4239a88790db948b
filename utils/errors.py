"""
Errors Module - Exceptions raised by the data layer and API routes
Each error maps to the HTTP status code used when it is rendered.
"""


class APIError(Exception):
    """Base class for errors surfaced to API clients"""
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(APIError):
    """Malformed path parameter or request body"""
    status_code = 400


class NotFoundError(APIError):
    """No row matches the requested resource"""
    status_code = 404


class StorageError(APIError):
    """Query or connection failure"""
    status_code = 500
