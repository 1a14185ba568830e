class HopeLinkError(Exception):
    """Base for domain errors; carries the HTTP status the API answers with."""
    http_status = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class BadRequestError(HopeLinkError):
    http_status = 400

class ConflictError(HopeLinkError):
    http_status = 400

class InvalidCredentialsError(HopeLinkError):
    http_status = 401

class NotFoundError(HopeLinkError):
    http_status = 404
