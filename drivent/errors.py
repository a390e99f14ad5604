"""Application errors raised by services and translated into HTTP responses by the routes."""


class ApplicationError(Exception):
    name = 'ApplicationError'
    message = 'An unexpected error occurred'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self):
        return {'name': self.name, 'message': self.message}


class NotFoundError(ApplicationError):
    name = 'NotFoundError'
    message = 'No result for this search!'


class PaymentRequiredError(ApplicationError):
    name = 'PaymentRequired'
    message = 'Payment required to access this resource'


class BadRequestError(ApplicationError):
    name = 'BadRequestError'
    message = 'The request is missing required fields'


class UnauthorizedError(ApplicationError):
    name = 'UnauthorizedError'
    message = 'You must be signed in to continue'


class InvalidCredentialsError(ApplicationError):
    name = 'InvalidCredentialsError'
    message = 'email or password are incorrect'


def error_payload(error):
    """Serialize any exception into the ``{name, message}`` payload."""
    if isinstance(error, ApplicationError):
        return error.to_dict()
    return {'name': type(error).__name__, 'message': str(error)}
