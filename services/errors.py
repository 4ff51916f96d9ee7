# services/errors.py


class RegistrationError(Exception):
    """Base error for the registration flow; carries the HTTP status to respond with."""
    status_code = 400

    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self):
        body = {'success': False, 'error': self.message}
        if self.field:
            body['field'] = self.field
        return body


class InvalidPayloadError(RegistrationError):
    def __init__(self, message='Invalid request body'):
        super().__init__(message)


class MissingFieldError(RegistrationError):
    def __init__(self, field):
        super().__init__(f'Missing required field: {field}', field=field)


class InvalidFieldError(RegistrationError):
    def __init__(self, field):
        super().__init__(f'Invalid {field} format', field=field)


class DuplicateRegistrationError(RegistrationError):
    pass


class RegistrationNotFoundError(RegistrationError):
    status_code = 404

    def __init__(self, message='Registration not found'):
        super().__init__(message)


class RegistrationNumberExhaustedError(RegistrationError):
    status_code = 500

    def __init__(self):
        super().__init__('Could not allocate registration number')


class StorageError(RegistrationError):
    status_code = 500
