"""
Error types raised by the vehicle, customer and rental services.

Views translate them into JSON error responses; anything else is left to
propagate.
"""


class RentalError(Exception):
    """Base class for all domain errors."""

    status_code = 400

    def __init__(self, message="Error: request could not be processed"):
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        return self.message


class NotFoundError(RentalError):
    """Raised when a customer, vehicle or rental id does not exist."""

    status_code = 404

    def __init__(self, message="Error: not found"):
        super().__init__(message)


class ConflictError(RentalError):
    """Raised when a write would break a uniqueness or availability rule."""

    status_code = 409

    def __init__(self, message="Error: conflict"):
        super().__init__(message)


class InvalidStateError(RentalError):
    """Raised when a rental status transition is not allowed."""

    status_code = 409

    def __init__(self, message="Error: invalid state"):
        super().__init__(message)
