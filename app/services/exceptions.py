# app/services/exceptions.py
"""
Errors raised by the parking services.
Every one of them is a caller-facing rejection: the operation that raised it
left the database as it found it. Routers turn them into JSON responses via
the ParkingError handler in app.main.
"""


class ParkingError(Exception):
    """Base class — carries a machine-readable code and an HTTP status."""
    error_code = "PARKING_ERROR"
    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class LotFullError(ParkingError):
    """No space is available under the allocation policy."""
    error_code = "LOT_FULL"
    status_code = 400


class NotParkedError(ParkingError):
    """Exit requested for a plate with no active visit."""
    error_code = "NOT_PARKED"
    status_code = 404


class AlreadyParkedError(ParkingError):
    """Entry requested for a plate that is already inside."""
    error_code = "ALREADY_PARKED"
    status_code = 409


class DuplicateError(ParkingError):
    """Plate is already on the package whitelist."""
    error_code = "DUPLICATE_PLATE"
    status_code = 400


class InvalidTransition(ParkingError):
    """Space status change not allowed from its current status."""
    error_code = "INVALID_TRANSITION"
    status_code = 409


class SpaceNotFoundError(ParkingError):
    error_code = "SPACE_NOT_FOUND"
    status_code = 404
