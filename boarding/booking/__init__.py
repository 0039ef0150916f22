from boarding.booking.form_validator import FieldId, ValidationResult, validate
from boarding.booking.session import BookingSession, SubmissionResult

__all__ = [
    "FieldId", "ValidationResult", "validate",
    "BookingSession", "SubmissionResult",
]
