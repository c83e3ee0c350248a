class InvariantViolation(ValueError):
    """Raised when incoming content breaks a domain rule. Rendered as a 400."""


class UploadRejected(InvariantViolation):
    """Raised when an uploaded file fails the type or size checks."""
