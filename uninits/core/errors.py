# uninits/core/errors.py
from typing import Any, Dict


class PortalError(Exception):
    """Base for every error the portal reports to a caller."""

    status_code = 500

    def __init__(self, message: str, **extra: Any):
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_payload(self) -> Dict[str, Any]:
        payload = {"success": False, "error": self.message}
        payload.update(self.extra)
        return payload


class ValidationError(PortalError):
    status_code = 400


class MissingFields(ValidationError):
    def __init__(self, *fields: str):
        super().__init__("Missing required fields", missing=list(fields))


class InvalidEmail(ValidationError):
    def __init__(self):
        super().__init__("Please use a valid NIT Silchar email address")


class NotFound(PortalError):
    status_code = 404


class IncompleteRegistration(PortalError):
    status_code = 403

    def __init__(self):
        super().__init__(
            "Registration incomplete. Please complete registration first.",
            requiresRegistration=True,
        )


class PersistenceFault(PortalError):
    status_code = 500

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message)
