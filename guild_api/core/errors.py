"""
Domain errors raised by services.

Every error carries an ``ErrorKind`` and a stable ``code`` so the HTTP layer
can pick a status code without looking at the message text.
"""

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    AUTH = "auth"
    FORBIDDEN = "forbidden"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.AUTH: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
}


class DomainError(Exception):
    kind: ErrorKind = ErrorKind.VALIDATION
    code: str = "domain_error"
    default_message: str = "Request failed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def to_dict(self) -> dict:
        return {"error": self.message, "code": self.code}


# 400
class ValidationError(DomainError):
    kind = ErrorKind.VALIDATION
    code = "validation_error"
    default_message = "Invalid input"


class MissingField(ValidationError):
    code = "missing_field"
    default_message = "Required field is missing"


# 401
class InvalidToken(DomainError):
    kind = ErrorKind.AUTH
    code = "invalid_token"
    default_message = "Invalid token"


class InvalidCredentials(DomainError):
    kind = ErrorKind.AUTH
    code = "invalid_credentials"
    default_message = "Invalid username or password"


# 403
class Forbidden(DomainError):
    kind = ErrorKind.FORBIDDEN
    code = "forbidden"
    default_message = "Cannot update other users"


class AdminRequired(Forbidden):
    code = "admin_required"
    default_message = "Admin access required"


class CrossRegionForbidden(Forbidden):
    code = "cross_region_forbidden"
    default_message = "Cannot modify data from another region"


class UserRegionMismatch(Forbidden):
    code = "user_region_mismatch"
    default_message = "User is from a different region"


# 404
class NotFound(DomainError):
    kind = ErrorKind.NOT_FOUND
    code = "not_found"
    default_message = "Not found"


class NoEventForRegion(NotFound):
    code = "no_event_for_region"
    default_message = "No event found for this region"


class EventNotFound(NotFound):
    code = "event_not_found"
    default_message = "Event not found"


class TeamNotFound(NotFound):
    code = "team_not_found"
    default_message = "Team not found"


class UserNotFound(NotFound):
    code = "user_not_found"
    default_message = "User not found"


class ScheduleNotFound(NotFound):
    code = "schedule_not_found"
    default_message = "Schedule not found"


class NotFoundOrCrossRegion(NotFound):
    code = "not_found_or_cross_region"
    default_message = "User not found or in different region"


# 409
class Conflict(DomainError):
    kind = ErrorKind.CONFLICT
    code = "conflict"
    default_message = "Conflict"


class RegionConflict(Conflict):
    code = "region_conflict"
    default_message = "In-game name already exists in another region"


class IdentityConflict(Conflict):
    code = "identity_conflict"
    default_message = "In-game name already exists or is linked to another Discord account"


class AlreadyMember(Conflict):
    code = "already_member"
    default_message = "User is already a member of this team"
