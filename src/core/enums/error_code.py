"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and travel inside
DomainError instances. The RFC 9457 response exposes them as field-level
error codes.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_IN_USE)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*)
- Authorization errors (PERMISSION_DENIED, RESOURCE_NOT_OWNED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_PASSWORD = "invalid_password"
    INVALID_DATE_RANGE = "invalid_date_range"
    INVALID_ROLE = "invalid_role"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    MEMBER_NOT_FOUND = "member_not_found"
    ROLE_NOT_FOUND = "role_not_found"
    TASK_STATUS_NOT_FOUND = "task_status_not_found"
    PRIORITY_NOT_FOUND = "priority_not_found"
    PROJECT_NOT_FOUND = "project_not_found"
    PROJECT_MEMBER_NOT_FOUND = "project_member_not_found"
    BOARD_NOT_FOUND = "board_not_found"
    BOARD_MEMBER_NOT_FOUND = "board_member_not_found"
    TASK_NOT_FOUND = "task_not_found"
    ASSIGNMENT_NOT_FOUND = "assignment_not_found"
    COMMENT_NOT_FOUND = "comment_not_found"
    STATUS_CHANGE_NOT_FOUND = "status_change_not_found"
    NOTIFICATION_NOT_FOUND = "notification_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    CODE_ALREADY_EXISTS = "code_already_exists"
    MEMBERSHIP_ALREADY_EXISTS = "membership_already_exists"
    ASSIGNMENT_ALREADY_EXISTS = "assignment_already_exists"
    RESOURCE_IN_USE = "resource_in_use"
    RESOURCE_CONFLICT = "resource_conflict"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_INVALID = "token_invalid"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    RESOURCE_NOT_OWNED = "resource_not_owned"
