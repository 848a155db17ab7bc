"""
BestChoice shared schema layer.

Enumerations, request/response contracts and their validation for the
student project-preference application. HTTP routing and storage live in
the services that consume these contracts.

Usage:
    from bestchoice import KeywordCreateRequest, PreferenceStatus
    from bestchoice.validation import validate_keyword_create, parse
"""

from bestchoice.enums import PreferenceStatus, Role, WorkType, parse_enum
from bestchoice.exceptions import (
    ApiError,
    BestChoiceError,
    BusinessRuleError,
    InvalidEnumValueError,
    NotFoundError,
    RequestValidationFailed,
)
from bestchoice.types import (
    KeywordCreateRequest,
    KeywordResponse,
    KeywordUpdateRequest,
    PageResponse,
    PreferenceCreateRequest,
    PreferenceResponse,
    SkillCreateRequest,
    SkillResponse,
    SkillUpdateRequest,
)

__version__ = "1.0.0"

__all__ = [
    # Enums
    "Role",
    "WorkType",
    "PreferenceStatus",
    "parse_enum",
    # Types
    "KeywordCreateRequest",
    "KeywordUpdateRequest",
    "KeywordResponse",
    "SkillCreateRequest",
    "SkillUpdateRequest",
    "SkillResponse",
    "PreferenceCreateRequest",
    "PreferenceResponse",
    "PageResponse",
    # Errors
    "BestChoiceError",
    "NotFoundError",
    "BusinessRuleError",
    "InvalidEnumValueError",
    "RequestValidationFailed",
    "ApiError",
]
