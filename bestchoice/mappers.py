"""
Conversions between validated requests and response views.

These functions apply the server-side defaults a create request does not
carry (``active=True`` for keywords and skills, ``PENDING`` for
preferences) and the null-preserving merge used by update requests.
The identity and creation time are supplied by the caller, which owns
storage.
"""

from datetime import datetime, timezone

from .enums import PreferenceStatus
from .types import (
    KeywordCreateRequest,
    KeywordResponse,
    KeywordUpdateRequest,
    PreferenceCreateRequest,
    PreferenceResponse,
    SkillCreateRequest,
    SkillResponse,
    SkillUpdateRequest,
)


def _merged(current: dict, changes: dict) -> dict:
    return {**current, **{k: v for k, v in changes.items() if v is not None}}


# =============================================================================
# Keyword
# =============================================================================

def keyword_response_from_create(request: KeywordCreateRequest, id: int) -> KeywordResponse:
    return KeywordResponse(
        id=id,
        label=request.label,
        description=request.description,
        domain=request.domain,
        active=True,
    )


def apply_keyword_update(current: KeywordResponse, request: KeywordUpdateRequest) -> KeywordResponse:
    """Return ``current`` with the non-null fields of ``request`` applied. ``id`` never changes."""
    return KeywordResponse(**_merged(current.model_dump(), request.model_dump()))


# =============================================================================
# Skill
# =============================================================================

def skill_response_from_create(request: SkillCreateRequest, id: int) -> SkillResponse:
    return SkillResponse(
        id=id,
        name=request.name,
        description=request.description,
        category=request.category,
        level=request.level,
        active=True,
    )


def apply_skill_update(current: SkillResponse, request: SkillUpdateRequest) -> SkillResponse:
    """Return ``current`` with the non-null fields of ``request`` applied. ``id`` never changes."""
    return SkillResponse(**_merged(current.model_dump(), request.model_dump()))


# =============================================================================
# Preference
# =============================================================================

def preference_response_from_create(
    request: PreferenceCreateRequest,
    id: int,
    created_at: datetime | None = None,
) -> PreferenceResponse:
    """
    Build the read view of a newly stored preference.

    Motivation and comment are not part of the read view. The status
    starts as PENDING and ``created_at`` defaults to now (UTC).
    """
    return PreferenceResponse(
        id=id,
        student_id=request.student_id,
        project_id=request.project_id,
        rank=request.rank,
        status=PreferenceStatus.PENDING,
        created_at=created_at or datetime.now(timezone.utc),
    )


def with_status(preference: PreferenceResponse, status: PreferenceStatus) -> PreferenceResponse:
    """Copy of ``preference`` with a new status. The creation time is kept."""
    if preference.status == status:
        return preference
    return preference.model_copy(update={"status": status})


__all__ = [
    "keyword_response_from_create",
    "apply_keyword_update",
    "skill_response_from_create",
    "apply_skill_update",
    "preference_response_from_create",
    "with_status",
]
