"""
Shared Pydantic Types/Schemas.

API contracts for keywords, skills and student preferences. Field
constraints declared here are the only source of the validation rules;
``bestchoice.validation`` turns pydantic errors into structured violations.
"""

from datetime import datetime
from math import ceil
from typing import Annotated, Any, ClassVar, Generic, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic_core import PydanticCustomError

from core.constants import (
    COMMENT_MAX_LENGTH,
    KEYWORD_DESCRIPTION_MAX_LENGTH,
    KEYWORD_DOMAIN_MAX_LENGTH,
    KEYWORD_LABEL_MAX_LENGTH,
    MOTIVATION_MAX_LENGTH,
    RANK_MAX,
    RANK_MIN,
    SKILL_CATEGORY_MAX_LENGTH,
    SKILL_DESCRIPTION_MAX_LENGTH,
    SKILL_LEVEL_MAX,
    SKILL_LEVEL_MIN,
    SKILL_NAME_MAX_LENGTH,
)

from .enums import PreferenceStatus

T = TypeVar("T")


def _not_blank(value: str) -> str:
    if not value.strip():
        raise PydanticCustomError("blank", "Field must not be blank")
    return value


NotBlank = AfterValidator(_not_blank)


# =============================================================================
# Base models
# =============================================================================

class RequestModel(BaseModel):
    """Base for inbound payloads."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # (field, rule) -> message reported for that violation; range violations
    # look up "range-min" or "range-max" before "range"
    violation_messages: ClassVar[dict[tuple[str, str], str]] = {}

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ResponseModel(BaseModel):
    """Base for outbound read views."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, from_attributes=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# Pagination
# =============================================================================

class PageResponse(BaseModel, Generic[T]):
    """One page of a sorted listing."""
    content: list[T]
    page_number: int = Field(ge=0)
    page_size: int = Field(ge=1)
    total_elements: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    first: bool
    last: bool
    has_next: bool
    has_previous: bool

    @classmethod
    def of(cls, content: list[T], page: int, size: int, total: int) -> "PageResponse[T]":
        """Build a page from its items, zero-based page index, page size and total count."""
        if size < 1:
            raise ValueError(f"Page size must be at least 1 (got {size})")
        total_pages = ceil(total / size)
        return cls(
            content=content,
            page_number=page,
            page_size=size,
            total_elements=total,
            total_pages=total_pages,
            first=page == 0,
            last=page >= total_pages - 1,
            has_next=page < total_pages - 1,
            has_previous=page > 0,
        )


# =============================================================================
# Keyword Types
# =============================================================================

class KeywordCreateRequest(RequestModel):
    """Schema for creating a keyword. ``active`` is assigned by the server."""
    label: Annotated[str, Field(max_length=KEYWORD_LABEL_MAX_LENGTH), NotBlank]
    description: str | None = Field(default=None, max_length=KEYWORD_DESCRIPTION_MAX_LENGTH)
    domain: str | None = Field(default=None, max_length=KEYWORD_DOMAIN_MAX_LENGTH)

    violation_messages: ClassVar[dict[tuple[str, str], str]] = {
        ("label", "required"): "Le libellé du mot-clé est obligatoire",
        ("label", "max-length"): "Le libellé ne doit pas dépasser 100 caractères",
        ("description", "max-length"): "La description ne doit pas dépasser 300 caractères",
        ("domain", "max-length"): "Le domaine ne doit pas dépasser 50 caractères",
    }


class KeywordUpdateRequest(KeywordCreateRequest):
    """Schema for updating a keyword. ``None`` fields leave the stored value unchanged."""
    active: bool | None = None


class KeywordResponse(ResponseModel):
    id: int
    label: str
    description: str | None = None
    domain: str | None = None
    active: bool


# =============================================================================
# Skill Types
# =============================================================================

class SkillCreateRequest(RequestModel):
    """Schema for creating a skill. ``active`` is assigned by the server."""
    name: Annotated[str, Field(max_length=SKILL_NAME_MAX_LENGTH), NotBlank]
    description: str | None = Field(default=None, max_length=SKILL_DESCRIPTION_MAX_LENGTH)
    # e.g. "Programmation", "Base de Données", "AI"
    category: str | None = Field(default=None, max_length=SKILL_CATEGORY_MAX_LENGTH)
    level: int = Field(strict=True, ge=SKILL_LEVEL_MIN, le=SKILL_LEVEL_MAX)

    violation_messages: ClassVar[dict[tuple[str, str], str]] = {
        ("name", "required"): "Le nom de la compétence est obligatoire",
        ("name", "max-length"): "Le nom de la compétence ne doit pas dépasser 100 caractères",
        ("description", "max-length"): "La description ne doit pas dépasser 500 caractères",
        ("category", "max-length"): "La catégorie ne doit pas dépasser 50 caractères",
        ("level", "required"): "Le niveau est obligatoire",
        ("level", "range-min"): "Le niveau doit être au minimum 1",
        ("level", "range-max"): "Le niveau doit être au maximum 5",
    }


class SkillUpdateRequest(SkillCreateRequest):
    """Schema for updating a skill. ``None`` fields leave the stored value unchanged."""
    level: int | None = Field(default=None, strict=True, ge=SKILL_LEVEL_MIN, le=SKILL_LEVEL_MAX)
    active: bool | None = None


class SkillResponse(ResponseModel):
    id: int
    name: str
    description: str | None = None
    category: str | None = None
    level: int | None = None
    active: bool


# =============================================================================
# Preference Types
# =============================================================================

class PreferenceCreateRequest(RequestModel):
    """
    A student's ranked interest in a project (1 = first choice).

    Uniqueness of the rank per student and the cap on the number of
    choices are enforced by ``bestchoice.rules``, not by this shape.
    """
    student_id: int = Field(alias="studentId", strict=True)
    project_id: int = Field(alias="projectId", strict=True)
    rank: int = Field(strict=True, ge=RANK_MIN, le=RANK_MAX)
    motivation: str | None = Field(default=None, max_length=MOTIVATION_MAX_LENGTH)
    comment: str | None = Field(default=None, max_length=COMMENT_MAX_LENGTH)

    violation_messages: ClassVar[dict[tuple[str, str], str]] = {
        ("studentId", "required"): "L'ID de l'étudiant est obligatoire",
        ("projectId", "required"): "Le projectId est obligatoire",
        ("rank", "required"): "Le rank est obligatoire",
        ("rank", "range-min"): "Le rank doit être >= 1",
        ("rank", "range-max"): "Le rank doit être <= 10",
        ("motivation", "max-length"): "La motivation ne doit pas dépasser 1000 caractères",
        ("comment", "max-length"): "Le commentaire ne doit pas dépasser 500 caractères",
    }


class PreferenceResponse(ResponseModel):
    id: int
    student_id: int = Field(alias="studentId")
    project_id: int = Field(alias="projectId")
    rank: int
    status: PreferenceStatus
    created_at: datetime = Field(alias="createdAt")


__all__ = [
    "NotBlank",
    "RequestModel",
    "ResponseModel",
    "PageResponse",
    "KeywordCreateRequest",
    "KeywordUpdateRequest",
    "KeywordResponse",
    "SkillCreateRequest",
    "SkillUpdateRequest",
    "SkillResponse",
    "PreferenceCreateRequest",
    "PreferenceResponse",
]
