"""
Business rules for student preferences.

Rules:
- a student may not pick the same project twice
- a student may not use the same rank twice
- a student holds at most ``max_preferences_per_student`` preferences
- an inactive or full project cannot be picked
- only PENDING preferences can be deleted

The checks are pure: the caller passes the student's current
preferences (from wherever it stores them) and gets a
``BusinessRuleError`` when a rule is broken.
"""

from collections.abc import Iterable

from core.config import get_settings
from core.logging import LogContext, rules_logger

from .enums import PreferenceStatus
from .exceptions import BusinessRuleError
from .types import PreferenceCreateRequest, PreferenceResponse


def _reject(message: str, rule: str, **context) -> BusinessRuleError:
    rules_logger.warning("preference_rule_rejected", rule=rule, **context)
    return BusinessRuleError(message)


def check_new_preference(
    request: PreferenceCreateRequest,
    existing: Iterable[PreferenceResponse],
    max_preferences: int | None = None,
) -> None:
    """
    Check a new preference against the student's existing ones.

    Args:
        request: The validated create request.
        existing: Preferences already held by ``request.student_id``.
            Preferences of other students are ignored.
        max_preferences: Override for the configured maximum.

    Raises:
        BusinessRuleError: If the project was already chosen, the rank is
            already used, or the student is at the maximum.
    """
    if max_preferences is None:
        max_preferences = get_settings().max_preferences_per_student
    own = [p for p in existing if p.student_id == request.student_id]

    with LogContext(student_id=request.student_id, project_id=request.project_id):
        if any(p.project_id == request.project_id for p in own):
            raise _reject("Vous avez déjà sélectionné ce projet", "duplicate_project")

        if any(p.rank == request.rank for p in own):
            raise _reject(
                f"Le rang {request.rank} est déjà utilisé. Veuillez choisir un autre rang.",
                "duplicate_rank",
                rank=request.rank,
            )

        if len(own) >= max_preferences:
            raise _reject(
                f"Vous avez atteint le maximum de {max_preferences} préférences",
                "max_preferences",
                count=len(own),
            )


def check_project_selectable(active: bool, full: bool, project_id: int | None = None) -> None:
    """Reject a project that is inactive or already full."""
    if not active:
        raise _reject("Ce projet n'est plus disponible", "project_inactive", project_id=project_id)
    if full:
        raise _reject("Ce projet est déjà complet", "project_full", project_id=project_id)


def check_deletable(preference: PreferenceResponse) -> None:
    """Only preferences still PENDING may be deleted."""
    if preference.status != PreferenceStatus.PENDING:
        raise _reject(
            "Vous ne pouvez supprimer que les préférences en attente",
            "not_pending",
            preference_id=preference.id,
            status=preference.status.value,
        )


def sort_by_rank(preferences: Iterable[PreferenceResponse]) -> list[PreferenceResponse]:
    """First choice first."""
    return sorted(preferences, key=lambda p: (p.rank, p.id))


__all__ = [
    "check_new_preference",
    "check_project_selectable",
    "check_deletable",
    "sort_by_rank",
]
