"""
Shared Enumerations.

Every member's value is its own name, so a member serializes to its
symbolic name on the wire. Renaming or removing a member is a breaking
change for API clients.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import TypeVar

from bestchoice.exceptions import InvalidEnumValueError

E = TypeVar("E", bound=Enum)


def parse_enum(enum_cls: type[E], name: object) -> E:
    """
    Resolve a member of ``enum_cls`` from its symbolic name.

    Lookup is exact and case-sensitive. There is no fallback member.

    Raises:
        InvalidEnumValueError: If ``name`` is not a member name.
    """
    if isinstance(name, enum_cls):
        return name
    if isinstance(name, str) and name in enum_cls.__members__:
        return enum_cls.__members__[name]
    raise InvalidEnumValueError(enum_cls.__name__, name, list(enum_cls.__members__))


class NamedEnum(str, Enum):
    """Base for enumerations exchanged by name."""

    @classmethod
    def from_name(cls, name: object):
        return parse_enum(cls, name)

    @classmethod
    def names(cls) -> list[str]:
        return list(cls.__members__)


class Role(NamedEnum):
    """User role, one per profile of the application."""
    ETUDIANT = "ETUDIANT"
    ENSEIGNANT = "ENSEIGNANT"
    ADMIN = "ADMIN"


class WorkType(NamedEnum):
    """Kind of work a project involves."""
    DEVELOPPEMENT = "DEVELOPPEMENT"
    RECHERCHE = "RECHERCHE"
    ANALYSE = "ANALYSE"
    VEILLE = "VEILLE"
    CONCEPTION = "CONCEPTION"
    DOCUMENTATION = "DOCUMENTATION"
    TEST = "TEST"
    MIXTE = "MIXTE"

    @property
    def description(self) -> str:
        return WORK_TYPE_DESCRIPTIONS[self]


class PreferenceStatus(NamedEnum):
    """Lifecycle state of a student preference. New preferences are PENDING."""
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"

    @property
    def description(self) -> str:
        return PREFERENCE_STATUS_DESCRIPTIONS[self]


WORK_TYPE_DESCRIPTIONS: Mapping[WorkType, str] = MappingProxyType({
    WorkType.DEVELOPPEMENT: "Développement logiciel",
    WorkType.RECHERCHE: "Recherche théorique",
    WorkType.ANALYSE: "Analyse de données",
    WorkType.VEILLE: "Veille technologique",
    WorkType.CONCEPTION: "Conception et modélisation",
    WorkType.DOCUMENTATION: "Documentation technique",
    WorkType.TEST: "Tests et qualité logicielle",
    WorkType.MIXTE: "Travail mixte",
})

PREFERENCE_STATUS_DESCRIPTIONS: Mapping[PreferenceStatus, str] = MappingProxyType({
    PreferenceStatus.PENDING: "En attente de traitement",
    PreferenceStatus.ACCEPTED: "Préférence acceptée",
    PreferenceStatus.REJECTED: "Préférence refusée",
    PreferenceStatus.CANCELLED: "Annulée par l'étudiant",
})


__all__ = [
    "parse_enum",
    "NamedEnum",
    "Role",
    "WorkType",
    "PreferenceStatus",
    "WORK_TYPE_DESCRIPTIONS",
    "PREFERENCE_STATUS_DESCRIPTIONS",
]
