"""Domain models for family members in the unified diet view."""

from dataclasses import dataclass
from enum import Enum


class InclusionState(Enum):
    """Whether a member participates in the unified diet view."""

    INCLUDED = "included"
    EXCLUDED_EXPLICITLY = "excluded_explicitly"


@dataclass(frozen=True)
class FamilyMemberTab:
    """Member tab as built from the roster for one request."""

    id: str
    name: str
    role: str = "member"
    include_in_unified: bool | None = None
