"""Resolution of family members included in the unified diet view."""

from collections.abc import Sequence

from family_diet.domain.family import FamilyMemberTab, InclusionState


def inclusion_state(flag: bool | None) -> InclusionState:
    """Resolve the tri-state inclusion flag; only an explicit False excludes."""
    if flag is False:
        return InclusionState.EXCLUDED_EXPLICITLY
    return InclusionState.INCLUDED


def derive_included_member_ids(
    member_tabs: Sequence[FamilyMemberTab] | None,
    included_member_ids: Sequence[str] | None = None,
) -> list[str]:
    """Return ids of members participating in the unified view.

    A non-empty server-computed id list wins as-is. An empty list counts as
    "not provided", so the tab defaults apply instead of excluding everyone.
    """
    if included_member_ids:
        return list(included_member_ids)
    if not isinstance(member_tabs, list | tuple):
        return []
    return [
        tab.id
        for tab in member_tabs
        if inclusion_state(tab.include_in_unified) is InclusionState.INCLUDED
    ]
