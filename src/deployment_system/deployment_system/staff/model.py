from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StaffMember:
    """Domain entity: a member of the restaurant crew."""

    staff_id: int
    name: str
    is_under_18: bool = False
    is_active: bool = True
