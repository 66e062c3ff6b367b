from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Volunteer:
    """The acting user, as established by the external login flow."""

    volunteer_id: str
    name: str
    center_id: str
    center_name: str = ""
