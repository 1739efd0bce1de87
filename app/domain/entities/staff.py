from dataclasses import dataclass


@dataclass(frozen=True)
class StaffMember:
    id: str | None
    name: str
