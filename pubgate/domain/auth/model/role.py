"""Role hierarchy for authorization."""

from enum import IntEnum


class Role(IntEnum):
    """Hierarchical platform roles with numeric ordering.

    Higher values inherit all permissions of lower values.
    Gaps allow future role insertion without renumbering.
    """

    PUBLIC = 0
    ORGANIZER = 10
    REVIEWER = 20
    ADMIN = 30
