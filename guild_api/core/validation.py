from typing import Any, Optional

from guild_api.core.constants import CLASS_TAGS, REGIONS, ROLES, TIME_SLOTS
from guild_api.core.errors import ValidationError


def validate_class_pair(value: Any, label: str = "Primary class") -> None:
    """A class pair is exactly two tags from CLASS_TAGS."""
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValidationError(f"{label} must be an array of exactly 2 classes")
    if not all(cls in CLASS_TAGS for cls in value):
        raise ValidationError(f"Invalid {label.lower()}")


def validate_role(value: Any, label: str = "Primary role") -> None:
    if value not in ROLES:
        raise ValidationError(f"{label} must be 'dps', 'healer', or 'tank'")


def validate_region(value: Any) -> None:
    if value not in REGIONS:
        raise ValidationError("Region must be 'vn' or 'na'")


def validate_time_slots(value: Any) -> None:
    if not isinstance(value, (list, tuple)) or len(value) == 0:
        raise ValidationError("At least one time slot must be selected")
    if not all(slot in TIME_SLOTS for slot in value):
        raise ValidationError("Selected time slot is invalid")


def validate_profile(
    primary_class: Optional[Any] = None,
    secondary_class: Optional[Any] = None,
    primary_role: Optional[Any] = None,
    secondary_role: Optional[Any] = None,
) -> None:
    """Validate whichever class/role fields are present; None means absent."""
    if primary_class is not None:
        validate_class_pair(primary_class, "Primary class")
    if secondary_class is not None:
        validate_class_pair(secondary_class, "Secondary class")
    if primary_role is not None:
        validate_role(primary_role, "Primary role")
    if secondary_role is not None:
        validate_role(secondary_role, "Secondary role")
