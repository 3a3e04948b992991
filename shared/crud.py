# shared/crud.py
from shared.errors import ValidationError


def require_text(value, field: str = "Name") -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationError(f"{field} is required")
    return value


def apply_changes(row, changes: dict):
    # None means "leave as is" for partial updates
    for field, value in changes.items():
        if value is not None:
            setattr(row, field, value)
