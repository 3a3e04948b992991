# services/site_settings/schemas/settings.py
"""
Known site settings and who may read them.

Every key the store accepts is listed in ``SETTING_KINDS`` with the Python
type its value must have. ``PUBLIC_KEYS`` is the allow-list served to
anonymous visitors and students; everything else is admin-only.
"""
from typing import Any, Dict, Tuple

from pydantic import BaseModel

SETTING_KINDS = {
    # branding
    "academyName": str,
    "tagline": str,
    "aboutDescription": str,
    # contact
    "whatsappNumber": str,
    "portalUrl": str,
    "email": str,
    "phone": str,
    "address": str,
    "mapsUrl": str,
    # social
    "facebookUrl": str,
    "instagramUrl": str,
    "youtubeUrl": str,
    "linkedinUrl": str,
    # announcement banner
    "announcementEnabled": bool,
    "announcementText": str,
    "announcementCta": str,
    "announcementLink": str,
    # admin only
    "yearsOfExcellence": str,
    "studentsTaught": str,
    "successRate": str,
    "adminNotificationEmail": str,
    "maintenanceMode": bool,
}

PUBLIC_KEYS = frozenset({
    "academyName", "tagline", "aboutDescription",
    "whatsappNumber", "portalUrl", "email", "phone", "address", "mapsUrl",
    "facebookUrl", "instagramUrl", "youtubeUrl", "linkedinUrl",
    "announcementEnabled", "announcementText", "announcementCta", "announcementLink",
})

KIND_NAMES = {str: "a string", bool: "a boolean"}

# Admin forms post every value as text
BOOL_STRINGS = {"true": True, "false": False}


def validate_settings(values: Dict[str, Any]) -> Tuple[Dict[str, Any], list]:
    """
    Check ``values`` against the known keys.

    Returns the cleaned values and a list of problems; the list is empty when
    every value is valid. The strings "true" and "false" are accepted for
    boolean keys and stored as booleans.
    """
    cleaned, problems = {}, []
    for key, value in values.items():
        kind = SETTING_KINDS.get(key)
        if kind is None:
            problems.append(f"Unknown setting: {key}")
            continue
        if kind is bool and isinstance(value, str) and value.strip().lower() in BOOL_STRINGS:
            value = BOOL_STRINGS[value.strip().lower()]
        # bool is an int subclass, so compare the exact type
        if type(value) is not kind:
            problems.append(f"Setting {key} must be {KIND_NAMES[kind]}")
            continue
        cleaned[key] = value
    return cleaned, problems


def visible_settings(values: Dict[str, Any], admin: bool) -> Dict[str, Any]:
    if admin:
        return dict(values)
    return {key: value for key, value in values.items() if key in PUBLIC_KEYS}


class SettingsOut(BaseModel):
    settings: Dict[str, Any]
