"""Feature property helpers: identifiers, display names and slugs."""

import re
from typing import Any

# Property keys checked, in order, for a stable district identifier
IDENTIFIER_KEYS = ("shapeID", "SHAPEID", "id", "shapeName")

# Property keys checked, in order, for a state display name
NAME_KEYS = ("name", "NAME", "state")

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def _first_present(properties: Any, keys: tuple[str, ...]) -> str | None:
    if not isinstance(properties, dict):
        return None
    for key in keys:
        value = properties.get(key)
        if value is not None and str(value) != "":
            return str(value)
    return None


def feature_identifier(feature: dict[str, Any]) -> str | None:
    """Return the first non-empty identifier property of a feature, or None."""
    if not isinstance(feature, dict):
        return None
    return _first_present(feature.get("properties"), IDENTIFIER_KEYS)


def feature_name(feature: dict[str, Any], default: str = "unknown") -> str:
    """Return the display name of a state feature."""
    if not isinstance(feature, dict):
        return default
    return _first_present(feature.get("properties"), NAME_KEYS) or default


def slugify(name: str) -> str:
    """Lowercase, hyphenated, filesystem-safe identifier for a name.

    >>> slugify("Andaman & Nicobar Islands")
    'andaman-nicobar-islands'
    """
    return _NON_SLUG.sub("-", name.lower()).strip("-")
