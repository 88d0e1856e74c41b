"""Static catalog of importable SRD categories.

This module maps each category name to the URL of its remote dataset.
The mapping is built once at import time and never mutated.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from core.constants import SRD_DATABASE_BASE_URL
from core.errors import UnknownCategoryError

_SRD_CATEGORIES = (
    "Ability-Scores",
    "Alignments",
    "Backgrounds",
    "Classes",
    "Conditions",
    "Damage-Types",
    "Equipment-Categories",
    "Equipment",
    "Feats",
    "Languages",
    "Levels",
    "Magic-Items",
    "Magic-Schools",
    "Monsters",
    "Proficiencies",
    "Races",
    "Rule-Sections",
    "Rules",
    "Skills",
    "Spells",
    "Subclasses",
    "Subraces",
    "Traits",
    "Weapon-Properties",
)

CATALOG: Mapping[str, str] = MappingProxyType(
    {category: f"{SRD_DATABASE_BASE_URL}/5e-SRD-{category}.json" for category in _SRD_CATEGORIES}
)


def resolve_locator(category: str) -> str:
    """Resolve the dataset URL for a category.

    Args:
        category: Category name, matched exactly.

    Returns:
        Source locator URL.

    Raises:
        UnknownCategoryError: If the category is not in the catalog.
    """
    try:
        return CATALOG[category]
    except KeyError as error:
        raise UnknownCategoryError(category) from error


def list_categories() -> tuple[str, ...]:
    """Return all known category names in sorted order."""
    return tuple(sorted(CATALOG))
