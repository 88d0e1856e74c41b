"""Record-to-document content transforms.

This module turns one dataset record into document text. Transforms are
pure functions selected by name so the materializer stays format-agnostic.
"""

from __future__ import annotations

from typing import Any, Mapping

import yaml

from core.constants import (
    PLACEHOLDER_DOCUMENT_CONTENT,
    RECORD_DESCRIPTION_FIELD,
    RECORD_NAME_FIELD,
)
from core.errors import ImporterConfigError
from core.types import DatasetRecord, RecordTransform

_FRONT_MATTER_FENCE = "---"


def placeholder_transform(record: DatasetRecord) -> str:
    """Return constant placeholder content regardless of record fields."""
    return PLACEHOLDER_DOCUMENT_CONTENT


def markdown_transform(record: DatasetRecord) -> str:
    """Render a record as Markdown with YAML front matter.

    Args:
        record: Record to render.

    Returns:
        Markdown document text ending with a newline.
    """
    sections: list[str] = []
    front_matter = _front_matter_fields(record.fields)
    if front_matter:
        rendered = yaml.safe_dump(
            front_matter,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
        sections.append(f"{_FRONT_MATTER_FENCE}\n{rendered}{_FRONT_MATTER_FENCE}")
    sections.append(f"# {record.name}")
    sections.extend(_description_paragraphs(record.fields.get(RECORD_DESCRIPTION_FIELD)))
    return "\n\n".join(sections) + "\n"


_TRANSFORMS: dict[str, RecordTransform] = {
    "markdown": markdown_transform,
    "placeholder": placeholder_transform,
}


def resolve_transform(transform_name: str) -> RecordTransform:
    """Look up a record transform by name.

    Args:
        transform_name: Registered transform name.

    Returns:
        Transform callable.

    Raises:
        ImporterConfigError: If the name is not registered.
    """
    transform = _TRANSFORMS.get(transform_name)
    if transform is None:
        raise ImporterConfigError(
            f"Unsupported transform '{transform_name}'. "
            f"Supported transforms: {', '.join(supported_transforms())}."
        )
    return transform


def supported_transforms() -> tuple[str, ...]:
    """Return registered transform names in sorted order."""
    return tuple(sorted(_TRANSFORMS))


def _front_matter_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: value
        for key, value in fields.items()
        if key not in (RECORD_NAME_FIELD, RECORD_DESCRIPTION_FIELD)
    }


def _description_paragraphs(description: Any) -> list[str]:
    """Normalize a ``desc`` field into Markdown paragraphs."""
    if description is None:
        return []
    if isinstance(description, str):
        return [description] if description.strip() else []
    if isinstance(description, list):
        return [str(line) for line in description if str(line).strip()]
    return [str(description)]
