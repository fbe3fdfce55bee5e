"""
Reconcile stored configuration documents with template defaults.

Stored documents are partial and may predate the current schema. The
merge below fills every field an older document lacks with the
current default, and never fails.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel

from landing.utils.merge import deep_merge
from landing.utils.validation import coerce_model

from .configuration import PageConfiguration, parse_sections
from .invariants.page import assert_configuration
from .settings import FooterSettings, SEOConfig
from .theme import GlobalStyleTokens

StoredDocument = Union[Mapping[str, Any], PageConfiguration]

# Object-valued fields merged key-by-key against the template
NESTED_FIELDS = (
    ("global_styles", GlobalStyleTokens),
    ("seo", SEOConfig),
    ("footer", FooterSettings),
)


def _as_mapping(stored: StoredDocument) -> Mapping[str, Any]:
    if isinstance(stored, BaseModel):
        return stored.model_dump(mode="json")
    if isinstance(stored, Mapping):
        return stored
    return {}


def load(
    template_default: PageConfiguration,
    stored: Optional[StoredDocument],
) -> PageConfiguration:
    """
    Merge a stored (partial) document over the template default.

    - No stored document: a deep copy of the template default.
    - template_id: stored value when it is a non-empty string.
    - global_styles / seo / footer: deep merge, stored values win per
      nested field, defaults fill the rest.
    - sections: a non-empty stored list is authoritative as-is,
      otherwise the template sections are used.
    """
    if stored is None:
        return template_default.model_copy(deep=True)

    data = _as_mapping(stored)
    defaults = template_default.model_dump(mode="json")

    template_id = data.get("template_id")
    if not isinstance(template_id, str) or not template_id:
        template_id = template_default.template_id

    merged: Dict[str, Any] = {"template_id": template_id}

    for field, model_cls in NESTED_FIELDS:
        stored_value = data.get(field)
        if not isinstance(stored_value, Mapping):
            stored_value = None
        merged[field] = coerce_model(
            model_cls,
            deep_merge(defaults[field], stored_value),
            label=field,
            fallback=defaults[field],
        )

    stored_sections = parse_sections(data.get("sections"))
    if stored_sections:
        merged["sections"] = stored_sections
    else:
        merged["sections"] = [
            section.model_copy(deep=True) for section in template_default.sections
        ]

    updated_at = data.get("updated_at")
    if isinstance(updated_at, (str, datetime)):
        merged["updated_at"] = updated_at
    else:
        merged["updated_at"] = template_default.updated_at

    return coerce_model(PageConfiguration, merged, fallback={"updated_at": None})


def save(
    config: PageConfiguration,
    *,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Produce the document handed to the persistent store.

    Invariants are checked first; the result carries a fresh
    `updated_at` timestamp.
    """
    assert_configuration(config)
    stamped = config.model_copy(
        deep=True,
        update={"updated_at": now or datetime.now(timezone.utc)},
    )
    return stamped.to_document()
