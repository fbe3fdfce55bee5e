"""
Builder operations.

Each operation loads the tenant's current configuration, applies one
pure edit and persists the result immediately.
"""
from typing import Any, Callable, Dict, Mapping, Optional

from landing.domain import composition
from landing.domain.configuration import PageConfiguration
from landing.domain.loader import load
from landing.domain.templates import apply_template as template_configuration
from landing.domain.templates import find_template, get_template

from .load_page import load_page
from .save_page import save_page

# Editable section fields and the edit that applies each one
SECTION_EDITS: Dict[str, Callable[[PageConfiguration, str, Any], PageConfiguration]] = {
    "enabled": composition.set_enabled,
    "variant": composition.set_variant,
    "settings": composition.update_settings,
    "title": composition.set_title,
}


def _edit(tenant_key: str, edit: Callable[[PageConfiguration], PageConfiguration]) -> PageConfiguration:
    config = load_page(tenant_key)
    return save_page(tenant_key=tenant_key, config=edit(config))


def replace_configuration(*, tenant_key: str, document: Mapping[str, Any]) -> PageConfiguration:
    """Save a full document sent by the builder, reconciled first."""
    template = find_template(document.get("template_id"))
    return save_page(tenant_key=tenant_key, config=load(template.default_config, document))


def apply_template(*, tenant_key: str, template_id: str) -> PageConfiguration:
    # Builder requests must name an existing template
    get_template(template_id)
    return save_page(tenant_key=tenant_key, config=template_configuration(template_id))


def reorder_sections(
    *,
    tenant_key: str,
    from_id: str,
    to_id: str,
    position: Optional[str] = None,
) -> PageConfiguration:
    return _edit(
        tenant_key,
        lambda config: composition.reorder(config, from_id, to_id, position),
    )


def patch_section(*, tenant_key: str, section_id: str, data: Mapping[str, Any]) -> PageConfiguration:
    def edit(config):
        for field, apply_edit in SECTION_EDITS.items():
            if field in data:
                config = apply_edit(config, section_id, data[field])
        return config

    return _edit(tenant_key, edit)


def patch_global_styles(*, tenant_key: str, data: Mapping[str, Any]) -> PageConfiguration:
    return _edit(tenant_key, lambda config: composition.update_global_styles(config, data))


def patch_seo(*, tenant_key: str, data: Mapping[str, Any]) -> PageConfiguration:
    return _edit(tenant_key, lambda config: composition.update_seo(config, data))


def patch_footer(*, tenant_key: str, data: Mapping[str, Any]) -> PageConfiguration:
    return _edit(tenant_key, lambda config: composition.update_footer(config, data))
