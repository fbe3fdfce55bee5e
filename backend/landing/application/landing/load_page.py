from typing import Tuple

from flask import current_app

from landing.application.landing.store import get_store
from landing.domain.composition import RenderPlan, compose
from landing.domain.configuration import PageConfiguration
from landing.domain.loader import load
from landing.domain.templates import default_config, find_template


def load_page(tenant_key: str) -> PageConfiguration:
    """
    Stored configuration of a tenant, reconciled with its template.

    The template used for reconciliation is the one the document was
    built from; tenants that never saved get the first template.
    """
    stored = get_store().get(tenant_key)

    template_id = stored.get("template_id") if isinstance(stored, dict) else None
    template = find_template(template_id)

    return load(template.default_config, stored)


def render_page(tenant=None) -> Tuple[PageConfiguration, RenderPlan]:
    """
    Configuration and render plan for the public landing page.

    Without a tenant (platform domains, development hosts) the first
    template is rendered as-is.
    """
    if tenant is not None:
        config = load_page(tenant.id)
    else:
        config = default_config()

    plan = compose(config, local_fonts=current_app.config["LOCAL_FONTS"])
    return config, plan
