from flask import current_app

from landing.application.landing.store import get_store
from landing.domain.configuration import PageConfiguration
from landing.domain.loader import load, save
from landing.domain.templates import find_template


def save_page(*, tenant_key: str, config: PageConfiguration) -> PageConfiguration:
    """
    Validate, stamp and persist a configuration.

    Returns the configuration as it reads back from the store.
    """
    document = save(config)
    stored = get_store().put(tenant_key, document)

    current_app.logger.info(
        "Saved landing page for tenant %s (template %s, %d sections)",
        tenant_key,
        document["template_id"],
        len(document["sections"]),
    )

    return load(find_template(document["template_id"]).default_config, stored)
