from flask import request, g, jsonify, current_app
from sqlalchemy import or_
from landing.models.tenant import Tenant
from landing.utils.domains import extract_domain_to_check


def request_hostname():
    if current_app.config.get("TRUST_PROXY_HEADERS"):
        forwarded = request.headers.get("X-Forwarded-Host")
        if forwarded:
            return forwarded
    return request.host


def resolve_tenant(hostname):
    """
    Look up the tenant served on `hostname`.

    Returns (tenant, domain_checked); tenant is None for the platform's
    own domains and for unknown hosts.
    """
    domain = extract_domain_to_check(
        hostname,
        main_domains=current_app.config["MAIN_DOMAINS"],
        ignored_domains=current_app.config["IGNORED_DOMAINS"],
    )
    if domain is None:
        return None, None

    tenant = Tenant.query.filter(
        Tenant.is_active.is_(True),
        or_(Tenant.subdomain == domain, Tenant.custom_domain == domain),
    ).first()

    return tenant, domain


def tenant_middleware(app):
    @app.before_request
    def load_tenant():
        g.current_tenant = None
        g.detected_domain = None

        # Explicit tenant header (internal tools, previews)
        tenant_id = request.headers.get("X-Tenant-ID")
        if tenant_id:
            tenant = Tenant.query.filter_by(id=tenant_id, is_active=True).first()
            if not tenant:
                return jsonify({"error": "Invalid tenant"}), 404
            g.current_tenant = tenant
            return None

        tenant, domain = resolve_tenant(request_hostname())
        g.detected_domain = domain

        if tenant is None and domain is not None:
            current_app.logger.info("No tenant matches domain %r, serving defaults", domain)

        # Attach tenant to global context (None means default deployment)
        g.current_tenant = tenant
        return None
