from typing import Optional

from flask import current_app

from landing.domain.branding import BrandingProfile, EffectiveBranding, resolve, theme_tokens
from landing.models.account_branding import AccountBranding
from landing.models.system_branding import SystemBranding


def system_profile() -> BrandingProfile:
    """
    Lowest cascade layer.

    Built from the configured defaults, with the present fields of the
    `system_branding` row (if any) layered on top.
    """
    config = current_app.config
    fields = {
        "display_name": config["DEFAULT_SYSTEM_NAME"],
        "tagline": config["DEFAULT_TAGLINE"],
        "primary_color": config["SYSTEM_PRIMARY_COLOR"],
        "secondary_color": config["SYSTEM_SECONDARY_COLOR"],
        "accent_color": config["SYSTEM_ACCENT_COLOR"],
    }
    allow_customization = config["ALLOW_TENANT_CUSTOMIZATION"]

    row = SystemBranding.query.order_by(SystemBranding.created_at).first()
    if row is not None:
        fields.update(row.to_branding_profile("system").present_fields())
        allow_customization = allow_customization and row.allow_tenant_customization

    return BrandingProfile(
        origin="system",
        allow_tenant_customization=allow_customization,
        **fields,
    )


def custom_profile(tenant, account_id: Optional[str]) -> Optional[BrandingProfile]:
    if tenant is None or not account_id:
        return None

    row = AccountBranding.query.filter_by(
        tenant_id=tenant.id,
        account_id=account_id,
    ).first()

    if row is None:
        return None
    return row.to_branding_profile("custom")


def resolve_effective_branding(
    *,
    tenant=None,
    account_id: Optional[str] = None,
    system: Optional[BrandingProfile] = None,
) -> EffectiveBranding:
    system = system or system_profile()
    tenant_layer = tenant.branding_profile() if tenant is not None else None

    return resolve(
        system,
        tenant=tenant_layer,
        custom=custom_profile(tenant, account_id),
    )


def apply_branding(*, tenant=None, account_id: Optional[str] = None, sink=None) -> EffectiveBranding:
    """
    Resolve branding for the request and push its theme through `sink`.
    """
    system = system_profile()
    branding = resolve_effective_branding(tenant=tenant, account_id=account_id, system=system)

    if sink is not None:
        sink.apply(theme_tokens(branding, system))

    return branding
