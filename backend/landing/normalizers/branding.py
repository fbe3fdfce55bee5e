from landing.domain.branding import BRANDING_FIELDS, select_icon, select_logo


def normalize_branding(branding, mode="light"):
    data = {name: getattr(branding, name) for name in BRANDING_FIELDS}
    data.update({
        "logo": select_logo(branding, mode),
        "icon": select_icon(branding),
        "mode": mode,
        "field_origins": dict(branding.field_origins),
        "allow_tenant_customization": branding.allow_tenant_customization,
    })
    return data


def normalize_theme(tokens):
    return {
        "css_variables": dict(tokens.css_variables),
        "favicon_url": tokens.favicon_url,
        "title": tokens.title,
    }
