from landing.extensions import db
from landing.domain.branding import BRANDING_FIELDS, BrandingProfile


class BrandingMixin:
    """Visual identity columns shared by every branding origin."""

    display_name = db.Column(db.String(255), nullable=True)
    tagline = db.Column(db.String(255), nullable=True)
    logo_url = db.Column(db.String(512), nullable=True)
    logo_light_url = db.Column(db.String(512), nullable=True)
    logo_dark_url = db.Column(db.String(512), nullable=True)
    logo_icon_url = db.Column(db.String(512), nullable=True)
    favicon_url = db.Column(db.String(512), nullable=True)

    # Hex (#rrggbb) or HSL triple
    primary_color = db.Column(db.String(32), nullable=True)
    secondary_color = db.Column(db.String(32), nullable=True)
    accent_color = db.Column(db.String(32), nullable=True)

    def branding_fields(self):
        return {name: getattr(self, name) for name in BRANDING_FIELDS}

    def to_branding_profile(self, origin, **extra):
        return BrandingProfile(origin=origin, **self.branding_fields(), **extra)
