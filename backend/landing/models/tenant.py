from landing.extensions import db
from .base import BaseModel
from .branding_mixin import BrandingMixin

class Tenant(BaseModel, BrandingMixin):
    __tablename__ = "tenants"

    # Basic info
    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    is_active = db.Column(db.Boolean, default=True)

    # Domain routing: <subdomain>.<main domain> or a custom hostname
    subdomain = db.Column(db.String(63), unique=True, nullable=True, index=True)
    custom_domain = db.Column(db.String(255), unique=True, nullable=True, index=True)

    # Domain-bound branding only applies to white-label tenants
    has_white_label = db.Column(db.Boolean, default=False)

    # Feature toggles
    enable_landing_page = db.Column(db.Boolean, default=True)

    # JSON field for future toggles (flexible)
    features = db.Column(db.JSON, default=dict)

    def has_feature(self, feature_name: str) -> bool:
        """
        Check if a feature is enabled for this tenant.
        """
        # Check JSON overrides first
        if (self.features or {}).get(feature_name) is not None:
            return bool(self.features.get(feature_name))

        # Fallback to attribute toggles
        attr_name = f"enable_{feature_name}"
        return bool(getattr(self, attr_name, False))

    def branding_profile(self):
        """Tenant layer of the branding cascade, or None."""
        if not self.has_white_label:
            return None
        return self.to_branding_profile("tenant")
