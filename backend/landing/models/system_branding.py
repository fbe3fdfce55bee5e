from landing.extensions import db
from .base import BaseModel
from .branding_mixin import BrandingMixin


class SystemBranding(BaseModel, BrandingMixin):
    """
    Platform-wide branding overrides.

    At most one row is expected; its present fields are layered over
    the configured defaults when the system profile is built.
    """
    __tablename__ = "system_branding"

    allow_tenant_customization = db.Column(db.Boolean, nullable=False, default=True)
