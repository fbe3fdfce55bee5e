from landing.extensions import db
from .base import BaseModel
from .tenant_mixin import TenantMixin
from .branding_mixin import BrandingMixin


class AccountBranding(BaseModel, TenantMixin, BrandingMixin):
    """Custom branding chosen by an authenticated account."""
    __tablename__ = "account_branding"

    account_id = db.Column(db.String(36), nullable=False, index=True)

    __table_args__ = (
        db.UniqueConstraint("tenant_id", "account_id", name="uq_account_branding_per_tenant"),
    )
