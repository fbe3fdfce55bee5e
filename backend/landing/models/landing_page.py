from landing.extensions import db
from .base import BaseModel
from .tenant_mixin import TenantMixin


class LandingPage(BaseModel, TenantMixin):
    __tablename__ = "landing_pages"

    # Opaque configuration document; reconciled against templates on load
    config = db.Column(db.JSON, nullable=True)

    __table_args__ = (
        db.UniqueConstraint("tenant_id", name="uq_landing_page_per_tenant"),
    )
