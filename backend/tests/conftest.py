import pytest
from flask_jwt_extended import create_access_token

from landing import create_app
from landing.extensions import db as _db
from landing.models.tenant import Tenant

TENANT_HOST = "http://classic.barbersmart.app"


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def tenant_host():
    return TENANT_HOST


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def tenant(db):
    tenant = Tenant(
        name="Classic Cuts",
        slug="classic-cuts",
        subdomain="classic",
        has_white_label=True,
        display_name="Classic Cuts",
        primary_color="#ff0000",
    )
    db.session.add(tenant)
    db.session.commit()
    return tenant


@pytest.fixture
def make_token(app):
    def _make(tenant_id, role="admin", account_id="account-1"):
        return create_access_token(
            identity=account_id,
            additional_claims={"tenant_id": tenant_id, "role": role},
        )
    return _make


@pytest.fixture
def admin_headers(tenant, make_token):
    return {"Authorization": f"Bearer {make_token(tenant.id)}"}
