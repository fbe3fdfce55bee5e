from datetime import timedelta

from flask_jwt_extended import create_access_token

from landing.models.account_branding import AccountBranding
from landing.models.system_branding import SystemBranding


def test_health(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_landing_without_tenant_renders_first_template(client):
    response = client.get("/api/v1/landing")

    assert response.status_code == 200
    data = response.get_json()
    assert data["tenant"] is None
    assert data["template_id"] == "modern-minimalist"
    assert [s["section_id"] for s in data["sections"]] == [
        "hero", "services", "team", "gallery", "reviews", "location", "cta",
    ]
    assert data["warnings"] == []
    assert data["css_variables"]["--landing-radius"] == "1rem"
    assert data["branding"]["display_name"] == "BarberSmart"
    assert data["footer"]["powered_by_text"] == "Barber Smart"


def test_landing_for_tenant_applies_white_label_branding(client, tenant, tenant_host):
    response = client.get("/api/v1/landing", base_url=tenant_host)

    assert response.status_code == 200
    data = response.get_json()
    assert data["tenant"]["slug"] == "classic-cuts"
    assert data["branding"]["display_name"] == "Classic Cuts"
    assert data["branding"]["field_origins"]["primary_color"] == "tenant"
    assert data["theme"]["css_variables"]["--primary"] == "0 100% 50%"
    assert data["theme"]["title"] == "Classic Cuts"


def test_landing_reports_renderers_and_data_feeds(client):
    data = client.get("/api/v1/landing").get_json()

    feeds = {s["section_type"]: s["renderer"]["data_feed"] for s in data["sections"]}
    assert feeds["team"] == "staff"
    assert feeds["location"] == "business_hours"
    assert feeds["hero"] is None


def test_landing_disabled_for_tenant(client, db, tenant, tenant_host):
    tenant.enable_landing_page = False
    db.session.commit()

    response = client.get("/api/v1/landing", base_url=tenant_host)

    assert response.status_code == 403


def test_unknown_host_serves_defaults(client):
    response = client.get("/api/v1/landing", base_url="http://nobody.barbersmart.app")

    assert response.status_code == 200
    assert response.get_json()["tenant"] is None


def test_invalid_tenant_header(client):
    response = client.get("/api/v1/landing", headers={"X-Tenant-ID": "missing"})

    assert response.status_code == 404


def test_branding_logo_mode(client, db, tenant, tenant_host):
    tenant.logo_url = "/logo.svg"
    tenant.logo_dark_url = "/logo-dark.svg"
    db.session.commit()

    light = client.get("/api/v1/branding?mode=light", base_url=tenant_host).get_json()
    dark = client.get("/api/v1/branding?mode=dark", base_url=tenant_host).get_json()

    assert light["logo"] == "/logo.svg"
    assert dark["logo"] == "/logo-dark.svg"
    assert light["icon"] == "/logo.svg"


def test_branding_rejects_unknown_mode(client):
    assert client.get("/api/v1/branding?mode=sepia").status_code == 400


def test_system_branding_row_overrides_config_defaults(client, db):
    row = SystemBranding(display_name="Barber Cloud", primary_color="#000000")
    db.session.add(row)
    db.session.commit()

    data = client.get("/api/v1/branding").get_json()

    assert data["display_name"] == "Barber Cloud"
    assert data["tagline"] == "Smart management for barbershops"
    assert data["theme"]["css_variables"]["--primary"] == "0 0% 0%"


def test_custom_branding_for_signed_in_account(client, db, tenant, tenant_host, make_token):
    custom = AccountBranding(
        tenant_id=tenant.id,
        account_id="account-1",
        primary_color="#0000ff",
        secondary_color="#00ff00",
    )
    db.session.add(custom)
    db.session.commit()
    headers = {"Authorization": f"Bearer {make_token(tenant.id, role='staff')}"}

    data = client.get("/api/v1/branding", base_url=tenant_host, headers=headers).get_json()

    # Tenant white-label still outranks the account's choice
    assert data["primary_color"] == "#ff0000"
    assert data["secondary_color"] == "#00ff00"
    assert data["field_origins"]["secondary_color"] == "custom"


def test_custom_branding_ignored_when_customization_disallowed(client, db, tenant, tenant_host, make_token):
    db.session.add(SystemBranding(allow_tenant_customization=False))
    db.session.add(AccountBranding(tenant_id=tenant.id, account_id="account-1", tagline="Mine"))
    db.session.commit()
    headers = {"Authorization": f"Bearer {make_token(tenant.id)}"}

    data = client.get("/api/v1/branding", base_url=tenant_host, headers=headers).get_json()

    assert data["tagline"] == "Smart management for barbershops"


def test_theme_stylesheet(client, tenant, tenant_host):
    response = client.get("/api/v1/theme.css", base_url=tenant_host)

    assert response.status_code == 200
    assert response.mimetype == "text/css"
    assert "--primary: 0 100% 50%;" in response.get_data(as_text=True)


def test_templates_catalog(client):
    data = client.get("/api/v1/templates").get_json()

    assert [t["id"] for t in data][0] == "modern-minimalist"
    assert "default_config" not in data[0]


def test_template_detail(client):
    response = client.get("/api/v1/templates/vintage-classic")

    assert response.status_code == 200
    assert response.get_json()["default_config"]["global_styles"]["border_radius"] == "none"


def test_template_detail_unknown(client):
    response = client.get("/api/v1/templates/art-deco")

    assert response.status_code == 404
    assert response.get_json()["error"] == "TemplateNotFound"


def test_section_registry(client):
    data = client.get("/api/v1/sections/registry").get_json()

    services = next(d for d in data if d["type"] == "services")
    assert [v["name"] for v in services["variants"]][0] == "default"
    assert "columns" in services["settings_schema"]["properties"]


def test_forwarded_host_only_when_trusted(app, client, tenant):
    headers = {"X-Forwarded-Host": "classic.barbersmart.app"}

    assert client.get("/api/v1/landing", headers=headers).get_json()["tenant"] is None

    app.config["TRUST_PROXY_HEADERS"] = True
    data = client.get("/api/v1/landing", headers=headers).get_json()
    assert data["tenant"]["slug"] == "classic-cuts"


def test_expired_token_on_public_route_is_ignored(client, db, tenant, tenant_host):
    db.session.add(AccountBranding(tenant_id=tenant.id, account_id="account-1", tagline="Mine"))
    db.session.commit()
    token = create_access_token(
        identity="account-1",
        additional_claims={"tenant_id": tenant.id, "role": "admin"},
        expires_delta=timedelta(seconds=-10),
    )
    headers = {"Authorization": f"Bearer {token}"}

    landing = client.get("/api/v1/landing", base_url=tenant_host, headers=headers)
    branding = client.get("/api/v1/branding", base_url=tenant_host, headers=headers)

    assert landing.status_code == 200
    assert branding.status_code == 200
    assert branding.get_json()["tagline"] == "Smart management for barbershops"
    assert landing.get_json()["branding"]["display_name"] == "Classic Cuts"


def test_malformed_token_on_public_route_is_ignored(client):
    response = client.get(
        "/api/v1/theme.css",
        headers={"Authorization": "Bearer not-a-jwt"},
    )

    assert response.status_code == 200
