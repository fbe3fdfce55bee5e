# Public landing page endpoints. The tenant comes from the request host.
from flask import Response, current_app, g, jsonify, request
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from landing.application.branding.resolve_branding import apply_branding
from landing.application.branding.theme_sink import RequestThemeSink, render_stylesheet
from landing.application.landing.load_page import render_page
from landing.domain.registry import list_descriptors
from landing.domain.templates import get_template, list_templates
from landing.normalizers.branding import normalize_branding, normalize_theme
from landing.normalizers.catalog import normalize_descriptor, normalize_template
from landing.normalizers.page import normalize_render_plan
from landing.utils.decorators import feature_enabled
from . import v1_bp

LOGO_MODES = ("light", "dark")


def _current_account_id():
    # Anonymous visitors are fine; a valid token adds the custom layer
    try:
        if verify_jwt_in_request(optional=True):
            return get_jwt_identity()
    except (JWTExtendedException, PyJWTError) as exc:
        current_app.logger.info("Ignoring unusable token on public route: %s", exc)
    return None


def _request_branding():
    sink = RequestThemeSink()
    branding = apply_branding(
        tenant=g.current_tenant,
        account_id=_current_account_id(),
        sink=sink,
    )
    return branding, sink.current()


def _normalize_tenant(tenant):
    if tenant is None:
        return None
    return {"id": tenant.id, "name": tenant.name, "slug": tenant.slug}


@v1_bp.route("/landing", methods=["GET"])
@feature_enabled("landing_page")
def get_landing():
    config, plan = render_page(g.current_tenant)
    branding, theme = _request_branding()

    mode = request.args.get("mode", "light")
    if mode not in LOGO_MODES:
        mode = "light"

    return jsonify({
        "tenant": _normalize_tenant(g.current_tenant),
        "template_id": config.template_id,
        **normalize_render_plan(plan),
        "branding": normalize_branding(branding, mode),
        "theme": normalize_theme(theme),
        "seo": config.seo.model_dump(mode="json"),
        "footer": config.footer.model_dump(mode="json"),
    })


@v1_bp.route("/branding", methods=["GET"])
def get_branding():
    mode = request.args.get("mode", "light")
    if mode not in LOGO_MODES:
        return jsonify({"error": "mode must be 'light' or 'dark'"}), 400

    branding, theme = _request_branding()
    return jsonify({
        **normalize_branding(branding, mode),
        "theme": normalize_theme(theme),
    })


@v1_bp.route("/theme.css", methods=["GET"])
def get_theme_stylesheet():
    _, theme = _request_branding()
    return Response(render_stylesheet(theme), mimetype="text/css")


@v1_bp.route("/templates", methods=["GET"])
def get_templates():
    return jsonify([normalize_template(t) for t in list_templates()])


@v1_bp.route("/templates/<template_id>", methods=["GET"])
def get_template_detail(template_id):
    return jsonify(normalize_template(get_template(template_id), include_config=True))


@v1_bp.route("/sections/registry", methods=["GET"])
def get_section_registry():
    return jsonify([normalize_descriptor(d) for d in list_descriptors()])
