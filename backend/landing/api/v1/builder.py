# Landing page builder endpoints (tenant admins only)
from flask import g, jsonify, request
from flask_jwt_extended import jwt_required
from werkzeug.http import http_date

from landing.application.landing import edit_page
from landing.application.landing.load_page import load_page
from landing.application.landing.store import get_store
from landing.normalizers.page import normalize_configuration
from landing.utils.decorators import feature_enabled, roles_required, tenant_required
from landing.utils.optimistic_lock import enforce_optimistic_lock, normalize_ts
from . import v1_bp

REORDER_POSITIONS = (None, "before", "after")


def _config_response(config):
    response = jsonify(normalize_configuration(config))

    last_modified = get_store().last_modified(g.current_tenant.id)
    if last_modified is not None:
        response.headers["Last-Modified"] = http_date(normalize_ts(last_modified))
    return response


def _lock():
    enforce_optimistic_lock(get_store().last_modified(g.current_tenant.id))


def _json_object():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


@v1_bp.route("/builder/config", methods=["GET"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("landing_page")
def get_config():
    return _config_response(load_page(g.current_tenant.id))


@v1_bp.route("/builder/config", methods=["PUT"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("landing_page")
def put_config():
    _lock()
    data = _json_object()
    if data is None:
        return jsonify({"error": "Configuration document must be a JSON object"}), 400

    config = edit_page.replace_configuration(tenant_key=g.current_tenant.id, document=data)
    return _config_response(config)


@v1_bp.route("/builder/template", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("landing_page")
def post_template():
    _lock()
    data = _json_object() or {}
    template_id = data.get("template_id")
    if not template_id:
        return jsonify({"error": "template_id is required"}), 400

    config = edit_page.apply_template(tenant_key=g.current_tenant.id, template_id=template_id)
    return _config_response(config)


@v1_bp.route("/builder/sections/reorder", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("landing_page")
def post_reorder():
    _lock()
    data = _json_object() or {}
    if not data.get("from_id") or not data.get("to_id"):
        return jsonify({"error": "from_id and to_id are required"}), 400

    position = data.get("position")
    if position not in REORDER_POSITIONS:
        return jsonify({"error": "position must be 'before' or 'after'"}), 400

    config = edit_page.reorder_sections(
        tenant_key=g.current_tenant.id,
        from_id=data["from_id"],
        to_id=data["to_id"],
        position=position,
    )
    return _config_response(config)


@v1_bp.route("/builder/sections/<section_id>", methods=["PATCH"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("landing_page")
def patch_section(section_id):
    _lock()
    data = _json_object() or {}

    fields = [field for field in edit_page.SECTION_EDITS if field in data]
    if not fields:
        return jsonify({"error": "No valid fields provided for update"}), 400

    if "settings" in data and not isinstance(data["settings"], dict):
        return jsonify({"error": "settings must be an object"}), 400

    config = edit_page.patch_section(
        tenant_key=g.current_tenant.id,
        section_id=section_id,
        data={field: data[field] for field in fields},
    )
    return _config_response(config)


def _patch_group(apply_patch, label):
    _lock()
    data = _json_object()
    if data is None:
        return jsonify({"error": f"{label} must be a JSON object"}), 400

    config = apply_patch(tenant_key=g.current_tenant.id, data=data)
    return _config_response(config)


@v1_bp.route("/builder/styles", methods=["PATCH"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("landing_page")
def patch_styles():
    return _patch_group(edit_page.patch_global_styles, "global_styles")


@v1_bp.route("/builder/seo", methods=["PATCH"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("landing_page")
def patch_seo():
    return _patch_group(edit_page.patch_seo, "seo")


@v1_bp.route("/builder/footer", methods=["PATCH"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("landing_page")
def patch_footer():
    return _patch_group(edit_page.patch_footer, "footer")
