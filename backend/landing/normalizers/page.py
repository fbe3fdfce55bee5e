from .section import normalize_render_entry, normalize_section


def normalize_configuration(config):
    return {
        "template_id": config.template_id,
        "sections": [normalize_section(s) for s in config.sections],
        "global_styles": config.global_styles.model_dump(mode="json"),
        "seo": config.seo.model_dump(mode="json"),
        "footer": config.footer.model_dump(mode="json"),
        "updated_at": config.updated_at.isoformat() if config.updated_at else None,
    }


def normalize_warning(warning):
    return {
        "section_id": warning.section_id,
        "section_type": warning.section_type,
        "message": warning.message,
    }


def normalize_render_plan(plan):
    return {
        "sections": [normalize_render_entry(e) for e in plan.entries],
        "css_variables": dict(plan.css_variables),
        "font_url": plan.font_url,
        "warnings": [normalize_warning(w) for w in plan.warnings],
    }
