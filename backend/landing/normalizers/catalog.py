from .page import normalize_configuration


def normalize_template(template, include_config=False):
    data = {
        "id": template.id,
        "name": template.name,
        "description": template.description,
        "thumbnail": template.thumbnail,
        "category": template.category,
    }
    if include_config:
        data["default_config"] = normalize_configuration(template.default_config)
    return data


def normalize_descriptor(descriptor):
    return {
        "type": descriptor.type,
        "label": descriptor.label,
        "variants": [
            {"name": v.name, "label": v.label} for v in descriptor.variants
        ],
        "settings_schema": descriptor.settings_schema.model_json_schema(),
    }
