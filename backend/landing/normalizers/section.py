from pydantic import BaseModel


def normalize_settings(settings):
    if isinstance(settings, BaseModel):
        return settings.model_dump(mode="json")
    return dict(settings or {})


def normalize_section(section):
    data = {
        "id": section.id,
        "type": section.type,
        "variant": section.variant,
        "order": section.order,
        "enabled": section.enabled,
        "title": section.title,
        "settings": normalize_settings(section.settings),
    }

    # Unrecognized sections carry their stored extra keys
    data.update(section.model_extra or {})
    return data


def normalize_render_entry(entry):
    return {
        "section_id": entry.section_id,
        "section_type": entry.section_type,
        "variant": entry.resolved_variant,
        "title": entry.title,
        "settings": normalize_settings(entry.settings),
        "renderer": {
            "component": entry.renderer.component,
            "data_feed": entry.renderer.data_feed,
        },
    }
