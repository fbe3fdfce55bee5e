import pytest

from landing.domain.exceptions import TemplateNotFound
from landing.domain.registry import validate_variant
from landing.domain.templates import (
    DEFAULT_TEMPLATE_ID,
    apply_template,
    default_config,
    find_template,
    get_template,
    list_templates,
)


def test_catalog():
    assert [t.id for t in list_templates()] == [
        "modern-minimalist",
        "vintage-classic",
        "lifestyle-urban",
        "premium-luxury",
        "bold-impact",
    ]
    assert DEFAULT_TEMPLATE_ID == "modern-minimalist"


@pytest.mark.parametrize("template", list_templates(), ids=lambda t: t.id)
def test_template_sections_are_well_formed(template):
    sections = template.default_config.sections

    assert [s.id for s in sections] == [s.type for s in sections]
    assert [s.order for s in sections] == list(range(7))
    assert len({s.type for s in sections}) == 7
    for section in sections:
        assert validate_variant(section.type, section.variant) == section.variant


def test_get_template_unknown_id():
    with pytest.raises(TemplateNotFound):
        get_template("art-deco")


def test_unknown_template_falls_back_to_first():
    assert find_template("art-deco").id == "modern-minimalist"
    assert apply_template("art-deco").template_id == "modern-minimalist"
    assert default_config(None).template_id == "modern-minimalist"


def test_new_configuration_is_independent_of_the_template():
    template = get_template("bold-impact")

    config = template.new_configuration()
    config.sections[0].enabled = False

    assert template.default_config.sections[0].enabled is True
