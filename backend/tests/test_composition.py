import logging

import pytest

from landing.domain import composition
from landing.domain.configuration import PageConfiguration
from landing.domain.dispatch import RENDERERS, DispatchTable
from landing.domain.exceptions import SectionNotFound
from landing.domain.loader import load, save
from landing.domain.templates import get_template


def make_config(*sections, **fields):
    return PageConfiguration.model_validate({
        "template_id": "modern-minimalist",
        "sections": list(sections),
        **fields,
    })


def section(section_id, section_type=None, order=0, **fields):
    return {"id": section_id, "type": section_type or section_id, "order": order, **fields}


@pytest.fixture
def config():
    return make_config(
        section("hero", order=0),
        section("services", order=1),
        section("team", order=2),
        section("gallery", order=3),
        section("cta", order=4),
    )


def test_compose_drops_disabled_and_sorts_by_order():
    config = make_config(
        section("cta", order=2),
        section("hero", order=0),
        section("team", order=1, enabled=False),
        section("services", order=1),
    )

    plan = composition.compose(config)

    assert plan.section_ids == ["hero", "services", "cta"]


def test_compose_keeps_list_position_for_equal_orders():
    config = make_config(
        section("team", order=1),
        section("gallery", order=1),
        section("hero", order=0),
    )

    assert composition.compose(config).section_ids == ["hero", "team", "gallery"]


def test_compose_entries_carry_renderer_and_resolved_variant():
    config = make_config(section("services", variant="pricing-table", title="Menu"))

    entry = composition.compose(config).entries[0]

    assert entry.resolved_variant == "pricing-table"
    assert entry.title == "Menu"
    assert entry.renderer.data_feed == "services"
    assert entry.settings.columns == 3


def test_unknown_type_is_skipped_with_one_warning(caplog):
    config = make_config(
        section("hero", order=0),
        section("pricing", order=1),
        section("services", order=2),
        section("cta", order=3),
    )

    with caplog.at_level(logging.WARNING, logger="landing.domain.composition"):
        plan = composition.compose(config)

    assert len(plan) == 3
    assert plan.section_ids == ["hero", "services", "cta"]
    assert len(plan.warnings) == 1
    assert plan.warnings[0].section_id == "pricing"
    assert "pricing" in caplog.text


def test_type_without_renderer_is_skipped():
    renderers = {k: v for k, v in RENDERERS.items() if k != "gallery"}
    config = make_config(section("hero", order=0), section("gallery", order=1))

    plan = composition.compose(config, dispatch=DispatchTable(renderers))

    assert plan.section_ids == ["hero"]
    assert plan.warnings[0].section_type == "gallery"


def test_plan_carries_global_style_tokens():
    config = make_config(
        section("hero"),
        global_styles={"font_heading": "Oswald", "font_body": "Open Sans", "border_radius": "full"},
    )

    plan = composition.compose(config)

    assert plan.css_variables["--landing-radius"] == "9999px"
    assert "family=Oswald" in plan.font_url
    assert "family=Open+Sans" in plan.font_url


@pytest.mark.parametrize(
    "from_id, to_id, position, expected",
    [
        ("hero", "team", None, ["services", "team", "hero", "gallery", "cta"]),
        ("cta", "services", None, ["hero", "cta", "services", "team", "gallery"]),
        ("hero", "team", "before", ["services", "hero", "team", "gallery", "cta"]),
        ("cta", "services", "after", ["hero", "services", "cta", "team", "gallery"]),
        ("gallery", "gallery", None, ["hero", "services", "team", "gallery", "cta"]),
    ],
)
def test_reorder(config, from_id, to_id, position, expected):
    result = composition.reorder(config, from_id, to_id, position)

    assert [s.id for s in result.sections] == expected
    assert [s.order for s in result.sections] == list(range(5))


def test_reorder_renormalizes_sparse_orders():
    config = make_config(
        section("hero", order=10),
        section("services", order=20),
        section("cta", order=30),
    )

    result = composition.reorder(config, "cta", "hero", "before")

    assert [(s.id, s.order) for s in result.sections] == [("cta", 0), ("hero", 1), ("services", 2)]


def test_reorder_unknown_id(config):
    with pytest.raises(SectionNotFound):
        composition.reorder(config, "hero", "footer")


def test_edits_never_touch_their_input(config):
    before = config.model_copy(deep=True)

    composition.reorder(config, "hero", "cta")
    composition.set_enabled(config, "team", False)
    composition.update_settings(config, "services", {"columns": 2})
    composition.update_global_styles(config, {"primary_color": "1 1% 1%"})

    assert config == before


def test_set_enabled(config):
    result = composition.set_enabled(config, "team", False)

    assert result.find_section("team").enabled is False
    assert "team" not in composition.compose(result).section_ids


def test_set_variant_falls_back_to_default(config):
    result = composition.set_variant(config, "hero", "slideshow")
    assert result.find_section("hero").variant == "slideshow"

    result = composition.set_variant(result, "hero", "hologram")
    assert result.find_section("hero").variant == "default"


def test_update_settings_merges_and_drops_invalid_values(config):
    result = composition.update_settings(config, "services", {"columns": 2, "show_prices": False})
    result = composition.update_settings(result, "services", {"columns": 9, "layout": "list"})

    settings = result.find_section("services").settings
    assert settings.columns == 2
    assert settings.show_prices is False
    assert settings.layout == "list"


def test_update_settings_unknown_section(config):
    with pytest.raises(SectionNotFound):
        composition.update_settings(config, "pricing", {"columns": 2})


def test_field_group_updates(config):
    result = composition.update_global_styles(config, {"border_radius": "bogus", "font_body": "Lora"})
    assert result.global_styles.border_radius == "md"
    assert result.global_styles.font_body == "Lora"

    result = composition.update_seo(result, {"title": "Classic Cuts", "keywords": ["barber"]})
    assert result.seo.title == "Classic Cuts"
    assert result.seo.keywords == ["barber"]

    result = composition.update_footer(result, {"variant": "minimal"})
    assert result.footer.variant == "minimal"
    assert result.footer.powered_by_text == "Barber Smart"


def test_compose_survives_a_save_load_round_trip():
    template = get_template("premium-luxury").default_config
    config = composition.set_enabled(template, "gallery", False)
    config = composition.reorder(config, "cta", "hero", "after")

    reloaded = load(template, save(config))

    assert composition.compose(reloaded).section_ids == composition.compose(config).section_ids
    assert [e.resolved_variant for e in composition.compose(reloaded).entries] == [
        e.resolved_variant for e in composition.compose(config).entries
    ]


def test_single_section_moved_onto_itself_is_renormalized():
    config = make_config(section("hero", order=7))

    result = composition.reorder(config, "hero", "hero")

    assert [(s.id, s.order) for s in result.sections] == [("hero", 0)]
    assert composition.compose(result).section_ids == ["hero"]
