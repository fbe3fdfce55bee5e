"""
Composition and editing of a page configuration.

`compose` turns a configuration into an ordered render plan. The
editing functions (reorder, toggle, settings/variant/style updates)
are pure: each returns a new configuration and leaves its input
untouched, so stale edit sequences in a caller cannot clobber each
other's intermediate state.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Mapping, Optional, Sequence

from landing.utils.order import compact_order, move_item, stable_sort_by_order
from landing.utils.validation import coerce_model

from .configuration import BaseSection, PageConfiguration, UnrecognizedSection
from .dispatch import DEFAULT_DISPATCH, DispatchTable, RendererHandle
from .exceptions import SectionNotFound, UnknownSectionType
from .invariants.page import assert_configuration
from .registry import get_descriptor, validate_variant
from .settings import FooterSettings, SEOConfig
from .theme import GlobalStyleTokens, LOCAL_FONTS, font_stylesheet_url, to_css_variables

logger = logging.getLogger(__name__)

Position = Literal["before", "after"]


@dataclass(frozen=True)
class RenderPlanEntry:
    section: BaseSection
    resolved_variant: str
    renderer: RendererHandle

    @property
    def section_id(self) -> str:
        return self.section.id

    @property
    def section_type(self) -> str:
        return self.section.type

    @property
    def settings(self) -> Any:
        return self.section.settings

    @property
    def title(self) -> Optional[str]:
        return self.section.title


@dataclass(frozen=True)
class CompositionWarning:
    section_id: str
    section_type: str
    message: str


@dataclass
class RenderPlan:
    entries: List[RenderPlanEntry] = field(default_factory=list)
    warnings: List[CompositionWarning] = field(default_factory=list)
    css_variables: Dict[str, str] = field(default_factory=dict)
    font_url: Optional[str] = None

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def section_ids(self) -> List[str]:
        return [entry.section_id for entry in self.entries]


def compose(
    config: PageConfiguration,
    *,
    dispatch: Optional[DispatchTable] = None,
    local_fonts=LOCAL_FONTS,
) -> RenderPlan:
    """
    Build the render plan for a configuration.

    1. drop disabled sections
    2. stable sort by `order` (ties keep their list position)
    3. resolve each variant, falling back to "default"
    4. bind each section to its renderer; sections whose type has no
       renderer are skipped and reported in `warnings`
    """
    dispatch = dispatch or DEFAULT_DISPATCH
    plan = RenderPlan(
        css_variables=to_css_variables(config.global_styles),
        font_url=font_stylesheet_url(config.global_styles, local_fonts),
    )

    enabled = [section for section in config.sections if section.enabled]

    for section in stable_sort_by_order(enabled):
        try:
            renderer = dispatch.resolve(section.type)
            variant = validate_variant(section.type, section.variant)
        except UnknownSectionType as exc:
            logger.warning("Skipping section %r: %s", section.id, exc)
            plan.warnings.append(
                CompositionWarning(
                    section_id=section.id,
                    section_type=section.type,
                    message=str(exc),
                )
            )
            continue

        plan.entries.append(
            RenderPlanEntry(
                section=section.model_copy(deep=True),
                resolved_variant=variant,
                renderer=renderer,
            )
        )

    return plan


# -------------------------------------------------
# Ordering
# -------------------------------------------------

def _index_of(sections: Sequence[BaseSection], section_id: str) -> int:
    for index, section in enumerate(sections):
        if section.id == section_id:
            return index
    raise SectionNotFound(section_id)


def renormalize(sections: Sequence[BaseSection]) -> List[BaseSection]:
    """Copies of `sections` with order set to their list position."""
    return compact_order(
        sections,
        copy=lambda section, index: section.model_copy(deep=True, update={"order": index}),
    )


def move_section(
    sections: Sequence[BaseSection],
    from_id: str,
    to_id: str,
    position: Optional[Position] = None,
) -> List[BaseSection]:
    """
    Move section `from_id` next to section `to_id`.

    Sections are taken in display order (by `order`), the moved one is
    reinserted before or after the target, then every order value is
    rewritten to its dense index. Without a position, a section moving
    down lands after the target and one moving up lands before it,
    matching a drag gesture.
    """
    ordered = stable_sort_by_order(sections)
    from_index = _index_of(ordered, from_id)
    to_index = _index_of(ordered, to_id)

    if position is None:
        position = "after" if from_index < to_index else "before"

    moved = move_item(
        ordered,
        from_index=from_index,
        to_index=to_index,
        after=position == "after",
    )
    return renormalize(moved)


def reorder(
    config: PageConfiguration,
    from_id: str,
    to_id: str,
    position: Optional[Position] = None,
) -> PageConfiguration:
    sections = move_section(config.sections, from_id, to_id, position)
    result = _with(config, sections=sections)
    assert_configuration(result, reordered=True)
    return result


# -------------------------------------------------
# Field-group updates
# -------------------------------------------------

def _with(config: PageConfiguration, **update) -> PageConfiguration:
    base = config.model_copy(deep=True)
    return base.model_copy(update=update)


def _replace_section(config, section_id, build) -> PageConfiguration:
    index = _index_of(config.sections, section_id)
    sections = [section.model_copy(deep=True) for section in config.sections]
    sections[index] = build(sections[index])
    return _with(config, sections=sections)


def set_enabled(config: PageConfiguration, section_id: str, enabled: bool) -> PageConfiguration:
    return _replace_section(
        config,
        section_id,
        lambda section: section.model_copy(update={"enabled": bool(enabled)}),
    )


def set_title(config: PageConfiguration, section_id: str, title: Optional[str]) -> PageConfiguration:
    return _replace_section(
        config,
        section_id,
        lambda section: section.model_copy(update={"title": title or None}),
    )


def set_variant(config: PageConfiguration, section_id: str, variant: str) -> PageConfiguration:
    """Select a variant; unknown names are stored as "default"."""

    def build(section):
        if isinstance(section, UnrecognizedSection):
            return section.model_copy(update={"variant": variant})
        return section.model_copy(update={"variant": validate_variant(section.type, variant)})

    return _replace_section(config, section_id, build)


def update_settings(
    config: PageConfiguration,
    section_id: str,
    partial: Mapping[str, Any],
) -> PageConfiguration:
    """Shallow-merge `partial` into a section's settings."""

    def build(section):
        if isinstance(section, UnrecognizedSection):
            return section.model_copy(update={"settings": {**section.settings, **partial}})

        schema = get_descriptor(section.type).settings_schema
        current = section.settings.model_dump()
        settings = coerce_model(
            schema,
            {**current, **partial},
            label=f"{section.type} settings",
            fallback=current,
        )
        return section.model_copy(update={"settings": settings})

    return _replace_section(config, section_id, build)


def update_global_styles(config: PageConfiguration, partial: Mapping[str, Any]) -> PageConfiguration:
    current = config.global_styles.model_dump()
    styles = coerce_model(
        GlobalStyleTokens,
        {**current, **partial},
        label="global_styles",
        fallback=current,
    )
    return _with(config, global_styles=styles)


def update_seo(config: PageConfiguration, partial: Mapping[str, Any]) -> PageConfiguration:
    current = config.seo.model_dump()
    seo = coerce_model(SEOConfig, {**current, **partial}, label="seo", fallback=current)
    return _with(config, seo=seo)


def update_footer(config: PageConfiguration, partial: Mapping[str, Any]) -> PageConfiguration:
    current = {**FooterSettings().model_dump(), **config.footer.model_dump()}
    footer = coerce_model(FooterSettings, {**current, **partial}, label="footer", fallback=current)
    return _with(config, footer=footer)
