from .section import assert_dense_order, assert_section, assert_unique_section_ids


def assert_configuration(config, reordered=False):
    """
    Structural invariants of a page configuration.

    Dense 0..n-1 ordering is only required right after a reorder;
    stored documents may carry any relative order values.
    """
    sections = config.sections

    assert_unique_section_ids(sections)

    if reordered:
        assert_dense_order(sections)

    for section in sections:
        assert_section(section)
