from landing.domain.exceptions import InvariantViolation


def assert_unique_section_ids(sections):
    seen = set()
    duplicates = []
    for section in sections:
        if section.id in seen:
            duplicates.append(section.id)
        seen.add(section.id)

    if duplicates:
        raise InvariantViolation(
            f"Section ids must be unique within a page: {sorted(set(duplicates))}"
        )


def assert_dense_order(sections):
    orders = [section.order for section in sections]
    expected = list(range(len(orders)))

    if orders != expected:
        raise InvariantViolation(
            f"Section orders are not consecutive starting from 0: {orders}"
        )


def assert_section(section):
    # Only the relative value of `order` matters; negatives are valid
    if not section.id:
        raise InvariantViolation("Section must have an id.")
