from typing import Literal

from pydantic import BaseModel

from landing.utils.merge import deep_merge, reduce_overrides
from landing.utils.order import move_item, stable_sort_by_order
from landing.utils.validation import coerce_model


class Card(BaseModel):
    style: Literal["flat", "elevated"] = "flat"
    columns: int = 3


def test_deep_merge_fills_missing_nested_keys():
    defaults = {"a": 1, "nested": {"x": 1, "y": 2}, "items": [1, 2]}

    merged = deep_merge(defaults, {"nested": {"y": 5}, "items": [9], "a": None})

    assert merged == {"a": 1, "nested": {"x": 1, "y": 5}, "items": [9]}
    assert defaults["nested"] == {"x": 1, "y": 2}


def test_deep_merge_does_not_alias_inputs():
    stored = {"items": [{"id": 1}]}

    merged = deep_merge({}, stored)
    merged["items"][0]["id"] = 2

    assert stored["items"][0]["id"] == 1


def test_reduce_overrides_later_sources_win():
    merged = reduce_overrides([
        {"name": "system", "color": "red"},
        None,
        {"color": "blue", "name": ""},
    ])

    assert merged == {"name": "system", "color": "blue"}


def test_stable_sort_by_order():
    class Item:
        def __init__(self, name, order):
            self.name = name
            self.order = order

    items = [Item("b", 1), Item("a", 1), Item("c", 0)]

    assert [i.name for i in stable_sort_by_order(items)] == ["c", "b", "a"]


def test_move_item():
    assert move_item(list("abcd"), from_index=0, to_index=2) == list("bacd")
    assert move_item(list("abcd"), from_index=0, to_index=2, after=True) == list("bcad")
    assert move_item(list("abcd"), from_index=3, to_index=0) == list("dabc")
    assert move_item(list("abcd"), from_index=1, to_index=1) == list("abcd")


def test_coerce_model_drops_invalid_fields():
    card = coerce_model(Card, {"style": "3d", "columns": 4})

    assert card == Card(style="flat", columns=4)


def test_coerce_model_restores_fallback_values():
    card = coerce_model(Card, {"style": "3d"}, fallback={"style": "elevated"})

    assert card.style == "elevated"


def test_coerce_model_ignores_invalid_fallback():
    card = coerce_model(Card, {"columns": "many"}, fallback={"columns": "lots"})

    assert card.columns == 3
