# tests/conftest.py
import pytest

from itemhelper.models import Field, FieldOption, Item


@pytest.fixture
def make_field():
    def _make(name, raw_value=None, type="text", options=None, label=None, group_id=1):
        return Field(
            name=name,
            raw_value=raw_value,
            label=label or name.title(),
            group_id=group_id,
            type=type,
            options=[FieldOption(**o) for o in (options or [])],
        )
    return _make


# --- A typical article with one field of each flavour ---
@pytest.fixture
def article(make_field):
    return Item(
        id=42,
        title="Hello",
        fields=[
            make_field("subtitle", ["A quieter start"]),
            make_field("tags", ["news", "local", "weather"], type="list"),
            make_field(
                "colours",
                ["1", "3"],
                type="checkboxes",
                options=[
                    {"name": "Red", "value": "1"},
                    {"name": "Green", "value": "2"},
                    {"name": "Blue", "value": "3"},
                ],
                group_id=7,
            ),
            make_field("gallery", '{"images": ["a.jpg", "b.jpg"], "layout": "grid"}', type="repeatable"),
            make_field("rating", "42"),
        ],
    )
