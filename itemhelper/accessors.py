"""
Name-based access to an item's custom fields from templates.

Every accessor returns False when the field (or property) is not there,
so a missing field never breaks a page. False is a sentinel here; do not
confuse it with a checkbox or boolean field whose value is False.
"""
from typing import Any
from itemhelper.models import Item
from itemhelper.normalizers import process

FIELD_PROPERTIES = ("name", "group", "label", "options", "value")


def ensure_processed(item: Item) -> Item:
    """Run process() on an item that hasn't been processed yet."""
    if item.processed is not True:
        process(item)
    return item


def get_field_property(item: Item, field_name: str, property_name: str) -> Any:
    """Return one property of the field called `field_name`, or False."""
    ensure_processed(item)

    if item.fields_by_name is None:
        return False
    field = item.fields_by_name.get(field_name)
    if field is None or property_name not in FIELD_PROPERTIES:
        return False
    return getattr(field, property_name)


def get_field_group_id(item: Item, field_name: str):
    return get_field_property(item, field_name, "group")


def get_field_label(item: Item, field_name: str):
    return get_field_property(item, field_name, "label")


def get_field_options(item: Item, field_name: str):
    return get_field_property(item, field_name, "options")


def get_field_value(item: Item, field_name: str):
    """Value of the field: a string, a list, decoded JSON, or selected options."""
    return get_field_property(item, field_name, "value")
