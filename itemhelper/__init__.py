from .accessors import (
    ensure_processed,
    get_field_group_id,
    get_field_label,
    get_field_options,
    get_field_property,
    get_field_value,
)
from .models import Field, FieldOption, Item, NormalizedField
from .normalizers import is_json, process
from .text import strip_tags, truncate

__all__ = [
    "ensure_processed",
    "get_field_group_id",
    "get_field_label",
    "get_field_options",
    "get_field_property",
    "get_field_value",
    "Field",
    "FieldOption",
    "Item",
    "NormalizedField",
    "is_json",
    "process",
    "strip_tags",
    "truncate",
]
