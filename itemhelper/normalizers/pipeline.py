import logging
from typing import Any, Dict, List, Optional
from pydantic import ValidationError
from itemhelper.models import Field, Item, NormalizedField
from itemhelper.settings import DEFAULT_TYPE_ALIAS
from .base import FieldNormalizer
from .loaders import FieldLoader, get_default_loader
from .rules import RuleFieldNormalizer, unwrap_single

log = logging.getLogger(__name__)

class NormalizerPipeline(FieldNormalizer):
    """
    A chain of field normalizers.
    Each stage takes the output of the previous stage.
    """
    def __init__(self, stages: List[FieldNormalizer]):
        self.stages = stages

    def normalize_field(self, field: Field, current: NormalizedField) -> NormalizedField:
        out = current
        for stage in self.stages:
            out = stage.normalize_field(field, out)
        return out


def get_default_normalizer() -> FieldNormalizer:
    """Factory for the default pipeline. Currently rule-based only."""
    return NormalizerPipeline([RuleFieldNormalizer()])


def base_field(field: Field) -> NormalizedField:
    """The name-keyed view of a field before any value rules run."""
    return NormalizedField(
        name=field.name,
        # single-option values are unwrapped so templates don't dig into lists
        value=unwrap_single(field.raw_value),
        label=field.label,
        group=field.group_id,
        options=field.options,
    )


def _as_field(entry: Any) -> Optional[Field]:
    """A Field for `entry`, or None (logged) when the entry can't be one."""
    if isinstance(entry, Field):
        return entry
    if isinstance(entry, dict):  # host assigned plain records after construction
        try:
            return Field.model_validate(entry)
        except ValidationError as e:
            log.warning("skipping malformed field record: %s", e.errors()[0].get("msg"))
            return None
    log.warning("skipping field entry of type %s", type(entry).__name__)
    return None


def process(
    item: Item,
    loader: Optional[FieldLoader] = None,
    normalizer: Optional[FieldNormalizer] = None,
) -> Item:
    """
    Build `item.fields_by_name` from `item.fields` and mark the item processed.

    The mapping is rebuilt from scratch on every call. When the item arrives
    without fields they are fetched from `loader` first; loader errors are not
    caught. Mutates `item` and returns it.
    """
    type_alias = item.type_alias if item.type_alias is not None else DEFAULT_TYPE_ALIAS

    if item.fields is None:
        loader = loader or get_default_loader()
        log.debug("loading fields: type_alias=%s", type_alias)
        item.fields = loader.get_fields(type_alias, item, prepare_value=True)

    normalizer = normalizer or get_default_normalizer()
    by_name: Dict[str, NormalizedField] = {}

    fields = item.fields
    if isinstance(fields, (list, tuple)):
        for entry in fields:
            field = _as_field(entry)
            if field is None:
                continue
            if field.name in by_name:
                log.debug("duplicate field name, keeping the last one: %s", field.name)
            by_name[field.name] = normalizer.normalize_field(field, base_field(field))
    elif fields is not None:
        log.warning("item fields are not a sequence (%s), nothing to process", type(fields).__name__)

    item.fields_by_name = by_name
    item.processed = True
    log.debug("processed item: type_alias=%s fields=%d", type_alias, len(by_name))
    return item
