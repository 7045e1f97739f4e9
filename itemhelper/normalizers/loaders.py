# itemhelper/normalizers/loaders.py
import logging
from copy import deepcopy
from typing import Dict, Iterable, List, Protocol
from itemhelper.models import Field, Item

log = logging.getLogger(__name__)

class FieldLoader(Protocol):
    def get_fields(self, type_alias: str, item: Item, prepare_value: bool = True) -> List[Field]:
        """Load the custom fields of `item` for the given content type."""
        ...


class NullFieldLoader(FieldLoader):
    """Used when the host never wires a loader in. Items without fields stay empty."""
    def get_fields(self, type_alias: str, item: Item, prepare_value: bool = True) -> List[Field]:
        return []


class InMemoryFieldLoader(FieldLoader):
    """
    Field definitions registered per content type.
    Every call hands out fresh copies, so two items never share Field objects.
    """
    def __init__(self, fields: Dict[str, Iterable[Field]] | None = None):
        self._fields: Dict[str, List[Field]] = {}
        for type_alias, defs in (fields or {}).items():
            self.register(type_alias, defs)

    def register(self, type_alias: str, fields: Iterable[Field]) -> None:
        self._fields[type_alias] = [
            f if isinstance(f, Field) else Field.model_validate(f) for f in fields
        ]

    def get_fields(self, type_alias: str, item: Item, prepare_value: bool = True) -> List[Field]:
        defs = self._fields.get(type_alias)
        if defs is None:
            log.debug("no fields registered for type_alias=%s", type_alias)
            return []
        return deepcopy(defs)


def get_default_loader() -> FieldLoader:
    return NullFieldLoader()
