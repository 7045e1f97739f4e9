# itemhelper/normalizers/base.py
from typing import Protocol
from itemhelper.models import Field, NormalizedField

class FieldNormalizer(Protocol):
    def normalize_field(self, field: Field, current: NormalizedField) -> NormalizedField:
        """Return the NormalizedField for `field`, starting from `current`."""
        ...
