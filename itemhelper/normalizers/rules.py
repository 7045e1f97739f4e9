import json
from typing import Any, List, Optional
from itemhelper.models import Field, FieldOption, NormalizedField
from itemhelper.settings import CHECKBOXES_TYPE
from .base import FieldNormalizer

class RuleFieldNormalizer(FieldNormalizer):
    """
    Rule-based value cleanup for a single custom field:
      - checkboxes: the raw selection becomes the list of selected options
      - anything else that decodes as JSON becomes the decoded structure
    """
    def normalize_field(self, field: Field, current: NormalizedField) -> NormalizedField:
        out = current.model_copy()
        if field.type == CHECKBOXES_TYPE:
            out.value = selected_options(field.options, field.raw_value)
        elif is_json(out.value):
            out.value = decode_json(out.value)
        return out


# --- Individual value helpers ---

def unwrap_single(raw: Any):
    """A one-element sequence gives its element, anything else is returned as-is."""
    if isinstance(raw, (list, tuple)) and len(raw) == 1:
        return raw[0]
    return raw

def _is_selected(value: Any, raw: Any) -> bool:
    # raw is one key (single choice) or a sequence of keys; compare as strings so 1 == "1"
    picked = raw if isinstance(raw, (list, tuple)) else [raw]
    return any(p is not None and str(p) == str(value) for p in picked)

def selected_options(options: Optional[List[FieldOption]], raw: Any) -> List[dict]:
    """Options whose value was selected, in option order."""
    return [
        {"name": o.name, "value": o.value}
        for o in (options or [])
        if _is_selected(o.value, raw)
    ]

def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")

def decode_json(value: str):
    """Decode a JSON string; objects become dicts. The empty string decodes to None."""
    if value == "":
        return None
    return json.loads(value, parse_constant=_reject_constant)

def is_json(value: Any) -> bool:
    """
    True when `value` is a string that decodes as JSON.

    Deliberately permissive: "42", "true", "null" and "" all pass, so such
    field values come back as 42, True, None and None. Templates already rely
    on this, so it is kept.
    """
    if not isinstance(value, str):
        return False
    try:
        decode_json(value)
    except ValueError:  # includes json.JSONDecodeError
        return False
    return True
