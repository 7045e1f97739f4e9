# itemhelper/models.py
from typing import Any, Dict, List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field as ModelField, model_validator

# -----------------------------
# Records handed over by the host CMS.
# Unknown attributes are kept so templates can still reach them.
# -----------------------------
class FieldOption(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    name: str = ""
    value: str = ""


class Field(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    raw_value: Any = ModelField(default=None, validation_alias=AliasChoices("raw_value", "rawvalue"))
    label: str = ""
    group_id: Any = None                       # field group identifier
    type: str = "text"                         # e.g. "checkboxes", "list", "text"
    options: List[FieldOption] = []            # every possible option, for choice types

    @model_validator(mode="before")
    @classmethod
    def _lift_fieldparams(cls, data: Any) -> Any:
        """Accept the host layout where options sit under fieldparams."""
        if isinstance(data, dict) and "options" not in data:
            params = data.get("fieldparams")
            if isinstance(params, dict) and params.get("options") is not None:
                opts = params["options"]
                # some hosts store options as {"options0": {...}, "options1": {...}}
                data = {**data, "options": list(opts.values()) if isinstance(opts, dict) else opts}
        return data


class NormalizedField(BaseModel):
    name: str
    value: Any = None
    label: str = ""
    group: Any = None
    options: List[FieldOption] = []


class Item(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    fields: Optional[List[Field]] = ModelField(default=None, validation_alias=AliasChoices("fields", "jcfields"))
    fields_by_name: Optional[Dict[str, NormalizedField]] = None
    type_alias: Optional[str] = None
    processed: bool = False

    def __repr__(self):
        count = len(self.fields) if isinstance(self.fields, (list, tuple)) else 0
        return f"<Item(type_alias={self.type_alias}, fields={count}, processed={self.processed})>"
