# taskboard/models/base.py
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Base for every stored entity

    Attributes are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    id: str

    def to_json(self) -> Dict[str, Any]:
        """Plain JSON-ready dict with foreign keys left as ids"""
        return self.model_dump(by_alias=True, mode="json")
