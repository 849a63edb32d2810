# taskboard/schemas/base.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Operation arguments, inputs and results use camelCase on the wire"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class NoArgs(CamelModel):
    pass


class IdArgs(CamelModel):
    id: str
