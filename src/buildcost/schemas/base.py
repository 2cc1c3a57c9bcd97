"""Shared pydantic base for payloads exchanged with the model."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Frozen model whose JSON keys are camelCase.

    Python attributes stay snake_case; either spelling is accepted on input.
    Dump with ``by_alias=True`` to get the wire form back.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
