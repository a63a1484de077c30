from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecordBase(BaseModel):
    """
    Base Pydantic model for submitted achievement records.

    Records are immutable values. Form payloads use camelCase keys
    (``authorRank``); snake_case field names are accepted too.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
