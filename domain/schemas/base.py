from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for documents exchanged with the remote API (camelCase on the wire)"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data):
        # JSON nulls fall back to the field default (empty list, empty block, None)
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
