# vasstra/schemas/common.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Catalog ids are numeric for legacy products and ObjectId strings
# for everything served by the API.
ProductId = int | str


class CamelModel(BaseModel):
    """
    Base for every record that crosses the wire or the storage layer.

    JSON keys are camelCase (originalPrice, createdAt, ...), Python
    attributes are snake_case; both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
