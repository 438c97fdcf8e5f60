# vasstra/schemas/review.py
from pydantic import Field, field_validator

from vasstra.schemas.common import CamelModel, ProductId


class Review(CamelModel):
    """
    Shopper review kept in local storage until moderation picks it up.
    """

    id: str
    name: str = Field(min_length=2, max_length=50)
    rating: int = Field(ge=1, le=5)
    comment: str = Field(min_length=10, max_length=500)
    date: str
    product_id: ProductId
    images: list[str] | None = None

    @field_validator("name", "comment", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v
