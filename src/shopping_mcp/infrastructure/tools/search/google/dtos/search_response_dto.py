from typing import Any

from pydantic import BaseModel, Field, field_validator


def _stringify(value: Any) -> Any:
    # The API occasionally sends prices and counts as JSON numbers.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class ProductDto(BaseModel):
    name: str = ""


class AggregateOfferDto(BaseModel):
    pricecurrency: str = ""
    lowprice: str = ""
    highprice: str = ""

    @field_validator("lowprice", "highprice", mode="before")
    @classmethod
    def coerce_price(cls, value: Any) -> Any:
        return _stringify(value)


class PageMapDto(BaseModel):
    product: list[ProductDto] = Field(default_factory=list)
    aggregateoffer: list[AggregateOfferDto] = Field(default_factory=list)


class SearchItemDto(BaseModel):
    kind: str = ""
    title: str = ""
    link: str = ""
    displayLink: str = ""
    snippet: str = ""
    pagemap: PageMapDto = Field(default_factory=PageMapDto)


class SearchInformationDto(BaseModel):
    searchTime: float = 0.0
    totalResults: str = "0"

    @field_validator("totalResults", mode="before")
    @classmethod
    def coerce_total(cls, value: Any) -> Any:
        return _stringify(value)


class SearchResponseDto(BaseModel):
    kind: str = ""
    searchInformation: SearchInformationDto = Field(default_factory=SearchInformationDto)
    items: list[SearchItemDto] = Field(default_factory=list)
