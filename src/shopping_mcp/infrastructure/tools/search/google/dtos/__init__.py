from .search_response_dto import (
    AggregateOfferDto,
    PageMapDto,
    ProductDto,
    SearchInformationDto,
    SearchItemDto,
    SearchResponseDto,
)

__all__ = [
    "AggregateOfferDto",
    "PageMapDto",
    "ProductDto",
    "SearchInformationDto",
    "SearchItemDto",
    "SearchResponseDto",
]
