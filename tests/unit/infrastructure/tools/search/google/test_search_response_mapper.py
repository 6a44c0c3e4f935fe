"""Unit tests: Google Custom Search DTOs and mapper."""

from shopping_mcp.infrastructure.tools.search.google.dtos import SearchResponseDto
from shopping_mcp.infrastructure.tools.search.google.mappers import SearchResponseMapper

PAYLOAD = {
    "kind": "customsearch#search",
    "searchInformation": {"searchTime": 0.21, "totalResults": "1234"},
    "items": [
        {
            "title": "Electric Kettle",
            "link": "https://shop.io/p/1",
            "displayLink": "shop.io",
            "snippet": "1.7L steel kettle",
            "pagemap": {
                "product": [{"name": "Kettle 1.7L"}],
                "aggregateoffer": [
                    {"pricecurrency": "USD", "lowprice": "19.90", "highprice": "29.90"},
                ],
            },
        },
        {
            "title": "Teapot",
            "link": "https://tea.io/teapot",
            "displayLink": "tea.io",
            "snippet": "",
        },
    ],
}


class TestSearchResponseDto:
    def test_tolerates_missing_sections(self) -> None:
        dto = SearchResponseDto.model_validate({})

        assert dto.items == []
        assert dto.searchInformation.totalResults == "0"
        assert dto.searchInformation.searchTime == 0.0

    def test_numeric_prices_and_totals_become_strings(self) -> None:
        dto = SearchResponseDto.model_validate(
            {
                "searchInformation": {"searchTime": 1, "totalResults": 42},
                "items": [{"pagemap": {"aggregateoffer": [{"lowprice": 10, "highprice": 12.5}]}}],
            }
        )

        offer = dto.items[0].pagemap.aggregateoffer[0]
        assert offer.lowprice == "10"
        assert offer.highprice == "12.5"
        assert dto.searchInformation.totalResults == "42"

    def test_ignores_unknown_fields(self) -> None:
        dto = SearchResponseDto.model_validate({"items": [{"title": "x", "cacheId": "abc", "pagemap": {"metatags": [{}]}}]})
        assert dto.items[0].title == "x"


class TestSearchResponseMapper:
    def test_to_page_maps_header_and_results(self) -> None:
        page = SearchResponseMapper.to_page(SearchResponseDto.model_validate(PAYLOAD))

        assert page.total_results == "1234"
        assert page.search_time == 0.21
        assert len(page) == 2

    def test_to_result_maps_offers_and_products(self) -> None:
        page = SearchResponseMapper.to_page(SearchResponseDto.model_validate(PAYLOAD))
        first = page.results[0]

        assert first.title == "Electric Kettle"
        assert first.source == "shop.io"
        assert first.product_names == ("Kettle 1.7L",)
        assert first.offers[0].low_price == "19.90"
        assert first.offers[0].high_price == "29.90"
        assert first.offers[0].currency == "USD"

    def test_result_without_pagemap_has_no_offers(self) -> None:
        page = SearchResponseMapper.to_page(SearchResponseDto.model_validate(PAYLOAD))
        assert page.results[1].offers == ()
        assert page.results[1].product_names == ()
