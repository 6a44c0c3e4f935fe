from .search_response_mapper import SearchResponseMapper

__all__ = ["SearchResponseMapper"]
