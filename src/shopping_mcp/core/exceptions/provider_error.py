from __future__ import annotations

from dataclasses import dataclass

from shopping_mcp.core.exceptions.shopping_error import ShoppingError


@dataclass(frozen=False)
class ProviderError(ShoppingError):
    provider: str
    message: str
    retryable: bool = False
    status_code: int | None = None

    def __str__(self) -> str:
        return self.message
