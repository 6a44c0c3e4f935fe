from dataclasses import dataclass, field


@dataclass(frozen=True)
class AggregateOffer:
    """Price range advertised for a catalog result."""

    low_price: str = ""
    high_price: str = ""
    currency: str = ""


@dataclass(frozen=True)
class CatalogResult:
    """One item returned by the product-search collaborator. Read-only."""

    title: str
    link: str
    source: str
    snippet: str = ""
    product_names: tuple[str, ...] = ()
    offers: tuple[AggregateOffer, ...] = ()


@dataclass(frozen=True)
class CatalogSearchPage:
    """Ordered results of a single search plus the remote summary figures."""

    results: tuple[CatalogResult, ...] = field(default_factory=tuple)
    total_results: str = "0"
    search_time: float = 0.0

    def __len__(self) -> int:
        return len(self.results)
