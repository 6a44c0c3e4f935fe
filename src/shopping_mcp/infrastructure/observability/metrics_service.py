"""Prometheus metrics declarations for the shopping server.

All metrics are declared statically at module level.
Labels use ONLY static enumerations, never item identifiers or queries.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── Tool invocation metrics ───────────────────────────────────────

TOOL_CALLS_TOTAL = Counter(
    "shopping_tool_calls_total",
    "Total MCP tool invocations",
    ["tool", "outcome"],
)

# ── Search collaborator metrics ───────────────────────────────────

SEARCH_REQUESTS_TOTAL = Counter(
    "shopping_search_requests_total",
    "Total product-search requests sent to the remote API",
    ["outcome"],
)

SEARCH_LATENCY_SECONDS = Histogram(
    "shopping_search_latency_seconds",
    "Remote product-search latency in seconds",
)

# ── Cart metrics ──────────────────────────────────────────────────

CART_UNIQUE_ITEMS = Gauge(
    "shopping_cart_unique_items",
    "Unique line items currently in the cart",
)
