from shopping_mcp.infrastructure.common.retry.retry_policy import RetryPolicy

__all__ = ["RetryPolicy"]
