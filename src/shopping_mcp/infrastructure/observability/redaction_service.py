import re

# (prefix)(secret) pairs; the secret group is replaced.
SECRET_PATTERNS = [
    r"([?&]key=)([^&\s'\"]+)",
    r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=]+)",
    r"(api_key\s*[:=]\s*)(['\"]?[a-zA-Z0-9\-\._~+/=]+['\"]?)",
]


def redact_text(text: str) -> str:
    """
    Redacts secrets (API keys in query strings, bearer tokens) from a string.
    """
    if not text:
        return text

    redacted_text = text
    for pattern in SECRET_PATTERNS:
        redacted_text = re.sub(pattern, r"\1[REDACTED]", redacted_text, flags=re.IGNORECASE)

    return redacted_text
