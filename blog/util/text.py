"""Text helpers shared by the post views."""

ELLIPSIS = "…"


def truncate(text: str, max_length: int) -> str:
    """Shorten text to at most ``max_length`` characters plus an ellipsis.

    Text that already fits is returned unchanged. A non-positive
    ``max_length`` yields just the ellipsis marker.

    Args:
        text: Text to shorten
        max_length: Number of characters to keep

    Returns:
        The original text, or its first ``max_length`` characters followed
        by a single ellipsis character
    """
    if max_length <= 0:
        return ELLIPSIS
    if len(text) <= max_length:
        return text
    return text[:max_length] + ELLIPSIS
