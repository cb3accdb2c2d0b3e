import math


def estimate_token_count(text: str) -> int:
    """Rough token estimate: about four characters per token for English text."""
    return math.ceil(len(text or "") / 4)
