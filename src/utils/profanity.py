"""Profanity filter applied to chirp bodies before storage."""

PROFANE_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
REPLACEMENT = "****"


def filter_profanity(text: str) -> str:
    """Replace profane words with asterisks.

    Words are split on single spaces and matched case-insensitively. A word
    with punctuation attached ("Sharbert!") is not a match.
    """
    words = text.split(" ")
    return " ".join(REPLACEMENT if w.lower() in PROFANE_WORDS else w for w in words)
