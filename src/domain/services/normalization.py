"""Domain normalization helpers."""


def normalize_code(code: str | None) -> str:
    """Normalize currency or account codes.

    Args:
        code: Raw code value from a repository.

    Returns:
        str: Stripped, upper-cased code, or an empty string.
    """
    if not code:
        return ""
    return code.strip().upper()


def normalize_text(value: str | None) -> str:
    """Normalize free text for case-insensitive comparisons.

    Args:
        value: Raw text, possibly missing.

    Returns:
        str: Case-folded text, or an empty string.
    """
    if not value:
        return ""
    return value.casefold()


__all__ = ["normalize_code", "normalize_text"]
