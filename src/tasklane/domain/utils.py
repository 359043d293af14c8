"""Domain layer utilities."""

from collections.abc import Iterable


def normalize_label(value: str) -> str:
    """Return the canonical form of a tag or status.

    Surrounding whitespace is stripped and the case is folded, so two labels
    are equal exactly when their normalized forms are equal.

    Args:
        value: The raw label.

    Returns:
        The normalized label.
    """
    return value.strip().casefold()


def normalize_labels(values: Iterable[str]) -> list[str]:
    """Normalize labels, dropping duplicates and empty results.

    The first occurrence of each normalized label keeps its position.
    """
    return [label for label in dict.fromkeys(map(normalize_label, values)) if label]
