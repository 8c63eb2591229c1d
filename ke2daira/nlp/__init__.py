"""Natural Language Processing module for ke2daira

This module provides the Japanese character classification, mora segmentation
and reading resolution the name transformer is built on.
"""

from .base import (
    BaseReadingResolver,
    Ke2dairaError,
    UnresolvableComponentError,
    DegenerateSwapError,
)


def get_reading_resolver(kind: str = 'janome', **kwargs) -> BaseReadingResolver:
    """Get a reading resolver backed by the given analyzer.

    Args:
        kind: Analyzer name ('janome')
        **kwargs: Passed to the resolver constructor (e.g. user_dict)

    Returns:
        Reading resolver instance

    Raises:
        ValueError: If the analyzer is not supported
    """
    kind = kind.lower()

    if kind == 'janome':
        from .japanese.reading import JanomeReadingResolver
        return JanomeReadingResolver(**kwargs)
    else:
        raise ValueError(f"Unsupported reading resolver: {kind}")


__all__ = [
    'BaseReadingResolver',
    'Ke2dairaError',
    'UnresolvableComponentError',
    'DegenerateSwapError',
    'get_reading_resolver',
]
