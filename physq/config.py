"""
Configuration for quantity construction, parsing and printing.
"""
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Any, Iterator, Optional

import numpy as np

from physq.utils.formatting import Precision
from physq.utils.logging import Debug


@dataclass(frozen=True)
class QuantityConfig:
    """Options applied library-wide.

    :param default_dtype: The numpy floating dtype quantity values are stored with when no ``dtype`` is
        given at construction.
    :param case_insensitive_parsing: If True, unit spellings that miss an exact match are retried
        case-insensitively, provided the match is unambiguous.
    :param precision: If set, overrides the dtype-derived precision of every printed quantity.
    """

    default_dtype: Any = np.float64
    case_insensitive_parsing: bool = True
    precision: Optional[Precision] = None

    def __post_init__(self):
        if not np.issubdtype(np.dtype(self.default_dtype), np.floating):
            raise TypeError(f"'default_dtype' must be a floating dtype, got {self.default_dtype!r}.")
        if self.precision is not None and not isinstance(self.precision, Precision):
            raise TypeError(f"'precision' must be a Precision or None, got {self.precision!r}.")


_config = QuantityConfig()


def get_config() -> QuantityConfig:
    """Returns a copy of the current configuration."""
    return replace(_config)


def set_config(**kwargs) -> QuantityConfig:
    """Replaces the given options of the current configuration.

    :raises ValueError: If an option name is unknown.
    :return: The new configuration.
    :rtype: :class:`QuantityConfig`
    """
    global _config
    known = {field.name for field in fields(QuantityConfig)}
    unknown = set(kwargs) - known
    if unknown:
        raise ValueError(f"Unknown configuration option(s): {', '.join(sorted(unknown))}.")
    _config = replace(_config, **kwargs)
    Debug("Configuration set to %s", _config)
    return replace(_config)


@contextmanager
def config_context(**kwargs) -> Iterator[QuantityConfig]:
    """Temporarily overrides options, restoring the previous configuration on exit."""
    global _config
    previous = _config
    try:
        yield set_config(**kwargs)
    finally:
        _config = previous
