"""Argument validation and the optional-parameter merge rules shared by all builders."""

import copy
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from ..models.errors import InvalidArgumentError
from ._request_spec import QueryValue, is_query_scalar


def require_str(name: str, value: Any, *, allow_empty: bool = False) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(name, f"expected a string, got {type(value).__name__}")
    if not value and not allow_empty:
        raise InvalidArgumentError(name, "must not be empty")
    return value


def require_options(opts: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Return a deep copy of ``opts``, or an empty dict for ``None``."""
    if opts is None:
        return {}
    if not isinstance(opts, Mapping):
        raise InvalidArgumentError("opts", f"expected a mapping, got {type(opts).__name__}")
    for key in opts:
        if not isinstance(key, str):
            raise InvalidArgumentError("opts", f"key {key!r} is not a string")
    return copy.deepcopy(dict(opts))


def merge_body(
    defaults: Mapping[str, Any], opts: Optional[Mapping[str, Any]]
) -> dict[str, Any]:
    """Merge caller options over computed defaults.

    Every key present in ``opts`` replaces the same key of ``defaults``; keys
    present in only one of them are kept as is. Unknown keys are not filtered.
    """
    return {**defaults, **require_options(opts)}


def merge_query(
    defaults: Iterable[tuple[str, QueryValue]],
    opts: Optional[Mapping[str, Any]],
) -> list[tuple[str, QueryValue]]:
    """Merge caller options over default query pairs, keeping order.

    Overridden keys stay at the position of the default; keys only found in
    ``opts`` are appended in their insertion order.
    """
    merged = dict(defaults)
    merged.update(require_options(opts))
    for key, value in merged.items():
        if not is_query_scalar(value):
            raise InvalidArgumentError(
                key, f"query parameter must be a scalar, got {type(value).__name__}"
            )
    return list(merged.items())
