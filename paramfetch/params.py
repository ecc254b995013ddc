"""Query parameter maps, evaluation context and merge helpers."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Union

Primitive = Union[str, int, float, bool, None]


@dataclass(frozen=True, slots=True)
class Context:
    """Read-only snapshot handed to dynamic parameter functions."""

    url: str
    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))


ParamValue = Union[Primitive, Callable[[Context], Any]]
ParameterMap = Mapping[str, ParamValue]


class Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


# Marks request params that were not provided; None disables parameters.
UNSET = Unset.UNSET


def freeze_params(params: ParameterMap | None) -> Mapping[str, ParamValue]:
    """Copy a parameter map into a read-only mapping."""
    return MappingProxyType(dict(params or {}))


def merge_params(base: ParameterMap, override: ParameterMap) -> dict[str, ParamValue]:
    """Shallow-merge two parameter maps; keys from ``override`` win."""
    merged = dict(base)
    merged.update(override)
    return merged


def effective_params(
    defaults: ParameterMap,
    requested: ParameterMap | None | Unset,
) -> dict[str, ParamValue]:
    """Pick the parameter map a single request should use."""
    if requested is UNSET:
        return dict(defaults)
    if requested is None:
        return {}
    return merge_params(defaults, requested)


def evaluate_param(value: ParamValue, ctx: Context) -> Any:
    """Call dynamic values with ``ctx``; return literals unchanged."""
    if callable(value):
        return value(ctx)
    return value


def _render_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def render_query_value(value: Any) -> Any:
    """Join list and tuple values with commas; leave other values to httpx."""
    if isinstance(value, (list, tuple)):
        return ",".join(_render_scalar(item) for item in value)
    return value
