"""Conversion of plain mappings into dataclass records."""

from collections.abc import Callable, Mapping
from dataclasses import MISSING, fields, is_dataclass
from types import NoneType
from typing import Any, TypeVar, cast, get_args, get_origin, get_type_hints

D = TypeVar("D")


def dict_to_dataclass(dc_type: type[D], values: Mapping[str, Any]) -> D:
    """Recursively build a dataclass instance from a nested mapping.

    Args:
        dc_type: The dataclass type to build.
        values: The mapping containing the data.

    Returns:
        An instance of dc_type populated with data from values.

    Raises:
        TypeError: If dc_type is not a dataclass type.
        KeyError: If a field without default is missing from values.

    Note:
        - Keys in values that are not fields of dc_type are ignored.
        - Nested records are only resolved for ``SomeDataclass`` and
          ``SomeDataclass | None`` fields.
    """

    if not is_dataclass(dc_type):
        raise TypeError(f"{dc_type} is not a dataclass type")
    type_hints = get_type_hints(dc_type)
    kwargs = {}
    for field in fields(dc_type):
        if not field.init:
            continue
        field_type = type_hints.get(field.name, field.type)
        if field.name in values:
            inner = values[field.name]
            target_dc = _resolve_dataclass_type(field_type)
            if target_dc and isinstance(inner, Mapping):
                kwargs[field.name] = dict_to_dataclass(target_dc, inner)
            else:
                kwargs[field.name] = inner
        elif field.default is not MISSING:
            kwargs[field.name] = field.default
        elif field.default_factory is not MISSING:
            factory = cast(Callable[[], Any], field.default_factory)
            kwargs[field.name] = factory()
        else:
            raise KeyError(f"Missing required field '{field.name}'")
    return cast(D, dc_type(**kwargs))


def _resolve_dataclass_type(field_type: Any) -> type[Any] | None:
    origin = get_origin(field_type)
    if origin is None:
        return cast(type[Any], field_type) if is_dataclass(field_type) else None
    args = [arg for arg in get_args(field_type) if arg is not NoneType]
    if len(args) == 1 and is_dataclass(args[0]):
        return cast(type[Any], args[0])
    return None
