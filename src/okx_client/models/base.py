"""
Wire model support for OKX data structures.

OKX payloads use camelCase keys and transmit every amount as a decimal
string. Models declare the wire name of each field in the dataclass field
metadata so decoding and encoding share a single rename table.
"""

import dataclasses
import typing
from enum import Enum
from typing import Any, Dict, Iterator, List, Tuple, Type, TypeVar, Union

from ..exceptions import ResponseDecodeError

T = TypeVar("T", bound="WireModel")

_NONE_TYPE = type(None)


def wire(name: str, **kwargs: Any) -> Any:
    """Declare a dataclass field carried under ``name`` on the wire."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata["wire"] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def _unwrap_optional(hint: Any) -> Tuple[Any, bool]:
    """Return (inner type, is_optional) for ``Optional[X]`` hints."""
    if typing.get_origin(hint) is Union:
        args = [arg for arg in typing.get_args(hint) if arg is not _NONE_TYPE]
        if len(args) == 1:
            return args[0], True
    return hint, False


def _decode(hint: Any, value: Any, owner: str, key: str) -> Any:
    if typing.get_origin(hint) in (list, List):
        if not isinstance(value, list):
            raise ResponseDecodeError(
                f"Field '{key}' of {owner} must be an array, got {type(value).__name__}",
                response_data=value,
            )
        (item_hint,) = typing.get_args(hint)
        return [_decode(item_hint, item, owner, key) for item in value]

    if isinstance(hint, type) and issubclass(hint, WireModel):
        return hint.from_dict(value)

    if isinstance(hint, type) and issubclass(hint, Enum):
        try:
            return hint(value)
        except ValueError as e:
            raise ResponseDecodeError(
                f"Unknown {hint.__name__} value {value!r} in field '{key}' of {owner}",
                response_data=value,
            ) from e

    if hint is bool:
        if isinstance(value, bool):
            return value
        if value in ("true", "false"):
            return value == "true"
        raise ResponseDecodeError(
            f"Field '{key}' of {owner} must be a boolean, got {value!r}",
            response_data=value,
        )

    if hint is str:
        if isinstance(value, (dict, list)):
            raise ResponseDecodeError(
                f"Field '{key}' of {owner} must be a scalar, got {type(value).__name__}",
                response_data=value,
            )
        return value if isinstance(value, str) else str(value)

    return value


def _encode(value: Any) -> Any:
    if isinstance(value, WireModel):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_encode(item) for item in value]
    return value


class WireModel:
    """Mixin giving frozen dataclasses wire-format decoding and encoding."""

    @classmethod
    def _wire_fields(cls) -> Iterator[Tuple[dataclasses.Field, str, Any]]:
        hints = typing.get_type_hints(cls)
        for f in dataclasses.fields(cls):
            yield f, f.metadata.get("wire", f.name), hints[f.name]

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Build an instance from a wire payload."""
        if not isinstance(data, dict):
            raise ResponseDecodeError(
                f"Expected JSON object for {cls.__name__}, got {type(data).__name__}",
                response_data=data,
            )

        kwargs = {}
        for f, key, hint in cls._wire_fields():
            inner, optional = _unwrap_optional(hint)
            value = data.get(key)
            if value is None:
                if not optional:
                    raise ResponseDecodeError(
                        f"Missing required field '{key}' in {cls.__name__}",
                        response_data=data,
                    )
                kwargs[f.name] = None
                continue
            kwargs[f.name] = _decode(inner, value, cls.__name__, key)

        return cls(**kwargs)

    @classmethod
    def from_list(cls: Type[T], items: Any) -> List[T]:
        """Build a list of instances from a wire array."""
        if not isinstance(items, list):
            raise ResponseDecodeError(
                f"Expected JSON array of {cls.__name__}, got {type(items).__name__}",
                response_data=items,
            )
        return [cls.from_dict(item) for item in items]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a wire payload, omitting absent optional fields."""
        result = {}
        for f, key, _ in self._wire_fields():
            value = getattr(self, f.name)
            if value is None:
                continue
            result[key] = _encode(value)
        return result
