"""Custom scalar types: ID and Int64, and the protocol they follow."""

from __future__ import annotations

import json
import math
from typing import Any, Protocol, runtime_checkable

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@runtime_checkable
class Unmarshaler(Protocol):
    """A type mapped to a custom GraphQL scalar."""

    def implements_graphql_type(self, name: str) -> bool:
        """Return True if this type implements the named scalar."""
        ...

    def unmarshal_graphql(self, value: Any) -> Any:
        """Build a value of this type from a GraphQL input value."""
        ...


class ID(str):
    """GraphQL's ID scalar."""

    def implements_graphql_type(self, name: str) -> bool:
        return name == "ID"

    @classmethod
    def unmarshal_graphql(cls, value: Any) -> ID:
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(str(value))
        raise TypeError(f"wrong type for ID: {type(value).__name__}")

    def to_json(self) -> str:
        return json.dumps(str(self), ensure_ascii=False)


class Int64FormatError(ValueError):
    """The input is a number that is not a signed 64-bit integer."""

    def __init__(self) -> None:
        super().__init__(
            "Scalar.Int64: wrong input format, expected a signed 64-bit integers"
        )


class Int64TypeError(TypeError):
    """The input is not a number."""

    def __init__(self) -> None:
        super().__init__("Scalar.Int64: wrong input type")


class Int64(int):
    """A signed 64-bit integer scalar."""

    def implements_graphql_type(self, name: str) -> bool:
        return name == "Int64"

    @classmethod
    def unmarshal_graphql(cls, value: Any) -> Int64:
        if isinstance(value, bool):
            raise Int64TypeError()
        if isinstance(value, int):
            if not _INT64_MIN <= value <= _INT64_MAX:
                raise Int64FormatError()
            return cls(value)
        if isinstance(value, float):
            if not math.isfinite(value) or not value.is_integer():
                raise Int64FormatError()
            coerced = int(value)
            if not _INT64_MIN <= coerced <= _INT64_MAX:
                raise Int64FormatError()
            return cls(coerced)
        raise Int64TypeError()

    def to_json(self) -> str:
        return str(int(self))