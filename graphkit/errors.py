"""Query errors reported by schema parsing, validation and execution."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any

_VERB = re.compile(r"%([%vsdqt])")


def _go_str(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _format(template: str, args: tuple[Any, ...]) -> str:
    """Expand %v, %s, %d, %q, %t and %% the way the message formats expect."""
    remaining = iter(args)

    def substitute(match: re.Match[str]) -> str:
        verb = match.group(1)
        if verb == "%":
            return "%"
        try:
            arg = next(remaining)
        except StopIteration:
            return f"%!{verb}(MISSING)"
        if verb == "q":
            return json.dumps(_go_str(arg), ensure_ascii=False)
        if verb == "d":
            return str(int(arg))
        return _go_str(arg)

    return _VERB.sub(substitute, template)


@dataclass(frozen=True)
class Location:
    """A line and column in a query document, both counted from 1."""

    line: int
    column: int

    def before(self, other: Location) -> bool:
        """Return True if this location comes before ``other``."""
        return (self.line, self.column) < (other.line, other.column)

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass(eq=False)
class QueryError(Exception):
    """An error in a GraphQL response, optionally wrapping its cause."""

    message: str = ""
    err: BaseException | None = None
    locations: list[Location] = field(default_factory=list)
    path: list[Any] = field(default_factory=list)
    rule: str = ""
    resolver_error: BaseException | None = None
    extensions: dict[str, Any] | None = None

    def __str__(self) -> str:
        text = f"graphql: {self.message}"
        for loc in self.locations:
            text += f" (line {loc.line}, column {loc.column})"
        return text

    def unwrap(self) -> BaseException | None:
        """Return the underlying error, if any."""
        return self.err

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of the error, leaving out empty members."""
        out: dict[str, Any] = {"message": self.message}
        if self.locations:
            out["locations"] = [loc.to_dict() for loc in self.locations]
        if self.path:
            out["path"] = list(self.path)
        if self.extensions:
            out["extensions"] = dict(self.extensions)
        return out


def errorf(format: str, *args: Any) -> QueryError:
    """Build a QueryError from a format; a trailing exception argument is wrapped."""
    cause = args[-1] if args and isinstance(args[-1], BaseException) else None
    error = QueryError(message=_format(format, args), err=cause)
    if cause is not None:
        error.__cause__ = cause
    return error