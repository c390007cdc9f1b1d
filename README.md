# graphkit

Small building blocks for GraphQL services, with no dependencies beyond the standard library.

## What is inside

- `graphkit.errors`
  - `QueryError` is an exception that carries `message`, `locations`, `path`, `rule`, `resolver_error` and `extensions`.
  - `str()` of a `QueryError` gives `graphql: <message>`, followed by ` (line L, column C)` for each location.
  - `QueryError.unwrap()` returns the underlying error.
  - `QueryError.to_dict()` gives the JSON shape. It always has `message`, and has `locations`, `path` and `extensions` only when they are not empty.
  - `Location(line, column)` has `before(other)`.
  - `errorf(format, *args)` expands `%v`, `%s`, `%d`, `%q`, `%t` and `%%`. When the last argument is an exception, it is kept as the cause.
- `graphkit.scalars`
  - The `Unmarshaler` protocol: `implements_graphql_type(name)` and `unmarshal_graphql(value)`.
  - `ID` is a `str` subclass. It accepts strings and integers.
  - `Int64` is an `int` subclass. It accepts integers, and floats that are whole numbers, in the signed 64-bit range. Out-of-range or fractional numbers raise `Int64FormatError`. Anything else raises `Int64TypeError`.
  - Both scalars have `to_json()`.
- `graphkit.cache`
  - `Hint(max_age, scope)` with `Scope.PUBLIC` or `Scope.PRIVATE`. `str(hint)` gives a Cache-Control value such as `public, max-age=3600`.
  - `ttl(seconds)` returns a `timedelta`.
  - `add_hint(hint)` records a hint in the active `hintable()` block and does nothing outside one.
  - `HintCollector.resolve()` and `resolve_hints(hints)` combine hints. The smallest max age wins, or 0 if none was given. Any private hint makes the result private.
- `graphkit.caching`: a `Resolver` whose `hello(name)` and `me()` add cache hints.
- `graphkit.customerrors`: a `Resolver` whose `droid(id)` raises `DroidNotFoundError`. The error has `extensions()` returning `{"code", "message"}`.
- `graphkit.social`: users with `AdminResolver`, `SearchResult`, and `User.friends_resolver(page)` paging with `Pagination`. Unknown users raise `LookupError`.
- `graphkit.starwars`: humans, droids and starships.
  - Friends are available as connections with base64 cursors: `new_friends_connection`, `encode_cursor`, `FriendsConnectionResolver`.
  - `convert_length(meters, unit)` handles `METER` and `FOOT`.
  - `Resolver` keeps the reviews created by `create_review` on its instance.

Each example module also holds its schema text as `SCHEMA`.

## Examples

```python
from graphkit.errors import errorf

err = errorf("boom: %s", OSError("disk"))
print(str(err))        # graphql: boom: disk
print(err.unwrap())    # disk
```

```python
from graphkit.cache import Hint, Scope, add_hint, hintable, ttl

with hintable() as collector:
    add_hint(Hint(max_age=ttl(3600), scope=Scope.PUBLIC))
    add_hint(Hint(max_age=ttl(60), scope=Scope.PRIVATE))

print(str(collector.resolve()))   # private, max-age=60
```

```python
from graphkit.starwars import Resolver

hero = Resolver().hero("EMPIRE")
print(hero.name)                            # Luke Skywalker
conn = hero.friends_connection(first=1)
print(conn.total_count())                   # 4
print([e.node().name for e in conn.edges()])  # ['Han Solo']
```

## What it does not do

graphkit does not parse schemas or query documents, and it does not validate or execute queries. The resolvers are plain Python objects that you call directly. The `SCHEMA` strings are text only. There is no HTTP server or command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```