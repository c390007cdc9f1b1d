"""An example resolver whose fields give cache hints."""

from __future__ import annotations

from dataclasses import dataclass

from graphkit.cache import Hint, Scope, add_hint, ttl

SCHEMA = """
	schema {
		query: Query
	}

	type Query {
		hello(name: String!): String!
		me: UserProfile!
	}

	type UserProfile {
		name: String!
	}
"""


@dataclass(frozen=True)
class UserProfile:
    name: str


class Resolver:
    """Root resolver of the caching example."""

    def hello(self, name: str) -> str:
        add_hint(Hint(max_age=ttl(60 * 60), scope=Scope.PUBLIC))
        return f"Hello {name}!"

    def me(self) -> UserProfile:
        add_hint(Hint(max_age=ttl(60), scope=Scope.PRIVATE))
        return UserProfile(name="World")