"""An example schema of users with interfaces, unions and pagination."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from graphkit.scalars import ID

SCHEMA = """
	schema {
		query: Query
	}

	type Query {
		admin(id: ID!, role: Role = ADMIN): Admin!
		user(id: ID!): User!
		search(text: String!): [SearchResult]!
	}

	interface Admin {
		id: ID!
		name: String!
		role: Role!
	}

	interface Person {
		name: String!
	}

	scalar Time

	type User implements Admin & Person {
		id: ID!
		name: String!
		email: String!
		role: Role!
		phone: String!
		address: [String!]
		friends(page: Pagination): [User]
		createdAt: Time!
	}

	input Pagination {
	  	first: Int
	  	last: Int
	}

	enum Role {
		ADMIN
		USER
	}

	union SearchResult = User
"""


@dataclass(frozen=True)
class Pagination:
    first: float | None = None
    last: float | None = None


@dataclass(eq=False)
class User:
    id: ID
    name: str
    role: str
    email: str
    phone: str
    address: list[str] | None = None
    friends: list[User] = field(default_factory=list, repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def friends_resolver(self, page: Pagination | None = None) -> list[User]:
        """Return this user's friends, cut down to the requested page."""
        count = len(self.friends)
        start, stop = 0, count
        if page is not None:
            if page.first is not None:
                start = int(page.first)
                if start > count:
                    raise ValueError("not enough users")
            if page.last is not None:
                stop = int(page.last)
                if stop == 0 or stop > count:
                    stop = count
        if start < 0 or stop < start:
            raise ValueError(f"invalid page bounds [{start}:{stop}]")
        return self.friends[start:stop]


@dataclass(frozen=True)
class AdminResolver:
    admin: Any

    @property
    def id(self) -> ID:
        return self.admin.id

    @property
    def name(self) -> str:
        return self.admin.name

    @property
    def role(self) -> str:
        return self.admin.role

    def to_user(self) -> User | None:
        return self.admin if isinstance(self.admin, User) else None


@dataclass(frozen=True)
class SearchResult:
    result: Any

    def to_user(self) -> User | None:
        return self.result if isinstance(self.result, User) else None


def _build_users() -> list[User]:
    albus = User(ID("0x01"), "Albus Dumbledore", "ADMIN", "[email]", "[phone]",
                 ["Office @ Hogwarts", "where Horcruxes are"])
    harry = User(ID("0x02"), "Harry Potter", "USER", "[email]", "[phone]",
                 ["123 dorm room @ Hogwarts", "456 random place"])
    hermione = User(ID("0x03"), "Hermione Granger", "USER", "[email]", "[phone]",
                    ["233 dorm room @ Hogwarts", "786 @ random place"])
    ronald = User(ID("0x04"), "Ronald Weasley", "USER", "[email]", "[phone]",
                  ["411 dorm room @ Hogwarts", "981 @ random place"])
    albus.friends = [harry]
    harry.friends = [albus, hermione, ronald]
    hermione.friends = [harry, ronald]
    ronald.friends = [harry, hermione]
    return [albus, harry, hermione, ronald]


USERS = _build_users()
_USERS_BY_ID = {user.id: user for user in USERS}


class Resolver:
    """Root resolver of the social example."""

    def admin(self, id: str, role: str = "ADMIN") -> AdminResolver:
        user = _USERS_BY_ID.get(ID(id))
        if user is not None and user.role == role:
            return AdminResolver(copy.copy(user))
        raise LookupError(f"user with id={id} and role={role} does not exist")

    def user(self, id: str) -> User:
        user = _USERS_BY_ID.get(ID(id))
        if user is None:
            raise LookupError(f"user with id={id} does not exist")
        return copy.copy(user)

    def search(self, text: str) -> list[SearchResult]:
        return [SearchResult(user) for user in USERS if text in user.name]