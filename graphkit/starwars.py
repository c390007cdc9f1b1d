"""An example schema and resolvers built around Star Wars characters."""

from __future__ import annotations

import base64
import binascii
from collections import defaultdict
from dataclasses import dataclass
from typing import Union

from graphkit.scalars import ID

SCHEMA = """
	schema {
		query: Query
		mutation: Mutation
	}
	# The query type, represents all of the entry points into our object graph
	type Query {
		hero(episode: Episode = NEWHOPE): Character
		reviews(episode: Episode!): [Review]!
		search(text: String!): [SearchResult]!
		character(id: ID!): Character
		droid(id: ID!): Droid
		human(id: ID!): Human
		starship(id: ID!): Starship
	}
	# The mutation type, represents all updates we can make to our data
	type Mutation {
		createReview(episode: Episode!, review: ReviewInput!): Review
	}
	# The episodes in the Star Wars trilogy
	enum Episode {
		# Star Wars Episode IV: A New Hope, released in 1977.
		NEWHOPE
		# Star Wars Episode V: The Empire Strikes Back, released in 1980.
		EMPIRE
		# Star Wars Episode VI: Return of the Jedi, released in 1983.
		JEDI
	}
	# A character from the Star Wars universe
	interface Character {
		# The ID of the character
		id: ID!
		# The name of the character
		name: String!
		# The friends of the character, or an empty list if they have none
		friends: [Character]
		# The friends of the character exposed as a connection with edges
		friendsConnection(first: Int, after: ID): FriendsConnection!
		# The movies this character appears in
		appearsIn: [Episode!]!
	}
	# Units of height
	enum LengthUnit {
		# The standard unit around the world
		METER
		# Primarily used in the United States
		FOOT
	}
	# A humanoid creature from the Star Wars universe
	type Human implements Character {
		# The ID of the human
		id: ID!
		# What this human calls themselves
		name: String!
		# Height in the preferred unit, default is meters
		height(unit: LengthUnit = METER): Float!
		# Mass in kilograms, or null if unknown
		mass: Float
		# This human's friends, or an empty list if they have none
		friends: [Character]
		# The friends of the human exposed as a connection with edges
		friendsConnection(first: Int, after: ID): FriendsConnection!
		# The movies this human appears in
		appearsIn: [Episode!]!
		# A list of starships this person has piloted, or an empty list if none
		starships: [Starship]
	}
	# An autonomous mechanical character in the Star Wars universe
	type Droid implements Character {
		# The ID of the droid
		id: ID!
		# What others call this droid
		name: String!
		# This droid's friends, or an empty list if they have none
		friends: [Character]
		# The friends of the droid exposed as a connection with edges
		friendsConnection(first: Int, after: ID): FriendsConnection!
		# The movies this droid appears in
		appearsIn: [Episode!]!
		# This droid's primary function
		primaryFunction: String
	}
	# A connection object for a character's friends
	type FriendsConnection {
		# The total number of friends
		totalCount: Int!
		# The edges for each of the character's friends.
		edges: [FriendsEdge]
		# A list of the friends, as a convenience when edges are not needed.
		friends: [Character]
		# Information for paginating this connection
		pageInfo: PageInfo!
	}
	# An edge object for a character's friends
	type FriendsEdge {
		# A cursor used for pagination
		cursor: ID!
		# The character represented by this friendship edge
		node: Character
	}
	# Information for paginating this connection
	type PageInfo {
		startCursor: ID
		endCursor: ID
		hasNextPage: Boolean!
	}
	# Represents a review for a movie
	type Review {
		# The number of stars this review gave, 1-5
		stars: Int!
		# Comment about the movie
		commentary: String
	}
	# The input object sent when someone is creating a new review
	input ReviewInput {
		# 0-5 stars
		stars: Int!
		# Comment about the movie, optional
		commentary: String
	}
	type Starship {
		# The ID of the starship
		id: ID!
		# The name of the starship
		name: String!
		# Length of the starship, along the longest axis
		length(unit: LengthUnit = METER): Float!
	}
	union SearchResult = Human | Droid | Starship
"""

_FEET_PER_METER = 3.28084


@dataclass(frozen=True)
class _Human:
    id: ID
    name: str
    friends: tuple[ID, ...]
    appears_in: tuple[str, ...]
    height: float
    mass: int
    starships: tuple[ID, ...] = ()


@dataclass(frozen=True)
class _Droid:
    id: ID
    name: str
    friends: tuple[ID, ...]
    appears_in: tuple[str, ...]
    primary_function: str


@dataclass(frozen=True)
class _Starship:
    id: ID
    name: str
    length: float


def _ids(*values: str) -> tuple[ID, ...]:
    return tuple(ID(value) for value in values)


_ALL_EPISODES = ("NEWHOPE", "EMPIRE", "JEDI")

_HUMANS = (
    _Human(ID("1000"), "Luke Skywalker", _ids("1002", "1003", "2000", "2001"),
           _ALL_EPISODES, 1.72, 77, _ids("3001", "3003")),
    _Human(ID("1001"), "Darth Vader", _ids("1004"),
           _ALL_EPISODES, 2.02, 136, _ids("3002")),
    _Human(ID("1002"), "Han Solo", _ids("1000", "1003", "2001"),
           _ALL_EPISODES, 1.8, 80, _ids("3000", "3003")),
    _Human(ID("1003"), "Leia Organa", _ids("1000", "1002", "2000", "2001"),
           _ALL_EPISODES, 1.5, 49),
    _Human(ID("1004"), "Wilhuff Tarkin", _ids("1001"), ("NEWHOPE",), 1.8, 0),
)

_DROIDS = (
    _Droid(ID("2000"), "C-3PO", _ids("1000", "1002", "1003", "2001"),
           _ALL_EPISODES, "Protocol"),
    _Droid(ID("2001"), "R2-D2", _ids("1000", "1002", "1003"),
           _ALL_EPISODES, "Astromech"),
)

_STARSHIPS = (
    _Starship(ID("3000"), "Millennium Falcon", 34.37),
    _Starship(ID("3001"), "X-Wing", 12.5),
    _Starship(ID("3002"), "TIE Advanced x1", 9.2),
    _Starship(ID("3003"), "Imperial shuttle", 20.0),
)

_HUMAN_DATA = {human.id: human for human in _HUMANS}
_DROID_DATA = {droid.id: droid for droid in _DROIDS}
_STARSHIP_DATA = {ship.id: ship for ship in _STARSHIPS}


def convert_length(meters: float, unit: str) -> float:
    """Convert a length in meters to the given unit (METER or FOOT)."""
    if unit == "METER":
        return meters
    if unit == "FOOT":
        return meters * _FEET_PER_METER
    raise ValueError("invalid unit")


def encode_cursor(index: int) -> ID:
    """Return the opaque cursor of the item at ``index``."""
    raw = f"cursor{index + 1}".encode()
    return ID(base64.b64encode(raw).decode("ascii"))


def _decode_cursor(cursor: str) -> int:
    try:
        raw = base64.b64decode(cursor, validate=True).decode("ascii")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ValueError(f"invalid cursor {cursor!r}") from exc
    text = raw[len("cursor"):] if raw.startswith("cursor") else raw
    try:
        return int(text)
    except ValueError as exc:
        raise ValueError(f"invalid cursor {cursor!r}") from exc


@dataclass(frozen=True)
class ReviewInput:
    stars: int
    commentary: str | None = None


@dataclass(frozen=True)
class ReviewResolver:
    stars: int
    commentary: str | None = None


@dataclass(frozen=True)
class HumanResolver:
    human: _Human

    @property
    def id(self) -> ID:
        return self.human.id

    @property
    def name(self) -> str:
        return self.human.name

    @property
    def appears_in(self) -> list[str]:
        return list(self.human.appears_in)

    def height(self, unit: str = "METER") -> float:
        return convert_length(self.human.height, unit)

    def mass(self) -> float | None:
        """Return the mass in kilograms, or None when it is unknown."""
        return float(self.human.mass) if self.human.mass else None

    def friends(self) -> list[CharacterResolver]:
        return resolve_characters(self.human.friends)

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        return new_friends_connection(self.human.friends, first, after)

    def starships(self) -> list[StarshipResolver]:
        return [StarshipResolver(_STARSHIP_DATA[ship]) for ship in self.human.starships]


@dataclass(frozen=True)
class DroidResolver:
    droid: _Droid

    @property
    def id(self) -> ID:
        return self.droid.id

    @property
    def name(self) -> str:
        return self.droid.name

    @property
    def appears_in(self) -> list[str]:
        return list(self.droid.appears_in)

    def friends(self) -> list[CharacterResolver]:
        return resolve_characters(self.droid.friends)

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        return new_friends_connection(self.droid.friends, first, after)

    def primary_function(self) -> str | None:
        return self.droid.primary_function or None


@dataclass(frozen=True)
class StarshipResolver:
    starship: _Starship

    @property
    def id(self) -> ID:
        return self.starship.id

    @property
    def name(self) -> str:
        return self.starship.name

    def length(self, unit: str = "METER") -> float:
        return convert_length(self.starship.length, unit)


@dataclass(frozen=True)
class CharacterResolver:
    """A human or a droid seen through the Character interface."""

    character: Union[HumanResolver, DroidResolver]

    @property
    def id(self) -> ID:
        return self.character.id

    @property
    def name(self) -> str:
        return self.character.name

    @property
    def appears_in(self) -> list[str]:
        return self.character.appears_in

    def friends(self) -> list[CharacterResolver]:
        return self.character.friends()

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        return self.character.friends_connection(first, after)

    def to_human(self) -> HumanResolver | None:
        return self.character if isinstance(self.character, HumanResolver) else None

    def to_droid(self) -> DroidResolver | None:
        return self.character if isinstance(self.character, DroidResolver) else None


@dataclass(frozen=True)
class SearchResultResolver:
    result: Union[HumanResolver, DroidResolver, StarshipResolver]

    def to_human(self) -> HumanResolver | None:
        return self.result if isinstance(self.result, HumanResolver) else None

    def to_droid(self) -> DroidResolver | None:
        return self.result if isinstance(self.result, DroidResolver) else None

    def to_starship(self) -> StarshipResolver | None:
        return self.result if isinstance(self.result, StarshipResolver) else None


@dataclass(frozen=True)
class FriendsEdgeResolver:
    cursor: ID
    id: ID

    def node(self) -> CharacterResolver | None:
        return resolve_character(self.id)


@dataclass(frozen=True)
class PageInfoResolver:
    start_cursor: ID
    end_cursor: ID
    has_next_page: bool


@dataclass(frozen=True)
class FriendsConnectionResolver:
    ids: tuple[ID, ...]
    start: int
    stop: int

    def total_count(self) -> int:
        return len(self.ids)

    def edges(self) -> list[FriendsEdgeResolver]:
        return [
            FriendsEdgeResolver(cursor=encode_cursor(index), id=self.ids[index])
            for index in range(self.start, self.stop)
        ]

    def friends(self) -> list[CharacterResolver]:
        return resolve_characters(self.ids[self.start:self.stop])

    def page_info(self) -> PageInfoResolver:
        return PageInfoResolver(
            start_cursor=encode_cursor(self.start),
            end_cursor=encode_cursor(self.stop - 1),
            has_next_page=self.stop < len(self.ids),
        )


def new_friends_connection(
    ids: tuple[ID, ...] | list[ID], first: int | None = None, after: str | None = None
) -> FriendsConnectionResolver:
    """Page through ``ids``: start after the ``after`` cursor, take at most ``first``."""
    items = tuple(ids)
    start = _decode_cursor(after) if after is not None else 0
    if not 0 <= start <= len(items):
        raise ValueError(f"cursor position {start} out of range")
    stop = len(items)
    if first is not None:
        if first < 0:
            raise ValueError("first must not be negative")
        stop = min(start + first, len(items))
    return FriendsConnectionResolver(ids=items, start=start, stop=stop)


def resolve_character(id: str) -> CharacterResolver | None:
    """Return the human or droid with the given ID, or None."""
    key = ID(id)
    human = _HUMAN_DATA.get(key)
    if human is not None:
        return CharacterResolver(HumanResolver(human))
    droid = _DROID_DATA.get(key)
    if droid is not None:
        return CharacterResolver(DroidResolver(droid))
    return None


def resolve_characters(ids: tuple[ID, ...] | list[ID]) -> list[CharacterResolver]:
    """Return the characters for the IDs that name one, in order."""
    return [c for c in (resolve_character(i) for i in ids) if c is not None]


class Resolver:
    """Root resolver of the Star Wars example; reviews live on the instance."""

    def __init__(self) -> None:
        self._reviews: defaultdict[str, list[ReviewResolver]] = defaultdict(list)

    def hero(self, episode: str = "NEWHOPE") -> CharacterResolver:
        if episode == "EMPIRE":
            return CharacterResolver(HumanResolver(_HUMAN_DATA[ID("1000")]))
        return CharacterResolver(DroidResolver(_DROID_DATA[ID("2001")]))

    def reviews(self, episode: str) -> list[ReviewResolver]:
        return list(self._reviews.get(episode, ()))

    def search(self, text: str) -> list[SearchResultResolver]:
        results = [SearchResultResolver(HumanResolver(h)) for h in _HUMANS if text in h.name]
        results += [SearchResultResolver(DroidResolver(d)) for d in _DROIDS if text in d.name]
        results += [
            SearchResultResolver(StarshipResolver(s)) for s in _STARSHIPS if text in s.name
        ]
        return results

    def character(self, id: str) -> CharacterResolver | None:
        return resolve_character(id)

    def human(self, id: str) -> HumanResolver | None:
        human = _HUMAN_DATA.get(ID(id))
        return HumanResolver(human) if human is not None else None

    def droid(self, id: str) -> DroidResolver | None:
        droid = _DROID_DATA.get(ID(id))
        return DroidResolver(droid) if droid is not None else None

    def starship(self, id: str) -> StarshipResolver | None:
        ship = _STARSHIP_DATA.get(ID(id))
        return StarshipResolver(ship) if ship is not None else None

    def create_review(self, episode: str, review: ReviewInput) -> ReviewResolver:
        created = ReviewResolver(stars=review.stars, commentary=review.commentary)
        self._reviews[episode].append(created)
        return created