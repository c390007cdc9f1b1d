from datetime import timedelta

from graphkit.cache import Hint, Scope, hintable
from graphkit.caching import SCHEMA, Resolver, UserProfile


def test_hello_greets_and_hints_public_hour():
    with hintable() as collector:
        assert Resolver().hello("Ada") == "Hello Ada!"
    assert collector.resolve() == Hint(max_age=timedelta(hours=1), scope=Scope.PUBLIC)


def test_me_returns_world_and_hints_private_minute():
    with hintable() as collector:
        profile = Resolver().me()
    assert profile == UserProfile(name="World")
    assert collector.resolve() == Hint(max_age=timedelta(minutes=1), scope=Scope.PRIVATE)


def test_combined_request_is_private_and_shortest():
    resolver = Resolver()
    with hintable() as collector:
        resolver.hello("Ada")
        resolver.me()
    hint = collector.resolve()
    assert hint.scope is Scope.PRIVATE
    assert hint.max_age == timedelta(minutes=1)


def test_resolvers_work_without_hint_collection():
    assert Resolver().hello("World") == "Hello World!"
    assert Resolver().me().name == "World"


def test_schema_fields_are_resolved():
    assert "hello(name: String!): String!" in SCHEMA
    assert "me: UserProfile!" in SCHEMA
    resolver = Resolver()
    assert resolver.hello("") == "Hello !"
    assert resolver.me() == UserProfile(name="World")