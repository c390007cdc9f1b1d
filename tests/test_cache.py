from datetime import timedelta

import pytest

from graphkit.cache import (
    Hint,
    HintCollector,
    Scope,
    add_hint,
    hintable,
    resolve_hints,
    ttl,
)


def test_ttl_is_duration():
    assert ttl(90) == timedelta(seconds=90)


def test_hint_string_public():
    assert str(Hint(max_age=ttl(3600), scope=Scope.PUBLIC)) == "public, max-age=3600"


def test_hint_string_private():
    assert str(Hint(max_age=ttl(60), scope=Scope.PRIVATE)) == "private, max-age=60"


def test_hint_string_needs_max_age():
    with pytest.raises(ValueError):
        str(Hint(scope=Scope.PUBLIC))


def test_resolve_no_hints_means_no_cache():
    assert resolve_hints([]) == Hint(max_age=timedelta(0), scope=Scope.PUBLIC)


def test_resolve_picks_shortest_and_private():
    hints = [
        Hint(max_age=ttl(3600), scope=Scope.PUBLIC),
        Hint(max_age=ttl(60), scope=Scope.PRIVATE),
        Hint(max_age=None, scope=Scope.PUBLIC),
    ]
    result = resolve_hints(hints)
    assert result.max_age == ttl(60)
    assert result.scope is Scope.PRIVATE


def test_resolve_ignores_missing_ages():
    result = resolve_hints([Hint(scope=Scope.PUBLIC), Hint(max_age=ttl(5))])
    assert result.max_age == ttl(5)
    assert result.scope is Scope.PUBLIC


def test_collector_resolves_added_hints():
    collector = HintCollector()
    collector.add(Hint(max_age=ttl(30), scope=Scope.PUBLIC))
    collector.add(Hint(max_age=ttl(10), scope=Scope.PUBLIC))
    assert collector.resolve() == Hint(max_age=ttl(10), scope=Scope.PUBLIC)


def test_hintable_collects_hints():
    with hintable() as collector:
        add_hint(Hint(max_age=ttl(120), scope=Scope.PRIVATE))
    assert collector.resolve() == Hint(max_age=ttl(120), scope=Scope.PRIVATE)


def test_add_hint_outside_hintable_is_ignored():
    add_hint(Hint(max_age=ttl(1), scope=Scope.PRIVATE))
    with hintable() as collector:
        pass
    assert collector.resolve() == Hint(max_age=timedelta(0), scope=Scope.PUBLIC)


def test_nested_hintable_keeps_hints_apart():
    with hintable() as outer:
        add_hint(Hint(max_age=ttl(50)))
        with hintable() as inner:
            add_hint(Hint(max_age=ttl(7), scope=Scope.PRIVATE))
        add_hint(Hint(max_age=ttl(40)))
    assert inner.resolve() == Hint(max_age=ttl(7), scope=Scope.PRIVATE)
    assert outer.resolve() == Hint(max_age=ttl(40), scope=Scope.PUBLIC)