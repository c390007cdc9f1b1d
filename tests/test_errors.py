import pytest

from graphkit.errors import Location, QueryError, errorf


def _is(err, target):
    while err is not None:
        if err is target:
            return True
        unwrap = getattr(err, "unwrap", None)
        if unwrap is None:
            return False
        err = unwrap()
    return False


def test_errorf_wraps_error():
    cause = EOFError("EOF")
    err = errorf("boom: %v", cause)
    assert _is(err, cause)
    assert err.unwrap() is cause
    assert err.message == "boom: EOF"


def test_empty_error_does_not_match():
    cause = EOFError("EOF")
    err = QueryError()
    assert not _is(err, cause)
    assert err.unwrap() is None


def test_errorf_without_arguments():
    cause = EOFError("EOF")
    err = errorf("boom")
    assert not _is(err, cause)
    assert err.message == "boom"


def test_errorf_with_non_error_argument():
    cause = EOFError("EOF")
    err = errorf("boom: %v", "shaka")
    assert not _is(err, cause)
    assert err.message == "boom: shaka"


def test_errorf_quote_verb():
    err = errorf("root operation %q must be defined", "query")
    assert err.message == 'root operation "query" must be defined'


def test_str_includes_locations():
    err = QueryError(
        message="Argument \"episode\" has invalid value WRATH_OF_KHAN.",
        locations=[Location(line=3, column=20)],
    )
    assert str(err) == (
        'graphql: Argument "episode" has invalid value WRATH_OF_KHAN. (line 3, column 20)'
    )


def test_str_without_locations():
    assert str(QueryError(message="x")) == "graphql: x"


def test_location_before():
    assert Location(1, 5).before(Location(2, 1))
    assert Location(2, 1).before(Location(2, 3))
    assert not Location(2, 3).before(Location(2, 3))
    assert not Location(3, 1).before(Location(2, 9))


def test_to_dict_omits_empty_members():
    assert QueryError(message="x", rule="SomeRule").to_dict() == {"message": "x"}


def test_to_dict_full():
    err = QueryError(
        message="x",
        locations=[Location(2, 26)],
        path=["findDroids", 1, "name"],
        extensions={"code": "NotFound"},
    )
    assert err.to_dict() == {
        "message": "x",
        "locations": [{"line": 2, "column": 26}],
        "path": ["findDroids", 1, "name"],
        "extensions": {"code": "NotFound"},
    }


def test_query_error_can_be_raised():
    err = errorf("no operation with name %q", "Missing")
    assert err.message == 'no operation with name "Missing"'
    assert str(err) == 'graphql: no operation with name "Missing"'
    with pytest.raises(QueryError, match="no operation with name"):
        raise err