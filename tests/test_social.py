import pytest

from graphkit.social import AdminResolver, Pagination, Resolver, SearchResult


def _names(users):
    return [user.name for user in users]


def test_admin_found_exposes_user():
    admin = Resolver().admin("0x01")
    assert admin.name == "Albus Dumbledore"
    assert admin.role == "ADMIN"
    user = admin.to_user()
    assert user.email == "[email]"
    assert user.id == "0x01"


def test_admin_with_wrong_role_fails():
    with pytest.raises(LookupError, match="user with id=0x02 and role=ADMIN does not exist"):
        Resolver().admin("0x02")


def test_admin_with_matching_role():
    admin = Resolver().admin("0x02", role="USER")
    assert admin.name == "Harry Potter"


def test_user_lookup_and_missing():
    assert Resolver().user("0x03").name == "Hermione Granger"
    with pytest.raises(LookupError, match="user with id=0x99 does not exist"):
        Resolver().user("0x99")


def test_friends_without_page():
    harry = Resolver().user("0x02")
    assert _names(harry.friends_resolver()) == [
        "Albus Dumbledore",
        "Hermione Granger",
        "Ronald Weasley",
    ]


def test_friends_with_first():
    harry = Resolver().user("0x02")
    assert _names(harry.friends_resolver(Pagination(first=1))) == [
        "Hermione Granger",
        "Ronald Weasley",
    ]


def test_friends_with_last_zero_means_all():
    harry = Resolver().user("0x02")
    assert len(harry.friends_resolver(Pagination(last=0))) == len(harry.friends)


def test_friends_with_first_and_last():
    harry = Resolver().user("0x02")
    page = harry.friends_resolver(Pagination(first=1, last=2))
    assert page == harry.friends[1:2]


def test_friends_first_beyond_count_fails():
    harry = Resolver().user("0x02")
    with pytest.raises(ValueError, match="not enough users"):
        harry.friends_resolver(Pagination(first=5))


def test_search_matches_substring():
    results = Resolver().search("Harry")
    assert [r.to_user().name for r in results] == ["Harry Potter"]
    assert Resolver().search("zzz") == []


def test_search_empty_text_matches_all():
    assert len(Resolver().search("")) == 4


def test_non_user_results_do_not_convert():
    assert SearchResult("not a user").to_user() is None
    assert AdminResolver(object()).to_user() is None


def test_friendships_are_linked():
    albus = Resolver().user("0x01")
    assert _names(albus.friends_resolver()) == ["Harry Potter"]