import pytest

from restspec.matcher import (
    MATCH_NAME,
    MATCH_PATH,
    find_matching_resource,
    match_resource,
    normalize_uri,
    segment_values,
)
from restspec.spec import ApiSpec


@pytest.mark.parametrize("uri, resource, expected", [
    ("search", "search", True),
    ("search", "/search", True),
    ("search", "searches", False),
    ("search", "my/search", False),
    ("/users/:id", "users/:id", True),
    ("/users/:id", "/users/42", True),
    ("/users/:id", "users/42/posts", False),
    ("/users/:id/posts", "users/abc/posts", True),
    ("me.feed", "meXfeed", False),
])
def test_normalize_uri(uri, resource, expected):
    assert bool(normalize_uri(uri).match(resource)) is expected


def test_match_by_name(fb_spec):
    resource, matched_on = match_resource(fb_spec, "get", "search")
    assert resource.name == "search"
    assert matched_on == MATCH_NAME


def test_match_by_path_template_and_concrete_path(fb_spec):
    resource, matched_on = match_resource(fb_spec, "get", "users/:id")
    assert resource.name == "user"
    assert matched_on == MATCH_PATH

    resource, matched_on = match_resource(fb_spec, "get", "/users/42/posts")
    assert resource.name == "user posts"
    assert matched_on == MATCH_PATH


def test_verb_must_be_allowed(fb_spec):
    assert find_matching_resource(fb_spec, "post", "search") is None
    assert find_matching_resource(fb_spec, "delete", "user").name == "user"


def test_no_match(fb_spec):
    assert match_resource(fb_spec, "get", "unknown") == (None, None)


def test_first_match_in_declaration_order_wins():
    spec = ApiSpec.from_dict({
        "name": "dup",
        "api_root": "https://x.io",
        "resources": [
            {"name": "things", "path": "/v1/things", "methods": ["post"]},
            {"name": "things", "path": "/v2/things", "methods": ["get"]},
            {"name": "things", "path": "/v3/things", "methods": ["get"]},
        ],
    })

    first = find_matching_resource(spec, "get", "things")
    assert first.path == "/v2/things"
    # Deterministic across calls
    assert all(find_matching_resource(spec, "get", "things") is first for _ in range(5))


def test_segment_values():
    assert segment_values("users/:id", "users/42") == {"id": "42"}
    assert segment_values("users/:id", "users/:id") == {}
    assert segment_values("repos/:owner/:repo", "repos/octo/:repo") == {"owner": "octo"}
    assert segment_values("users/:id", "search") == {}


@pytest.mark.parametrize("resource", ["search\n", "users/42\n", "users/:id\n"])
def test_trailing_newline_does_not_match(fb_spec, resource):
    assert find_matching_resource(fb_spec, "get", resource) is None
