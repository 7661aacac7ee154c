import itertools
import pytest
from core.models import Environment, Route, RouteType
from core.duplicates import (
    RouteKey,
    is_route_duplicate,
    has_duplicate,
    environment_has_route,
    find_duplicated_routes,
    find_duplicated_routes_by_environment,
)

def test_crud_same_endpoint_is_duplicate():
    a = Route(uuid="a", type=RouteType.CRUD, endpoint="/users", method="get", documentation="one")
    b = Route(uuid="b", type=RouteType.CRUD, endpoint="/users", method="post", documentation="two")
    assert is_route_duplicate(a, b)

def test_http_method_mismatch_is_not_duplicate():
    a = RouteKey(RouteType.HTTP, "/users", "get")
    b = RouteKey(RouteType.HTTP, "/users", "post")
    assert not is_route_duplicate(a, b)
    assert is_route_duplicate(a, RouteKey(RouteType.HTTP, "/users", "get"))

def test_different_kinds_are_never_duplicates():
    assert not is_route_duplicate(RouteKey(RouteType.HTTP, "/users", ""), RouteKey(RouteType.CRUD, "/users", ""))
    assert not is_route_duplicate(RouteKey(RouteType.WS, "/live", ""), RouteKey(RouteType.WS, "/live", ""))

def test_plain_string_types_are_accepted():
    assert is_route_duplicate(RouteKey("crud", "/users"), RouteKey(RouteType.CRUD, "/users"))

KEYS = [
    RouteKey(RouteType.HTTP, "/users", "get"),
    RouteKey(RouteType.HTTP, "/users", "post"),
    RouteKey(RouteType.CRUD, "/users", ""),
    RouteKey(RouteType.CRUD, "/users", "get"),
    RouteKey(RouteType.WS, "/users", ""),
    RouteKey(RouteType.HTTP, "/books", "get"),
]

@pytest.mark.parametrize("a,b", list(itertools.product(KEYS, KEYS)))
def test_duplicate_symmetry(a, b):
    assert is_route_duplicate(a, b) == is_route_duplicate(b, a)

def test_has_duplicate():
    existing = [KEYS[1], KEYS[5]]
    assert has_duplicate(existing, RouteKey(RouteType.HTTP, "/books", "get"))
    assert not has_duplicate(existing, RouteKey(RouteType.HTTP, "/books", "put"))
    assert not has_duplicate([], KEYS[0])

def test_environment_has_route(nested_environment):
    assert environment_has_route(nested_environment, RouteKey(RouteType.HTTP, "users", "get"))
    assert environment_has_route(nested_environment, RouteKey(RouteType.CRUD, "admin/users"))
    assert not environment_has_route(nested_environment, RouteKey(RouteType.HTTP, "users", "delete"))

def test_find_duplicated_routes():
    routes = [
        Route(uuid="a", type=RouteType.HTTP, endpoint="users", method="get"),
        Route(uuid="b", type=RouteType.HTTP, endpoint="users", method="post"),
        Route(uuid="c", type=RouteType.HTTP, endpoint="users", method="get"),
        Route(uuid="d", type=RouteType.CRUD, endpoint="books"),
        Route(uuid="e", type=RouteType.CRUD, endpoint="books"),
        Route(uuid="f", type=RouteType.WS, endpoint="live"),
        Route(uuid="g", type=RouteType.WS, endpoint="live"),
    ]
    assert find_duplicated_routes(routes) == {"a", "c", "d", "e"}
    assert find_duplicated_routes([]) == set()

def test_find_duplicated_routes_by_environment(nested_environment):
    dup_env = Environment(uuid="env-2", routes=[
        Route(uuid="x", type=RouteType.CRUD, endpoint="items"),
        Route(uuid="y", type=RouteType.CRUD, endpoint="items"),
    ])
    assert find_duplicated_routes_by_environment([nested_environment, dup_env]) == {"env-2": {"x", "y"}}

def test_route_and_key_can_be_mixed():
    route = Route(uuid="a", type=RouteType.HTTP, endpoint="users", method="get")
    assert is_route_duplicate(route, RouteKey(RouteType.HTTP, "users", "get"))
    assert has_duplicate([route], RouteKey("http", "users", "get"))
    assert not has_duplicate([RouteKey(RouteType.CRUD, "users")], route)
