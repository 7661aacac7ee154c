"""
------------------------------------------------------------------------------
Project:        RouteFlux
File:           core/duplicates.py
Version:        1.0.0
Description:    Identifies routes that answer the same logical endpoint.
                Used before create/duplicate/paste operations and for the
                "duplicated route" markers of the routes menu.
------------------------------------------------------------------------------
"""

from typing import Dict, Iterable, List, NamedTuple, Set, Union

from core.models import Environment, Route, RouteType


class RouteKey(NamedTuple):
    """The subset of a route that identifies its endpoint."""
    type: RouteType
    endpoint: str
    method: str = ""


RouteLike = Union[Route, RouteKey]


def is_route_duplicate(route_a: RouteLike, route_b: RouteLike) -> bool:
    """
    Check if two routes are duplicates, if:
    - CRUD + same endpoint
    - HTTP + same endpoint + same method

    Accepts Route objects or anything exposing type/endpoint/method.
    """
    if route_a.type == RouteType.CRUD and route_b.type == RouteType.CRUD:
        return route_a.endpoint == route_b.endpoint

    if route_a.type == RouteType.HTTP and route_b.type == RouteType.HTTP:
        return route_a.endpoint == route_b.endpoint and route_a.method == route_b.method

    return False


def has_duplicate(existing: Iterable[RouteLike], candidate: RouteLike) -> bool:
    """True if any route of existing is a duplicate of candidate."""
    return any(is_route_duplicate(route, candidate) for route in existing)


def environment_has_route(environment: Environment, candidate: RouteLike) -> bool:
    """Check if an environment has a route that is a duplicate of the candidate."""
    return has_duplicate(environment.routes, candidate)


def find_duplicated_routes(routes: List[Route]) -> Set[str]:
    """
    Returns the uuids of all routes duplicating at least one other route
    of the same list.
    """
    duplicated: Set[str] = set()
    n = len(routes)
    for i in range(n):
        for j in range(i + 1, n):
            if is_route_duplicate(routes[i], routes[j]):
                duplicated.add(routes[i].uuid)
                duplicated.add(routes[j].uuid)
    return duplicated


def find_duplicated_routes_by_environment(environments: Iterable[Environment]) -> Dict[str, Set[str]]:
    """Duplicated route uuids per environment uuid. Environments without duplicates are left out."""
    result: Dict[str, Set[str]] = {}
    for environment in environments:
        duplicated = find_duplicated_routes(environment.routes)
        if duplicated:
            result[environment.uuid] = duplicated
    return result
