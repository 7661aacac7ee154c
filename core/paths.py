from typing import Optional

from core.models import Environment, Route, RouteType


def build_api_url(environment: Environment) -> str:
    """Host part of the mock API: the configured hostname or localhost:<port>."""
    return environment.hostname or f"localhost:{environment.port}"


def build_full_path(environment: Optional[Environment], route: Optional[Route]) -> str:
    """
    Build a full API endpoint path with protocol, domain and port.

    Returns an empty string if the environment or the route is missing.
    """
    if environment is None or route is None:
        return ""

    tls = environment.tls_options.enabled
    if route.type == RouteType.WS:
        protocol = "wss://" if tls else "ws://"
    else:
        protocol = "https://" if tls else "http://"

    route_url = f"{protocol}{build_api_url(environment)}/"

    if environment.endpoint_prefix:
        route_url += environment.endpoint_prefix + "/"

    # undo the regex escaping done in the route editor
    route_url += route.endpoint.replace("\\(", "(").replace("\\)", ")")

    return route_url
