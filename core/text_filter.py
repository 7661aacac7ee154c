from core.models import Route


def text_filter(text: str, search: str) -> bool:
    """
    Check if a text contains all the words of a search string.
    Case-insensitive, AND semantics. An empty search matches everything.
    """
    haystack = text.lower()
    return all(word.lower() in haystack for word in search.split())


def route_search_text(route: Route) -> str:
    """Searchable representation of a route as shown in the routes menu."""
    route_type = getattr(route.type, "value", route.type)
    return f"{route_type} {route.method} /{route.endpoint} {route.documentation}"
