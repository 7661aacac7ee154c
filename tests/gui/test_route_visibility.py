import pytest
from core.models import Route, RouteType
from gui.filter_source import FilterTextSource
from gui.route_visibility import RouteVisibility, make_visibility_factory

@pytest.fixture
def route():
    return Route(uuid="r1", type=RouteType.HTTP, method="get", endpoint="users/list",
                 documentation="List users")

@pytest.fixture
def source():
    return FilterTextSource()

def test_initial_value_is_debounced(qtbot, route, source):
    visibility = RouteVisibility(route, source, debounce_ms=50)
    assert visibility.is_pending()
    assert not visibility.has_evaluated()
    assert visibility.is_hidden() is False

    with qtbot.waitSignal(visibility.hidden_changed, timeout=1000) as blocker:
        pass
    assert blocker.args == [False]
    assert visibility.has_evaluated()

def test_filter_hides_non_matching_route(qtbot, route):
    source = FilterTextSource("post")
    visibility = RouteVisibility(route, source, debounce_ms=20)
    qtbot.waitUntil(visibility.has_evaluated, timeout=1000)
    assert visibility.is_hidden() is True

    with qtbot.waitSignal(visibility.hidden_changed, timeout=1000) as blocker:
        source.set_text("GET list")
    assert blocker.args == [False]

def test_not_evaluated_inline_with_keystroke(qtbot, route, source):
    visibility = RouteVisibility(route, source, debounce_ms=20)
    qtbot.waitUntil(visibility.has_evaluated, timeout=1000)

    source.set_text("nomatch")
    # still the previous value until the debounce window elapsed
    assert visibility.is_hidden() is False
    assert visibility.is_pending()
    qtbot.waitUntil(visibility.is_hidden, timeout=1000)

def test_burst_is_coalesced_into_one_evaluation(qtbot, route, source):
    visibility = RouteVisibility(route, source, debounce_ms=100)
    qtbot.waitUntil(visibility.has_evaluated, timeout=1000)

    emitted = []
    visibility.hidden_changed.connect(emitted.append)
    for text in ("p", "po", "pos", "post", "users"):
        source.set_text(text)
    qtbot.wait(400)

    # one evaluation, with the last value ("users" matches)
    assert emitted == [False]

def test_dispose_revokes_signal(qtbot, route, source):
    visibility = RouteVisibility(route, source, debounce_ms=20)
    emitted = []
    visibility.hidden_changed.connect(emitted.append)
    visibility.dispose()
    visibility.dispose()

    source.set_text("post")
    qtbot.wait(150)

    assert emitted == []
    assert visibility.is_disposed()
    assert not visibility.is_pending()

def test_factory_creates_independent_signals(qtbot, source):
    created = []
    factory = make_visibility_factory(source, debounce_ms=10, on_created=created.append)
    users = factory(Route(uuid="a", endpoint="users"))
    books = factory(Route(uuid="b", endpoint="books"))

    assert created == [users, books]
    assert users is not books

    source.set_text("books")
    qtbot.waitUntil(lambda: users.is_hidden() and books.has_evaluated(), timeout=1000)
    assert books.is_hidden() is False
