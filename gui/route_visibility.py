"""
------------------------------------------------------------------------------
Project:        RouteFlux
File:           gui/route_visibility.py
Version:        1.0.0
Description:    Per-route "hidden by the current filter" signal. Filter text
                changes are coalesced with a single-shot QTimer so that a
                burst of keystrokes leads to one evaluation.
------------------------------------------------------------------------------
"""

from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from core.config import AppConfig
from core.logger import get_logger
from core.models import Route
from core.text_filter import route_search_text, text_filter
from gui.filter_source import FilterTextSource

logger = get_logger("gui.visibility")


class RouteVisibility(QObject):
    """
    Lazily updated visibility of a single route.

    The route stays visible (is_hidden() is False) until the first
    debounced evaluation has run.
    """
    hidden_changed = pyqtSignal(bool)

    def __init__(
        self,
        route: Route,
        source: FilterTextSource,
        debounce_ms: int = AppConfig.DEFAULT_DEBOUNCE_MS,
        parent: QObject = None,
    ):
        super().__init__(parent)
        self.route = route
        self._source = source
        self._search_text = route_search_text(route)
        self._hidden = False
        self._evaluated = False
        self._disposed = False

        # Debounce: restart on every change, evaluate once with the latest text
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(max(0, int(debounce_ms)))
        self._timer.timeout.connect(self._evaluate)

        self._source.text_changed.connect(self._schedule)
        self._timer.start()

    def is_hidden(self) -> bool:
        return self._hidden

    def has_evaluated(self) -> bool:
        return self._evaluated

    def is_disposed(self) -> bool:
        return self._disposed

    def is_pending(self) -> bool:
        return self._timer.isActive()

    def _schedule(self, _text: str = ""):
        if self._disposed:
            return
        self._timer.start()

    def _evaluate(self):
        if self._disposed:
            return
        self._hidden = not text_filter(self._search_text, self._source.text())
        self._evaluated = True
        self.hidden_changed.emit(self._hidden)

    def dispose(self):
        """Stops the pending evaluation and detaches from the filter source."""
        if self._disposed:
            return
        self._disposed = True
        self._timer.stop()
        try:
            self._source.text_changed.disconnect(self._schedule)
        except (TypeError, RuntimeError):
            # Source already torn down by Qt
            logger.debug(f"Filter source of route {self.route.uuid} already disconnected")


def make_visibility_factory(
    source: FilterTextSource,
    debounce_ms: int = AppConfig.DEFAULT_DEBOUNCE_MS,
    parent: QObject = None,
    on_created: Optional[Callable[[RouteVisibility], None]] = None,
) -> Callable[[Route], RouteVisibility]:
    """Returns the callable the tree builder uses to wire each route node."""

    def factory(route: Route) -> RouteVisibility:
        visibility = RouteVisibility(route, source, debounce_ms=debounce_ms, parent=parent)
        if on_created is not None:
            on_created(visibility)
        return visibility

    return factory
