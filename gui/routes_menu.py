"""
------------------------------------------------------------------------------
Project:        RouteFlux
File:           gui/routes_menu.py
Version:        1.0.0
Description:    View model behind the routes menu. Owns the materialized
                folder/route tree of the active environment, the shared
                filter text and one visibility signal per route. Every
                rebuild revokes the signals of the previous generation.
------------------------------------------------------------------------------
"""

from typing import List, Optional, Set

from PyQt6.QtCore import QObject, pyqtSignal

from core.config import AppConfig
from core.duplicates import RouteLike, environment_has_route, find_duplicated_routes
from core.logger import get_logger
from core.models import Environment
from core.paths import build_full_path
from core.route_tree import CycleDetectedError, RootFolder, build_root_folder
from gui.filter_source import FilterTextSource
from gui.route_visibility import RouteVisibility, make_visibility_factory

logger = get_logger("gui.routes_menu")


class RoutesMenuModel(QObject):
    """
    Rebuilds the routes menu tree whenever the active environment changes.
    """
    tree_changed = pyqtSignal(object)  # RootFolder
    build_failed = pyqtSignal(str)

    def __init__(
        self,
        app_config: Optional[AppConfig] = None,
        debounce_ms: Optional[int] = None,
        parent: QObject = None,
    ):
        super().__init__(parent)
        self.app_config = app_config
        if debounce_ms is None:
            debounce_ms = (app_config or AppConfig()).get_debounce_ms()
        self.debounce_ms = debounce_ms

        self.filter_source = FilterTextSource(parent=self)
        self._environment: Optional[Environment] = None
        self._root = RootFolder()
        self._visibilities: List[RouteVisibility] = []
        self.generation = 0

    def environment(self) -> Optional[Environment]:
        return self._environment

    def root(self) -> RootFolder:
        return self._root

    def active_visibilities(self) -> List[RouteVisibility]:
        return list(self._visibilities)

    def set_filter(self, text: str):
        self.filter_source.set_text(text)

    def set_environment(self, environment: Optional[Environment]):
        """
        Materializes the tree of the given environment.
        Equal snapshots are ignored, None clears the menu.
        """
        if environment is not None and environment == self._environment:
            return

        self._revoke_visibilities()
        self.generation += 1
        # Private snapshot, the caller may mutate its object in place
        if environment is not None:
            environment = environment.model_copy(deep=True)
        self._environment = environment

        if environment is None:
            self._publish(RootFolder())
            return

        factory = make_visibility_factory(
            self.filter_source,
            debounce_ms=self.debounce_ms,
            parent=self,
            on_created=self._visibilities.append,
        )
        try:
            root = build_root_folder(environment, factory)
        except CycleDetectedError as e:
            logger.error(f"Cannot build routes menu of environment {environment.uuid}: {e}")
            self._revoke_visibilities()
            self._publish(RootFolder())
            self.build_failed.emit(str(e))
            return

        logger.debug(
            f"Routes menu generation {self.generation}: "
            f"{len(self._visibilities)} routes in environment {environment.uuid}"
        )
        self._publish(root)

    def _publish(self, root: RootFolder):
        self._root = root
        self.tree_changed.emit(root)

    def _revoke_visibilities(self):
        for visibility in self._visibilities:
            visibility.dispose()
            visibility.setParent(None)
        self._visibilities = []

    def duplicated_routes(self) -> Set[str]:
        """Uuids of the routes of the active environment that have a duplicate."""
        if self._environment is None:
            return set()
        return find_duplicated_routes(self._environment.routes)

    def check_duplicate(self, candidate: RouteLike) -> bool:
        """True if the candidate route would duplicate an existing route."""
        if self._environment is None:
            return False
        return environment_has_route(self._environment, candidate)

    def route_full_path(self, route_uuid: str) -> str:
        if self._environment is None:
            return ""
        return build_full_path(self._environment, self._environment.get_route(route_uuid))

    def collapsed_folders(self) -> List[str]:
        if self._environment is None or self.app_config is None:
            return []
        return self.app_config.get_collapsed_folders(self._environment.uuid)

    def disabled_routes(self) -> List[str]:
        if self._environment is None or self.app_config is None:
            return []
        return self.app_config.get_disabled_routes(self._environment.uuid)

    def close(self):
        """Tears down all visibility signals and clears the tree."""
        self._revoke_visibilities()
        self._environment = None
        self._root = RootFolder()
