"""
------------------------------------------------------------------------------
Project:        RouteFlux
File:           core/models/__init__.py
Version:        1.0.0
Description:    Package initializer for core data models. Exports the
                environment snapshot entities for easy access.
------------------------------------------------------------------------------
"""

from .types import EntityKind, RouteType
from .environment import (
    Environment,
    Folder,
    FolderChild,
    ResponseRule,
    Route,
    RouteResponse,
    TLSOptions,
)
