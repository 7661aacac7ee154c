"""
------------------------------------------------------------------------------
Project:        RouteFlux
File:           core/models/types.py
Version:        1.0.0
Description:    Centralized enumeration and type definitions.
------------------------------------------------------------------------------
"""

from enum import Enum


class RouteType(str, Enum):
    """Kinds of mocked endpoints."""
    HTTP = "http"
    WS = "ws"
    CRUD = "crud"


class EntityKind(str, Enum):
    """Discriminant of a child reference inside a folder or the root."""
    FOLDER = "folder"
    ROUTE = "route"

