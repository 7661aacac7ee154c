"""
------------------------------------------------------------------------------
Project:        RouteFlux
File:           core/models/environment.py
Version:        1.0.0
Description:    Pydantic models for an environment snapshot: the flat pool of
                folders and routes plus the ordered child references that
                describe the menu hierarchy.
------------------------------------------------------------------------------
"""

import uuid
from typing import Any, List, Optional, Union
from pydantic import BaseModel, Field, ConfigDict

from core.models.types import EntityKind, RouteType


class FolderChild(BaseModel):
    """
    Ordered pointer to a direct child of a folder or of the root.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    uuid: str
    type: EntityKind


class Folder(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    uuid: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = "New folder"
    children: List[FolderChild] = Field(default_factory=list)


class ResponseRule(BaseModel):
    """
    A response-matching condition. Compared by value, never by identity.
    All fields stay None when the persisted rule did not carry them.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    target: Optional[str] = None
    modifier: Optional[str] = None
    value: Optional[Any] = None
    invert: Optional[bool] = None
    operator: Optional[str] = None


class RouteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    uuid: str = Field(default_factory=lambda: str(uuid.uuid4()))
    label: str = ""
    status_code: int = Field(200, alias="statusCode")
    rules: List[ResponseRule] = Field(default_factory=list)


class Route(BaseModel):
    """
    A mocked endpoint. Only the fields used for filtering and duplicate
    detection are modelled, the rest of the payload is kept as extra data.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    uuid: str = Field(default_factory=lambda: str(uuid.uuid4()))
    type: RouteType = RouteType.HTTP
    documentation: str = ""
    method: str = ""
    endpoint: str = ""
    responses: List[RouteResponse] = Field(default_factory=list)


class TLSOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    enabled: bool = False


class Environment(BaseModel):
    """
    Snapshot of one environment as handed over by the store.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    uuid: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = ""
    port: int = 3000
    hostname: str = ""
    endpoint_prefix: str = Field("", alias="endpointPrefix")
    tls_options: TLSOptions = Field(default_factory=TLSOptions, alias="tlsOptions")
    folders: List[Folder] = Field(default_factory=list)
    routes: List[Route] = Field(default_factory=list)
    root_children: List[FolderChild] = Field(default_factory=list, alias="rootChildren")

    def folders_and_routes(self) -> List[Union[Folder, Route]]:
        """The flat pool the menu tree is resolved from."""
        return [*self.folders, *self.routes]

    def get_route(self, route_uuid: str) -> Optional[Route]:
        for route in self.routes:
            if route.uuid == route_uuid:
                return route
        return None
