"""
------------------------------------------------------------------------------
Project:        RouteFlux
File:           core/route_tree.py
Version:        1.0.0
Description:    Materializes the ordered folder/route tree of the routes menu
                from the flat pool of an environment and its child reference
                lists. Nodes are immutable and rebuilt on every change.
------------------------------------------------------------------------------
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from core.logger import get_logger
from core.models import EntityKind, Environment, Folder, FolderChild, Route

logger = get_logger("tree")

VisibilityFactory = Callable[[Route], Any]


class CycleDetectedError(ValueError):
    """A folder lists itself, directly or indirectly, among its children."""

    def __init__(self, path: Sequence[str]):
        self.path = tuple(path)
        super().__init__(f"Folder cycle detected: {' -> '.join(self.path)}")


@dataclass(frozen=True)
class FolderNode:
    data: Folder
    children: Tuple["TreeNode", ...] = ()
    kind: str = field(default=EntityKind.FOLDER.value, init=False)


@dataclass(frozen=True)
class RouteNode:
    data: Route
    # Filtered-visibility signal, not part of equality
    is_hidden: Any = field(default=None, compare=False)
    kind: str = field(default=EntityKind.ROUTE.value, init=False)


TreeNode = Union[FolderNode, RouteNode]


@dataclass(frozen=True)
class RootFolder:
    children: Tuple[TreeNode, ...] = ()
    uuid: str = "root"
    name: str = "root"


def _index_pool(pool: Sequence[Union[Folder, Route]]) -> Dict[str, Union[Folder, Route]]:
    index: Dict[str, Union[Folder, Route]] = {}
    for entity in pool:
        # First occurrence wins, like a linear search would
        index.setdefault(entity.uuid, entity)
    return index


def _resolve(child: FolderChild, index: Dict[str, Union[Folder, Route]]) -> Optional[Union[Folder, Route]]:
    entity = index.get(child.uuid)
    if entity is None:
        logger.warning(f"Unresolved {child.type.value} reference '{child.uuid}', skipping")
        return None

    expected = Folder if child.type == EntityKind.FOLDER else Route
    if not isinstance(entity, expected):
        logger.warning(
            f"Reference '{child.uuid}' declared as {child.type.value} "
            f"resolves to a {type(entity).__name__}, skipping"
        )
        return None
    return entity


def _build(
    children: Sequence[FolderChild],
    index: Dict[str, Union[Folder, Route]],
    visibility_factory: Optional[VisibilityFactory],
    path: List[str],
) -> Tuple[TreeNode, ...]:
    nodes: List[TreeNode] = []
    for child in children:
        entity = _resolve(child, index)
        if entity is None:
            continue

        if isinstance(entity, Folder):
            if entity.uuid in path:
                raise CycleDetectedError([*path, entity.uuid])
            path.append(entity.uuid)
            try:
                sub_nodes = _build(entity.children, index, visibility_factory, path)
            finally:
                path.pop()
            nodes.append(FolderNode(data=entity, children=sub_nodes))
        else:
            is_hidden = visibility_factory(entity) if visibility_factory else None
            nodes.append(RouteNode(data=entity, is_hidden=is_hidden))
    return tuple(nodes)


def build_tree(
    child_refs: Sequence[FolderChild],
    pool: Sequence[Union[Folder, Route]],
    visibility_factory: Optional[VisibilityFactory] = None,
) -> Tuple[TreeNode, ...]:
    """
    Fill the child references with the real folder and route objects.

    Output order mirrors child_refs at every level. Folders are resolved
    recursively from the same flat pool, each route gets a fresh
    visibility signal from visibility_factory.

    Raises:
        CycleDetectedError: if a folder is reachable from itself.
    """
    return _build(child_refs, _index_pool(pool), visibility_factory, [])


def build_root_folder(
    environment: Environment,
    visibility_factory: Optional[VisibilityFactory] = None,
) -> RootFolder:
    """Builds the whole routes menu tree of an environment."""
    children = build_tree(environment.root_children, environment.folders_and_routes(), visibility_factory)
    return RootFolder(children=children)


def iter_route_nodes(nodes: Sequence[TreeNode]) -> Iterator[RouteNode]:
    """Depth-first walk over all route leaves, in display order."""
    for node in nodes:
        if isinstance(node, FolderNode):
            yield from iter_route_nodes(node.children)
        elif isinstance(node, RouteNode):
            yield node
        else:
            raise TypeError(f"Unknown tree node: {node!r}")
