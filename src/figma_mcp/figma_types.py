"""
Shapes of the payloads returned by the Figma REST API.

These are annotations only. The server never reads into them; responses are
forwarded to the caller exactly as Figma sent them.
"""

from typing import Any, Dict, List, TypedDict


class Color(TypedDict, total=False):
    r: float
    g: float
    b: float
    a: float


class Rectangle(TypedDict, total=False):
    x: float
    y: float
    width: float
    height: float


class Paint(TypedDict, total=False):
    type: str  # SOLID, GRADIENT_LINEAR, IMAGE, ...
    visible: bool
    opacity: float
    color: Color
    imageRef: str
    scaleMode: str


class Node(TypedDict, total=False):
    """A document, canvas or scene node. ``children`` nests the same shape."""

    id: str
    name: str
    type: str
    visible: bool
    children: List["Node"]
    backgroundColor: Color
    absoluteBoundingBox: Rectangle
    fills: List[Paint]
    strokes: List[Paint]
    characters: str
    style: Dict[str, Any]
    componentId: str
    pluginData: Dict[str, Any]
    sharedPluginData: Dict[str, Dict[str, Any]]


class Component(TypedDict, total=False):
    key: str
    file_key: str
    node_id: str
    name: str
    description: str
    thumbnail_url: str
    created_at: str
    updated_at: str


class Style(TypedDict, total=False):
    key: str
    file_key: str
    node_id: str
    name: str
    description: str
    style_type: str  # FILL, TEXT, EFFECT, GRID


class User(TypedDict, total=False):
    id: str
    handle: str
    img_url: str


class FileVersion(TypedDict, total=False):
    id: str
    created_at: str
    label: str
    description: str
    user: User


class Comment(TypedDict, total=False):
    id: str
    file_key: str
    parent_id: str
    user: User
    created_at: str
    resolved_at: str
    message: str
    client_meta: Dict[str, Any]
    order_id: str


class ProjectFile(TypedDict, total=False):
    key: str
    name: str
    thumbnail_url: str
    last_modified: str


# ---------------------------------------------------------------------------
# Response envelopes, one per endpoint
# ---------------------------------------------------------------------------

class FileListResponse(TypedDict, total=False):
    name: str
    files: List[ProjectFile]


class FileResponse(TypedDict, total=False):
    name: str
    lastModified: str
    thumbnailUrl: str
    version: str
    role: str
    document: Node
    components: Dict[str, Component]
    styles: Dict[str, Style]
    schemaVersion: int


class ComponentsResponse(TypedDict, total=False):
    status: int
    error: bool
    meta: Dict[str, List[Component]]


class StylesResponse(TypedDict, total=False):
    status: int
    error: bool
    meta: Dict[str, List[Style]]


class VersionsResponse(TypedDict, total=False):
    versions: List[FileVersion]
    pagination: Dict[str, Any]


class CommentsResponse(TypedDict, total=False):
    comments: List[Comment]


class FileNodesResponse(TypedDict, total=False):
    name: str
    lastModified: str
    version: str
    nodes: Dict[str, Dict[str, Any]]
