"""
stage.py
--------
Retained scene-node tree for the interactive scene.

Responsibilities
----------------
- Own the fixed logical coordinate space (width x height stage units).
- Create drawable nodes and mount them into ordered layers.
- Convert device (window pixel) coordinates into stage coordinates.

Layers only control draw order (BACKGROUND < ENTITIES < HUD); the simulation
never reads them. Nodes hold attributes only and are drawn by DrawManager.
"""

import itertools
from enum import Enum, IntEnum

from strawberry_sprint.core.debug.debug_logger import DebugLogger
from strawberry_sprint.core.errors import ConfigError, StageNotMountedError
from strawberry_sprint.core.runtime.game_settings import Layers


class StageLayer(IntEnum):
    """Draw order of the stage layers."""
    BACKGROUND = Layers.BACKGROUND
    ENTITIES = Layers.ENTITIES
    HUD = Layers.HUD


class NodeKind(str, Enum):
    """Drawable primitive types."""
    GROUP = "group"
    IMAGE = "image"
    RECT = "rect"
    TEXT = "text"


class SceneNode:
    """
    A drawable primitive.

    Position is the node's anchor in its parent's space (stage space for
    top-level nodes). Children are drawn relative to their parent.
    """

    __slots__ = (
        'node_id', 'kind', 'attrs',
        'x', 'y', 'scale', 'opacity', 'text',
        'layer', 'parent', 'children',
    )

    def __init__(self, node_id: int, kind: NodeKind, attrs: dict):
        self.node_id = node_id
        self.kind = kind
        self.attrs = attrs

        self.x = float(attrs.pop("x", 0.0))
        self.y = float(attrs.pop("y", 0.0))
        self.scale = float(attrs.pop("scale", 1.0))
        self.opacity = float(attrs.pop("opacity", 1.0))
        self.text = str(attrs.pop("text", ""))

        self.layer = None
        self.parent = None
        self.children = []

    @property
    def attached(self) -> bool:
        """True while the node (or its root group) sits in a stage layer."""
        root = self
        while root.parent is not None:
            root = root.parent
        return root.layer is not None

    def add_child(self, child: "SceneNode") -> "SceneNode":
        """Append a child drawn relative to this node."""
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def __repr__(self):
        return f"SceneNode({self.node_id}, {self.kind.value}, x={self.x:.1f}, y={self.y:.1f})"


class Stage:
    """Logical coordinate space plus the layered node tree mounted into it."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, width: float, height: float):
        """
        Args:
            width: Logical stage width in stage units.
            height: Logical stage height in stage units.

        Raises:
            ConfigError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ConfigError(f"Stage size must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.layers = {layer: [] for layer in StageLayer}
        self.mounted = False

        # Device -> logical transform (set by DisplayManager)
        self.scale = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0

        self._ids = itertools.count(1)

    # ===========================================================
    # Stage Lifecycle
    # ===========================================================
    def mount_stage(self):
        """Open the stage for node mounting."""
        self.mounted = True
        DebugLogger.state(f"Stage mounted ({self.width:.0f}x{self.height:.0f})", category="scene")

    def unmount_stage(self):
        """Detach every node and close the stage."""
        for layer_nodes in self.layers.values():
            for node in layer_nodes:
                node.layer = None
            layer_nodes.clear()
        self.mounted = False
        DebugLogger.state("Stage unmounted", category="scene")

    # ===========================================================
    # Node Operations
    # ===========================================================
    def create_node(self, kind: NodeKind, **attributes) -> SceneNode:
        """Create a detached node. x, y, scale, opacity and text are lifted out of attributes."""
        return SceneNode(next(self._ids), NodeKind(kind), dict(attributes))

    def mount(self, node: SceneNode, layer: StageLayer) -> SceneNode:
        """
        Attach a top-level node to a layer (moving it if already attached).

        Raises:
            StageNotMountedError: If the stage is not mounted.
        """
        if not self.mounted:
            raise StageNotMountedError(f"Cannot mount {node!r}: stage is not mounted")

        if node.layer is not None:
            self.layers[node.layer].remove(node)

        layer = StageLayer(layer)
        self.layers[layer].append(node)
        node.layer = layer
        return node

    def unmount(self, node: SceneNode) -> bool:
        """
        Detach a node if present.

        Returns:
            bool: False if the node was already detached.
        """
        if node.layer is None:
            return False
        self.layers[node.layer].remove(node)
        node.layer = None
        return True

    def set_transform(self, node: SceneNode, x: float, y: float, scale: float = None):
        """Move a node (and optionally rescale it)."""
        node.x = x
        node.y = y
        if scale is not None:
            node.scale = scale

    def set_text(self, node: SceneNode, text: str):
        """Replace a text node's content."""
        if node.kind is not NodeKind.TEXT:
            raise TypeError(f"set_text on non-text node {node!r}")
        node.text = str(text)

    def set_opacity(self, node: SceneNode, opacity: float):
        """Set node opacity, clamped to [0, 1]."""
        node.opacity = max(0.0, min(1.0, opacity))

    # ===========================================================
    # Queries
    # ===========================================================
    def iter_nodes(self):
        """Yield top-level nodes in draw order."""
        for layer in sorted(self.layers):
            yield from self.layers[layer]

    def node_count(self, layer: StageLayer = None) -> int:
        """Count top-level nodes in one layer, or in all of them."""
        if layer is not None:
            return len(self.layers[StageLayer(layer)])
        return sum(len(nodes) for nodes in self.layers.values())

    # ===========================================================
    # Coordinate Conversion
    # ===========================================================
    def set_viewport(self, scale: float, offset_x: float = 0.0, offset_y: float = 0.0):
        """Record how the stage is scaled and letterboxed inside the window."""
        if scale <= 0:
            raise ConfigError(f"Viewport scale must be positive, got {scale}")
        self.scale = scale
        self.offset_x = offset_x
        self.offset_y = offset_y

    def to_logical(self, device_x: float, device_y: float) -> tuple:
        """Convert window coordinates to stage coordinates."""
        return (
            (device_x - self.offset_x) / self.scale,
            (device_y - self.offset_y) / self.scale,
        )

    def contains(self, x: float, y: float) -> bool:
        """Check if a stage-space point lies on the stage."""
        return 0 <= x <= self.width and 0 <= y <= self.height
