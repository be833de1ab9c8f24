"""Bone hierarchy traversal for debug drawing.

A rig is modelled as a tree of BoneNode objects. walk_bones() visits it in
pre-order with an explicit stack, so deep chains (tails, hair, cloth) never
hit the recursion limit. bone_segments() turns the tree into the parent/child
line segments a viewer draws between joints.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple
from dataclasses import dataclass, field
import logging

logger = logging.getLogger(__name__)


Vector3 = Tuple[float, float, float]


@dataclass
class BoneNode:
    """One joint in a bone hierarchy.

    Attributes:
        name: Bone name
        position: World-space joint position
        children: Child bones, in draw order
    """
    name: str
    position: Vector3 = (0.0, 0.0, 0.0)
    children: List['BoneNode'] = field(default_factory=list)

    def add_child(self, child: 'BoneNode') -> 'BoneNode':
        """Append a child and return it."""
        self.children.append(child)
        return child

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BoneNode':
        """Build a tree from nested dicts.

        Each dict has 'name', optional 'position' ([x, y, z]) and optional
        'children' (list of dicts).

        Example:
            >>> root = BoneNode.from_dict({
            ...     'name': 'hips', 'position': [0, 1, 0],
            ...     'children': [{'name': 'spine', 'position': [0, 1.2, 0]}]
            ... })
        """
        root = cls._node_from(data)
        stack = [(root, data)]
        while stack:
            node, entry = stack.pop()
            for child_data in entry.get('children', []):
                child = node.add_child(cls._node_from(child_data))
                stack.append((child, child_data))
        return root

    @classmethod
    def _node_from(cls, entry: Dict[str, Any]) -> 'BoneNode':
        x, y, z = entry.get('position', (0.0, 0.0, 0.0))
        return cls(name=str(entry['name']), position=(float(x), float(y), float(z)))

    def __repr__(self):
        return f"BoneNode({self.name!r}, children={len(self.children)})"


@dataclass(frozen=True)
class BoneSegment:
    """Line from a parent joint to a child joint."""
    parent: str
    child: str
    start: Vector3
    end: Vector3


def iter_bones(root: BoneNode) -> Iterator[Tuple[BoneNode, Optional[BoneNode]]]:
    """Yield (bone, parent) pairs in pre-order; the root's parent is None."""
    stack: List[Tuple[BoneNode, Optional[BoneNode]]] = [(root, None)]
    while stack:
        node, parent = stack.pop()
        yield node, parent
        # Reversed so the first child is visited first
        for child in reversed(node.children):
            stack.append((child, node))


def walk_bones(root: BoneNode) -> List[BoneNode]:
    """All bones in pre-order (parent before children, children in order)."""
    return [node for node, _ in iter_bones(root)]


def bone_segments(root: BoneNode) -> List[BoneSegment]:
    """Parent-to-child segments for every edge of the hierarchy."""
    segments = [
        BoneSegment(parent=parent.name, child=node.name, start=parent.position, end=node.position)
        for node, parent in iter_bones(root)
        if parent is not None
    ]
    logger.debug(f"Bone hierarchy '{root.name}': {len(segments)} segment(s)")
    return segments
