# src/geometry/bvh.py
import logging
from typing import List, Optional, Sequence

from spheretrace.core.aabb import AABB
from spheretrace.core.ray import Ray
from spheretrace.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


class BVHNode:
    """
    One entry of the BVH arena.

    Interior nodes reference their children by index into ``BVH.nodes``;
    leaves reference a single object by index into ``BVH.objects`` and have
    ``left == right == -1``.
    """
    def __init__(self, box: AABB, left: int = -1, right: int = -1, object_index: int = -1):
        self.box = box
        self.left = left
        self.right = right
        self.object_index = object_index

    @property
    def is_leaf(self) -> bool:
        return self.object_index >= 0

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"BVHNode(leaf={self.object_index}, box={self.box})"
        return f"BVHNode(left={self.left}, right={self.right}, box={self.box})"


class BVH(Hittable):
    """
    Bounding volume hierarchy over a fixed list of objects.

    The tree is stored as a flat list of nodes (an arena) built once in the
    constructor and never modified afterwards, so a single instance can be
    shared by any number of render threads.

    Each recursive build step sorts its slice of objects by the start of
    their bounding boxes on an axis drawn from ``rng`` and splits the slice
    at its midpoint. A slice of one object becomes a leaf.
    """
    def __init__(self, objects: Sequence[Hittable], rng):
        if len(objects) == 0:
            raise ValueError("cannot build a BVH over an empty object list")
        self.objects: List[Hittable] = list(objects)
        self.nodes: List[Optional[BVHNode]] = []
        self.root = self._build(list(range(len(self.objects))), rng)
        logger.debug("Built BVH: %d objects, %d nodes, depth %d",
                     len(self.objects), len(self.nodes), self.depth())

    def _build(self, indices: List[int], rng) -> int:
        axis = rng.randint(0, 2)
        indices.sort(key=lambda i: self.objects[i].bounding_box().axis(axis)[0])

        index = len(self.nodes)
        self.nodes.append(None)  # placeholder until the children exist

        if len(indices) == 1:
            object_index = indices[0]
            node = BVHNode(self.objects[object_index].bounding_box(), object_index=object_index)
        else:
            mid = len(indices) // 2
            left = self._build(indices[:mid], rng)
            right = self._build(indices[mid:], rng)
            node = BVHNode(AABB.merge(self.nodes[left].box, self.nodes[right].box),
                           left=left, right=right)

        self.nodes[index] = node
        return index

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self._hit_node(self.root, ray, t_min, t_max)

    def _hit_node(self, index: int, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        node = self.nodes[index]
        if not node.box.hit(ray, t_min, t_max):
            return None

        if node.is_leaf:
            return self.objects[node.object_index].hit(ray, t_min, t_max)

        hit_left = self._hit_node(node.left, ray, t_min, t_max)

        # Anything farther than the left hit cannot win.
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self._hit_node(node.right, ray, t_min, t_max)

        if hit_left is not None and hit_right is not None:
            return hit_right if hit_right.t < hit_left.t else hit_left
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.nodes[self.root].box

    def depth(self) -> int:
        def walk(index: int) -> int:
            node = self.nodes[index]
            if node.is_leaf:
                return 1
            return 1 + max(walk(node.left), walk(node.right))
        return walk(self.root)

    def __len__(self) -> int:
        return len(self.nodes)
