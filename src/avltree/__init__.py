from avltree.avl_tree import (
    AVLTree,
    BuildStrategy,
    Direction,
    InvalidArgument,
    RotationEvent,
    Traversal,
)

__all__ = [
    "AVLTree",
    "BuildStrategy",
    "Direction",
    "InvalidArgument",
    "RotationEvent",
    "Traversal",
]
