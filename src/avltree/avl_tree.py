import logging
from enum import Enum
from typing import (
    Callable, Generic, Iterable, Iterator, List, NamedTuple, Optional, TypeVar,
)

T = TypeVar('T')

logger = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    """Raised when a required key, sequence or range argument is unusable."""


class Traversal(Enum):
    IN_ORDER = "in-order"
    PRE_ORDER = "pre-order"
    POST_ORDER = "post-order"


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"


class BuildStrategy(Enum):
    DIRECT = "direct"
    INCREMENTAL = "incremental"


class RotationEvent(NamedTuple):
    key: object
    direction: Direction


RotationSink = Callable[[RotationEvent], None]


class AVLTree(Generic[T]):
    """Self-balancing binary search tree.

    Duplicates are ignored on insert and missing keys are ignored on delete.
    Every rotation is reported to the optional ``on_rotate`` sink.
    """

    class Node:
        def __init__(self, key: T) -> None:
            self.key: T = key
            self.left: Optional['AVLTree.Node'] = None
            self.right: Optional['AVLTree.Node'] = None
            self.height: int = 1

    def __init__(self, on_rotate: Optional[RotationSink] = None) -> None:
        self._root: Optional[AVLTree.Node] = None
        self._size: int = 0
        self._on_rotate = on_rotate

    def _get_height(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return node.height

    def _update_height(self, node: Node) -> None:
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def _get_balance(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def _notify(self, key: T, direction: Direction) -> None:
        logger.debug("Rebalancing tree by rotating nodes around %s to the %s",
                     key, direction.value)
        if self._on_rotate is not None:
            self._on_rotate(RotationEvent(key, direction))

    def _right_rotate(self, y: Node) -> Node:
        self._notify(y.key, Direction.RIGHT)
        x = y.left
        assert x is not None
        t2 = x.right

        x.right = y
        y.left = t2

        self._update_height(y)
        self._update_height(x)

        return x

    def _left_rotate(self, x: Node) -> Node:
        self._notify(x.key, Direction.LEFT)
        y = x.right
        assert y is not None
        t2 = y.left

        y.left = x
        x.right = t2

        self._update_height(x)
        self._update_height(y)

        return y

    def _rebalance_after_insert(self, node: Node, key: T) -> Node:
        # The inserted key tells which grandchild grew.
        balance = self._get_balance(node)

        if balance > 1:
            assert node.left is not None
            if not key < node.left.key:
                node.left = self._left_rotate(node.left)
            return self._right_rotate(node)

        if balance < -1:
            assert node.right is not None
            if not key > node.right.key:
                node.right = self._right_rotate(node.right)
            return self._left_rotate(node)

        return node

    def _rebalance_after_delete(self, node: Node) -> Node:
        # No key identifies the grown side after a delete; use the child's balance.
        balance = self._get_balance(node)

        if balance > 1:
            if self._get_balance(node.left) < 0:
                assert node.left is not None
                node.left = self._left_rotate(node.left)
            return self._right_rotate(node)

        if balance < -1:
            if self._get_balance(node.right) > 0:
                assert node.right is not None
                node.right = self._right_rotate(node.right)
            return self._left_rotate(node)

        return node

    def _insert(self, node: Optional[Node], key: T) -> Node:
        if node is None:
            self._size += 1
            return AVLTree.Node(key)

        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node

        self._update_height(node)
        return self._rebalance_after_insert(node, key)

    def add(self, key: T) -> None:
        if key is None:
            raise InvalidArgument("key must not be None")
        self._root = self._insert(self._root, key)

    def _find_min_node(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _remove(self, node: Optional[Node], key: T) -> Optional[Node]:
        if node is None:
            return None

        if key < node.key:
            node.left = self._remove(node.left, key)
        elif key > node.key:
            node.right = self._remove(node.right, key)
        else:
            if node.left is None:
                self._size -= 1
                return node.right
            elif node.right is None:
                self._size -= 1
                return node.left
            else:
                successor = self._find_min_node(node.right)
                node.key = successor.key
                node.right = self._remove(node.right, successor.key)

        self._update_height(node)
        return self._rebalance_after_delete(node)

    def delete(self, key: T) -> None:
        if key is None:
            raise InvalidArgument("key must not be None")
        self._root = self._remove(self._root, key)

    def contains(self, key: T) -> bool:
        if key is None:
            return False
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return True
        return False

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        return self._get_height(self._root)

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[AVLTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.key)
            node = node.right
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[AVLTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[AVLTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def traverse(self, order: Traversal) -> List[T]:
        """Return every key in the given visiting order as a new list."""
        if order is Traversal.IN_ORDER:
            return self.in_order()
        if order is Traversal.PRE_ORDER:
            return self.pre_order()
        if order is Traversal.POST_ORDER:
            return self.post_order()
        raise InvalidArgument(f"unknown traversal order: {order!r}")

    def _is_balanced(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        balance = self._get_balance(node)
        if abs(balance) > 1:
            return False
        return self._is_balanced(node.left) and self._is_balanced(node.right)

    def is_balanced(self) -> bool:
        return self._is_balanced(self._root)

    # ------------------------------------------------------------------
    # Bulk construction
    # ------------------------------------------------------------------

    def _build_balanced(self, keys: List[T], lo: int, hi: int) -> Optional[Node]:
        if lo > hi:
            return None
        mid = (lo + hi) // 2
        node = AVLTree.Node(keys[mid])
        node.left = self._build_balanced(keys, lo, mid - 1)
        node.right = self._build_balanced(keys, mid + 1, hi)
        self._update_height(node)
        return node

    @classmethod
    def from_sorted(
        cls,
        keys: Iterable[T],
        on_rotate: Optional[RotationSink] = None,
    ) -> 'AVLTree[T]':
        """Build a minimum-height tree from strictly increasing keys in O(n).

        Nodes are linked bottom-up and heights are computed as the recursion
        unwinds, so no rotation ever happens.

        Raises:
            InvalidArgument: if ``keys`` is None, holds a None element, or is
                not strictly increasing.
        """
        if keys is None:
            raise InvalidArgument("keys must not be None")
        values = list(keys)
        for i, key in enumerate(values):
            if key is None:
                raise InvalidArgument(f"element at index {i} is None")
            if i > 0 and not values[i - 1] < key:
                raise InvalidArgument(
                    f"keys must be strictly increasing: {values[i - 1]!r} "
                    f"then {key!r} at index {i}"
                )

        tree: AVLTree[T] = cls(on_rotate=on_rotate)
        tree._root = tree._build_balanced(values, 0, len(values) - 1)
        tree._size = len(values)
        logger.debug("Built balanced tree of %d keys, height %d",
                     tree._size, tree.height())
        return tree

    @classmethod
    def from_inclusive_range(
        cls,
        min_value: int,
        max_value: int,
        strategy: BuildStrategy = BuildStrategy.DIRECT,
        on_rotate: Optional[RotationSink] = None,
    ) -> 'AVLTree[int]':
        """Build a tree holding every integer in ``[min_value, max_value]``.

        ``BuildStrategy.DIRECT`` links nodes bottom-up in O(n) and yields the
        minimum possible height. ``BuildStrategy.INCREMENTAL`` adds the
        midpoint of each sub-range through ordinary insertion in O(n log n);
        its shape may differ from the direct build.

        Raises:
            InvalidArgument: if a bound is not an integer or
                ``max_value < min_value``.
        """
        for name, bound in (("min_value", min_value), ("max_value", max_value)):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise InvalidArgument(f"{name} must be an integer, got {bound!r}")
        if max_value < min_value:
            raise InvalidArgument(
                f"max_value < min_value ({max_value} < {min_value})"
            )

        if strategy is BuildStrategy.DIRECT:
            return cls.from_sorted(range(min_value, max_value + 1), on_rotate=on_rotate)
        if strategy is BuildStrategy.INCREMENTAL:
            tree: AVLTree[int] = cls(on_rotate=on_rotate)
            tree._add_midpoints(min_value, max_value)
            return tree
        raise InvalidArgument(f"unknown build strategy: {strategy!r}")

    def _add_midpoints(self, lo: int, hi: int) -> None:
        # Explicit stack keeps the median-first order without deep recursion.
        pending = [(lo, hi)]
        while pending:
            lo, hi = pending.pop()
            if lo > hi:
                continue
            mid = lo + (hi - lo) // 2
            self.add(mid)
            pending.append((mid + 1, hi))
            pending.append((lo, mid - 1))

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: T) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"AVLTree({self.in_order()})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"
