"""
Unbalanced binary search tree with parent links.

This module provides an ordered container driven by a caller-supplied
``less_than`` predicate. Values that do not compare less than a node go to
its right subtree, so equal values are kept (multiset semantics) and
``search``/``remove`` act on the first match found on the way down.

No rebalancing is performed: inserting already-sorted data produces a tree
shaped like a linked list. Every walk is iterative, so such trees never hit
the interpreter recursion limit.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar
import logging

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _default_less_than(a, b) -> bool:
    return a < b


class BSTNode(Generic[T]):
    """A single stored value plus its links.

    ``left`` and ``right`` own the child subtrees; ``parent`` is only a
    back-reference used to walk upwards.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: T, parent: Optional[BSTNode[T]] = None):
        self.value = value
        self.parent = parent
        self.left: Optional[BSTNode[T]] = None
        self.right: Optional[BSTNode[T]] = None

    def get_leftmost_descendant(self) -> BSTNode[T]:
        """Follow left links to the end (minimum of this subtree)."""
        node = self
        while node.left is not None:
            node = node.left
        return node

    def get_rightmost_descendant(self) -> BSTNode[T]:
        """Follow right links to the end (maximum of this subtree)."""
        node = self
        while node.right is not None:
            node = node.right
        return node

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"BSTNode({self.value!r})"


class BinarySearchTree(Generic[T]):
    """
    Binary search tree ordered by a strict ``less_than`` predicate.

    ``search`` decides a match with ``==`` and only uses ``less_than`` to
    choose a direction. A custom predicate must therefore be a strict weak
    ordering consistent with the values' equality: if ``a == b`` then
    neither ``less_than(a, b)`` nor ``less_than(b, a)`` may hold. This is
    not checked.

    ``None`` is the "absent" result throughout, so ``None`` itself cannot
    be stored meaningfully.
    """

    def __init__(
        self,
        values: Iterable[T] = (),
        less_than: Optional[Callable[[T, T], bool]] = None,
    ):
        """
        Initialize tree.

        Args:
            values: Initial values, inserted one by one in iteration order
            less_than: Comparison function returning True if first arg < second arg.
                Defaults to the ``<`` operator.
        """
        if less_than is None:
            less_than = _default_less_than
        elif not callable(less_than):
            raise TypeError(f"less_than must be callable, got {type(less_than).__name__}")
        self._root: Optional[BSTNode[T]] = None
        self._size = 0
        self.less_than = less_than
        for value in values:
            self.insert(value)

    @property
    def root(self) -> Optional[BSTNode[T]]:
        """Root node, or None if the tree is empty."""
        return self._root

    @property
    def size(self) -> int:
        """Get number of elements in tree."""
        return self._size

    def is_empty(self) -> bool:
        """Check if tree is empty."""
        return self._root is None

    def insert(self, value: T) -> int:
        """
        Insert a value into the tree.

        Values that are not less than a node (including equal ones) descend
        to its right.

        Args:
            value: Value to insert

        Returns:
            The new number of elements in the tree
        """
        if self._root is None:
            self._root = BSTNode(value)
            self._size += 1
            return self._size

        parent = self._root
        while True:
            if self.less_than(value, parent.value):
                if parent.left is None:
                    parent.left = BSTNode(value, parent)
                    break
                parent = parent.left
            else:
                if parent.right is None:
                    parent.right = BSTNode(value, parent)
                    break
                parent = parent.right
        self._size += 1
        return self._size

    def search(self, value: T) -> Optional[BSTNode[T]]:
        """
        Search for a value in the tree.

        Args:
            value: Value to look for

        Returns:
            First node on the search path whose value equals ``value``,
            or None if there is none
        """
        node = self._root
        while node is not None and node.value != value:
            if self.less_than(value, node.value):
                node = node.left
            else:
                node = node.right
        return node

    def remove(self, value: T) -> Optional[int]:
        """
        Remove one occurrence of a value.

        If the value is stored several times, the first one found by
        ``search`` is removed.

        Args:
            value: Value to remove

        Returns:
            The new number of elements, or None if the value was not found
            (the tree is left unchanged)
        """
        node = self.search(value)
        if node is None:
            logger.debug("remove: %r not found", value)
            return None

        if node.left is not None and node.right is not None:
            # The leftmost node of the right subtree has no left child, so
            # it can be unlinked like a node with at most one child.
            successor = node.right.get_leftmost_descendant()
            logger.debug("remove: %r has two children, promoting %r", value, successor.value)
            node.value = successor.value
            self._replace(successor, successor.right)
        elif node.left is not None:
            self._replace(node, node.left)
        else:
            self._replace(node, node.right)

        self._size -= 1
        return self._size

    def _replace(self, node: BSTNode[T], child: Optional[BSTNode[T]]) -> None:
        """Put ``child`` into ``node``'s slot in its parent (or at the root)."""
        parent = node.parent
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent
        node.parent = node.left = node.right = None

    def _iter_nodes(self) -> Iterator[BSTNode[T]]:
        """Yield nodes in order (left subtree, node, right subtree)."""
        stack: list[BSTNode[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def __iter__(self) -> Iterator[T]:
        for node in self._iter_nodes():
            yield node.value

    def to_array(self) -> list[T]:
        """
        Convert the tree into a list using an in-order traversal.

        Returns:
            All values, ascending under ``less_than``
        """
        return list(self)

    def get_predecessor(self, value: T) -> Optional[T]:
        """
        Find the value immediately before ``value`` in sorted order.

        Args:
            value: Value to find the predecessor for

        Returns:
            Predecessor value, or None if ``value`` is not in the tree or
            is the minimum
        """
        node = self.search(value)
        if node is None:
            return None
        if node.left is not None:
            return node.left.get_rightmost_descendant().value
        while node.parent is not None and node.parent.left is node:
            node = node.parent
        if node.parent is None:
            return None
        return node.parent.value

    def get_successor(self, value: T) -> Optional[T]:
        """
        Find the value immediately after ``value`` in sorted order.

        Args:
            value: Value to find the successor for

        Returns:
            Successor value, or None if ``value`` is not in the tree or is
            the maximum
        """
        node = self.search(value)
        if node is None:
            return None
        if node.right is not None:
            return node.right.get_leftmost_descendant().value
        while node.parent is not None and node.parent.right is node:
            node = node.parent
        if node.parent is None:
            return None
        return node.parent.value

    def min(self) -> Optional[T]:
        """Return the smallest value, or None if the tree is empty."""
        if self._root is None:
            return None
        return self._root.get_leftmost_descendant().value

    def max(self) -> Optional[T]:
        """Return the largest value, or None if the tree is empty."""
        if self._root is None:
            return None
        return self._root.get_rightmost_descendant().value

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        best = 0
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def clear(self) -> None:
        """Remove every element from the tree."""
        self._root = None
        self._size = 0

    def for_each(self, f: Callable[[T, BSTNode[T]], None]) -> None:
        """
        Apply function to each element in order.

        Args:
            f: Function to apply to each (value, node) pair
        """
        for node in self._iter_nodes():
            f(node.value, node)

    def is_bst(self) -> bool:
        """
        Verify the ordering property, parent links and size (for testing).

        Returns:
            True if the tree is in a valid state
        """
        if self._root is None:
            return self._size == 0
        if self._root.parent is not None:
            return False

        count = 0
        # (node, value it must not be less than, value it must be less than)
        stack: list[tuple[BSTNode[T], Optional[BSTNode[T]], Optional[BSTNode[T]]]] = [
            (self._root, None, None)
        ]
        while stack:
            node, lower, upper = stack.pop()
            count += 1
            if lower is not None and self.less_than(node.value, lower.value):
                return False
            if upper is not None and not self.less_than(node.value, upper.value):
                return False
            if node.left is not None:
                if node.left.parent is not node:
                    return False
                stack.append((node.left, lower, node))
            if node.right is not None:
                if node.right.parent is not node:
                    return False
                stack.append((node.right, node, upper))
        return count == self._size

    def to_string(self, selector: Callable[[T], str] = str) -> str:
        """
        Render the tree shape as ``value(left,right)``.

        Leaves are rendered as their value alone and a missing child next
        to a present one as ``-``.

        Args:
            selector: Function to convert a value to a string

        Returns:
            String representation of the tree ("" when empty)
        """
        if self._root is None:
            return ""
        parts: list[str] = []
        # Entries are nodes, None for a missing child, or literal text.
        stack: list = [self._root]
        while stack:
            item = stack.pop()
            if item is None:
                parts.append("-")
            elif isinstance(item, str):
                parts.append(item)
            else:
                parts.append(selector(item.value))
                if not item.is_leaf():
                    stack.extend([")", item.right, ",", item.left, "("])
        return "".join(parts)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.search(value) is not None

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.to_array()!r})"


OrderedTree = BinarySearchTree
