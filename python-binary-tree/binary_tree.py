"""
Binary Tree – a plain, unbalanced binary link structure with recursive and
resumable iterative traversals.

Run:
    python binary_tree.py --values A B C D --order all
    python binary_tree.py --values 1 2 3 null 4 --order post --iterative
"""

import argparse
from collections import deque
from typing import Any, Callable, Deque, Iterator, List, Optional, Sequence, Tuple

ORDERS = ("in", "pre", "post", "level")
DEFAULT_VALUES = ["A", "B", "C", "D"]
GAP_TOKENS = {"null", "none", "-"}  # CLI spellings of a missing child

Visitor = Callable[["BinaryTree"], Any]


class BinaryTree:
    """
    A single node in a binary tree. The tree is the node: any node can act
    as the root of the subtree below it.

    Attributes:
        value (Any):
            The payload stored in this node. May be None.
        left (BinaryTree | None):
            Left child (read-only, use insert_left to change it).
        right (BinaryTree | None):
            Right child (read-only, use insert_right to change it).
    """
    __slots__ = ("value", "_left", "_right")

    def __init__(self, value: Any = None):
        """Create a node holding value, with no children."""
        self.value = value
        self._left: Optional["BinaryTree"] = None
        self._right: Optional["BinaryTree"] = None

    def __repr__(self) -> str:
        return f"BinaryTree({self.value!r})"

    @property
    def left(self) -> Optional["BinaryTree"]:
        return self._left

    @property
    def right(self) -> Optional["BinaryTree"]:
        return self._right

    # -------------------------------------------------------------
    # Building
    # -------------------------------------------------------------

    def insert_left(self, value: Any) -> "BinaryTree":
        """
        Insert a new node as the left child of this node.

        The previous left child (if any) becomes the left child of the
        new node, so repeated calls build a left-leaning chain.

        Args:
            value (Any): The value for the new node.

        Returns:
            BinaryTree: The newly created node.
        """
        node = self.__class__(value)
        node._left = self._left
        self._left = node
        return node

    def insert_right(self, value: Any) -> "BinaryTree":
        """
        Insert a new node as the right child of this node.

        The previous right child (if any) becomes the right child of the
        new node.

        Args:
            value (Any): The value for the new node.

        Returns:
            BinaryTree: The newly created node.
        """
        node = self.__class__(value)
        node._right = self._right
        self._right = node
        return node

    # -------------------------------------------------------------
    # Recursive Traversals
    # -------------------------------------------------------------

    def visit(self, node: "BinaryTree") -> None:
        """
        Default visit action: print the node's value followed by a space.

        Subclasses can override this to change what every recursive
        traversal on the tree does when no visitor is passed.
        """
        print(node.value, end=" ")

    def visit_in_order(self, visitor: Optional[Visitor] = None) -> None:
        """Visit the subtree left, self, right."""
        in_order(self, visitor if visitor is not None else self.visit)

    def visit_pre_order(self, visitor: Optional[Visitor] = None) -> None:
        """Visit the subtree self, left, right."""
        pre_order(self, visitor if visitor is not None else self.visit)

    def visit_post_order(self, visitor: Optional[Visitor] = None) -> None:
        """Visit the subtree left, right, self."""
        post_order(self, visitor if visitor is not None else self.visit)

    def traverse(self, order: str, visitor: Optional[Visitor] = None) -> None:
        """
        Visit every node of the subtree in the given order.

        Depth-first orders recurse. Level order has no recursive form and
        drains a LevelOrderCursor instead.

        Args:
            order (str): One of ORDERS.
            visitor (callable, optional): Called once per node. Defaults
                to the visit method.

        Raises:
            ValueError: If order is not one of ORDERS.
        """
        _check_order(order)
        visitor = visitor if visitor is not None else self.visit
        if order == "in":
            in_order(self, visitor)
        elif order == "pre":
            pre_order(self, visitor)
        elif order == "post":
            post_order(self, visitor)
        else:
            for node in LevelOrderCursor(self):
                visitor(node)

    # -------------------------------------------------------------
    # Iterative Traversals
    # -------------------------------------------------------------

    def in_order_cursor(self) -> "InOrderCursor":
        return InOrderCursor(self)

    def pre_order_cursor(self) -> "PreOrderCursor":
        return PreOrderCursor(self)

    def post_order_cursor(self) -> "PostOrderCursor":
        return PostOrderCursor(self)

    def level_order_cursor(self) -> "LevelOrderCursor":
        return LevelOrderCursor(self)

    def cursor(self, order: str) -> "TraversalCursor":
        """
        Create a fresh cursor over this subtree.

        Args:
            order (str): One of ORDERS.

        Returns:
            TraversalCursor: A cursor that has not pulled any node yet.

        Raises:
            ValueError: If order is not one of ORDERS.
        """
        _check_order(order)
        return CURSOR_TYPES[order](self)

    def __iter__(self) -> Iterator[Any]:
        """
        Iterate over the stored values in-order.

        Yields:
            Any: Next value, left subtree first.
        """
        for node in InOrderCursor(self):
            yield node.value


def _check_order(order: str) -> None:
    if order not in ORDERS:
        raise ValueError(f"unknown traversal order {order!r}, expected one of {', '.join(ORDERS)}")


def in_order(root: Optional[BinaryTree], visit: Visitor) -> None:
    """Recursively visit root's subtree left, self, right. None visits nothing."""
    if root is not None:
        in_order(root.left, visit)
        visit(root)
        in_order(root.right, visit)


def pre_order(root: Optional[BinaryTree], visit: Visitor) -> None:
    """Recursively visit root's subtree self, left, right. None visits nothing."""
    if root is None:
        return
    visit(root)
    if root.left is not None:
        pre_order(root.left, visit)
    if root.right is not None:
        pre_order(root.right, visit)


def post_order(root: Optional[BinaryTree], visit: Visitor) -> None:
    """Recursively visit root's subtree left, right, self. None visits nothing."""
    if root is None:
        return
    if root.left is not None:
        post_order(root.left, visit)
    if root.right is not None:
        post_order(root.right, visit)
    visit(root)


# -------------------------------------------------------------
# Cursors
# -------------------------------------------------------------

class TraversalCursor:
    """
    Resumable traversal over a subtree, one node per next_node() call.

    A cursor is either fresh (nothing pulled yet) or active (a pass is in
    progress). When a pass runs out, next_node() returns None once and the
    cursor is fresh again, so the following call starts over from the root.

    The cursor keeps a non-owning reference to the root and its own
    auxiliary storage; the tree itself is never modified.

    Thread safety:
        - None. Drive a cursor from one place at a time. Separate cursors
          over the same tree are independent of each other.
    """

    order = ""

    def __init__(self, root: Optional[BinaryTree]) -> None:
        """
        Args:
            root: The subtree to walk. None gives an empty sequence.
        """
        self.root = root
        self._active = False
        self._reset()

    @property
    def is_active(self) -> bool:
        return self._active

    def restart(self) -> None:
        """Drop any pass in progress; the next pull starts from the root."""
        self._reset()
        self._active = False

    def next_node(self) -> Optional[BinaryTree]:
        """
        Pull the next node of the traversal.

        Returns:
            The next node, or None when the pass is exhausted.

        Side effects:
            - Starts a new pass when the cursor is fresh.
            - Returns the cursor to fresh on exhaustion.
        """
        if not self._active:
            self._reset()
            self._active = True
        node = self._advance()
        if node is None:
            self.restart()
        return node

    def __iter__(self) -> Iterator[BinaryTree]:
        """Yield nodes until the current pass is exhausted."""
        while True:
            node = self.next_node()
            if node is None:
                return
            yield node

    def _reset(self) -> None:
        raise NotImplementedError

    def _advance(self) -> Optional[BinaryTree]:
        raise NotImplementedError


class InOrderCursor(TraversalCursor):
    """
    In-order cursor. Keeps a stack of ancestors whose left subtree is being
    walked, plus the next node to descend from.
    """

    order = "in"

    def _reset(self) -> None:
        self._stack: List[BinaryTree] = []
        self._current = self.root

    def _advance(self) -> Optional[BinaryTree]:
        while self._current is not None:
            self._stack.append(self._current)
            self._current = self._current.left

        if not self._stack:
            return None

        node = self._stack.pop()
        # Resume from the right subtree on the next pull
        self._current = node.right
        return node


class PreOrderCursor(TraversalCursor):
    order = "pre"

    def _reset(self) -> None:
        self._stack: List[BinaryTree] = [self.root] if self.root is not None else []

    def _advance(self) -> Optional[BinaryTree]:
        if not self._stack:
            return None

        node = self._stack.pop()
        # Right goes in first so left comes out first
        if node.right is not None:
            self._stack.append(node.right)
        if node.left is not None:
            self._stack.append(node.left)
        return node


class PostOrderCursor(TraversalCursor):
    """
    Post-order cursor using a stack of (node, children_pushed) pairs.

    A node is yielded the second time it reaches the top of the stack,
    after both of its subtrees have been pushed and drained.
    """

    order = "post"

    def _reset(self) -> None:
        self._stack: List[Tuple[BinaryTree, bool]] = []
        if self.root is not None:
            self._stack.append((self.root, False))

    def _advance(self) -> Optional[BinaryTree]:
        while self._stack:
            node, children_pushed = self._stack.pop()
            if children_pushed:
                return node

            self._stack.append((node, True))
            if node.right is not None:
                self._stack.append((node.right, False))
            if node.left is not None:
                self._stack.append((node.left, False))

        return None


class LevelOrderCursor(TraversalCursor):
    order = "level"

    def _reset(self) -> None:
        self._queue: Deque[BinaryTree] = deque()
        if self.root is not None:
            self._queue.append(self.root)

    def _advance(self) -> Optional[BinaryTree]:
        if not self._queue:
            return None

        node = self._queue.popleft()
        if node.left is not None:
            self._queue.append(node.left)
        if node.right is not None:
            self._queue.append(node.right)
        return node


CURSOR_TYPES = {cls.order: cls for cls in (InOrderCursor, PreOrderCursor, PostOrderCursor, LevelOrderCursor)}


# -------------------------------------------------------------
# Helpers
# -------------------------------------------------------------

def from_level_order(values: Sequence[Any]) -> Optional[BinaryTree]:
    """
    Build a tree from a level-order list where None marks a missing child.

    Children are listed only for nodes that exist, e.g. [1, None, 2, 3]
    gives 1 with right child 2, and 2 with left child 3.

    Args:
        values: Level-order values. An empty list or a None first value
            gives an empty tree.

    Returns:
        BinaryTree | None: The root node, or None for an empty tree.
    """
    if not values or values[0] is None:
        return None

    root = BinaryTree(values[0])
    queue = deque([root])
    i = 1

    while queue and i < len(values):
        node = queue.popleft()

        if i < len(values) and values[i] is not None:
            queue.append(node.insert_left(values[i]))
        i += 1

        if i < len(values) and values[i] is not None:
            queue.append(node.insert_right(values[i]))
        i += 1

    return root


def parse_values(tokens: Sequence[str]) -> List[Optional[str]]:
    """Turn CLI tokens into level-order values, mapping GAP_TOKENS to None."""
    return [None if token.lower() in GAP_TOKENS else token for token in tokens]


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Print the traversal orders of a binary tree.")
    parser.add_argument(
        "--values",
        nargs="*",
        default=DEFAULT_VALUES,
        help="tree values in level order; null, none or - mark a missing child",
    )
    parser.add_argument("--order", choices=ORDERS + ("all",), default="all")
    parser.add_argument(
        "--iterative",
        action="store_true",
        help="pull nodes from cursors instead of recursing",
    )
    args = parser.parse_args(argv)

    root = from_level_order(parse_values(args.values))
    if root is None:
        print("[INFO] empty tree, nothing to traverse")
        return

    mode = "iterative" if args.iterative else "recursive"
    print(f"[INFO] {mode} traversal of {len(list(root))} nodes")

    orders = ORDERS if args.order == "all" else (args.order,)
    for order in orders:
        print(f"{order}-order:", end=" ")
        if args.iterative:
            for node in root.cursor(order):
                root.visit(node)
        else:
            root.traverse(order)
        print()


if __name__ == "__main__":
    main()
