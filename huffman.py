import heapq
from collections import deque
from typing import Deque, Dict, List, Optional, Tuple

SINGLE_SYMBOL_CODE = "0"  #: Code assigned when the tree is a lone leaf


class EmptyInputError(ValueError):
    """Raised when a tree is requested for input without countable symbols."""


class HuffmanNode:
    """Node for a standard binary Huffman tree.

    :ivar symbol: The symbol (byte value) stored at a leaf; ``None`` for internal nodes.
    :type symbol: int | None
    :ivar freq: Frequency (weight) of the subtree rooted at this node.
    :type freq: int
    :ivar left: Left child node.
    :type left: HuffmanNode | None
    :ivar right: Right child node.
    :type right: HuffmanNode | None
    """

    def __init__(self, symbol=None, freq=0, left=None, right=None):
        """Create a Huffman node.

        :param symbol: Symbol value for leaf nodes; ``None`` for internal nodes.
        :type symbol: int | None
        :param int freq: Frequency (weight) associated with this node.
        :param left: Left child node, if any.
        :type left: HuffmanNode|None
        :param right: Right child node, if any.
        :type right: HuffmanNode|None
        :returns: None
        :rtype: None
        """
        self.symbol = symbol
        self.freq = freq
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode(symbol={self.symbol!r}, freq={self.freq})"
        return f"HuffmanNode(freq={self.freq})"


def build_tree(buckets: Dict[int, List[int]]) -> HuffmanNode:
    """Merge the bucketed symbols into a Huffman tree.

    Leaves are pushed in bucket order (counts ascending, then symbols
    ascending). Heap entries carry an insertion sequence number, so nodes of
    equal frequency pop in the order they were pushed; merged nodes get the
    next number. The first pop of each round becomes the left child.

    :param buckets: Mapping from count to the symbols sharing that count,
        as produced by :func:`frequency.bucket_frequencies`.
    :type buckets: Dict[int, List[int]]
    :returns: Root of the tree. A single symbol yields a lone leaf.
    :rtype: HuffmanNode
    :raises EmptyInputError: If ``buckets`` holds no symbols.
    """
    heap: List[Tuple[int, int, HuffmanNode]] = []
    seq = 0
    for freq in sorted(buckets):
        for symbol in sorted(buckets[freq]):
            heapq.heappush(heap, (freq, seq, HuffmanNode(symbol=symbol, freq=freq)))
            seq += 1

    if not heap:
        raise EmptyInputError("Cannot build a Huffman tree from empty input")

    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = HuffmanNode(freq=left.freq + right.freq, left=left, right=right)
        heapq.heappush(heap, (merged.freq, seq, merged))
        seq += 1

    return heap[0][2]


def generate_codes(root: HuffmanNode) -> Dict[int, str]:
    """Assign a bitstring to every leaf with a breadth-first walk.

    Left edges append ``"0"`` and right edges ``"1"``. A tree made of a
    single leaf gets :data:`SINGLE_SYMBOL_CODE` instead of an empty code.

    :param root: Root of a Huffman tree.
    :type root: HuffmanNode
    :returns: Mapping from symbol to its code, ordered by symbol.
    :rtype: Dict[int, str]
    """
    codes: Dict[int, str] = {}
    queue: Deque[Tuple[HuffmanNode, str]] = deque([(root, "")])

    while queue:
        node, prefix = queue.popleft()
        if node.is_leaf:
            codes[node.symbol] = prefix or SINGLE_SYMBOL_CODE
        else:
            queue.append((node.left, prefix + "0"))
            queue.append((node.right, prefix + "1"))

    return dict(sorted(codes.items()))


def decode_code(root: HuffmanNode, code: str) -> int:
    """Walk ``code`` down the tree and return the symbol it lands on.

    :param root: Root of a Huffman tree.
    :type root: HuffmanNode
    :param code: Bitstring made of ``"0"`` and ``"1"``.
    :type code: str
    :returns: Symbol of the leaf at the end of the path.
    :rtype: int
    :raises ValueError: If the path is malformed, leaves the tree or
        ends on an internal node.
    """
    if root.is_leaf:
        if code != SINGLE_SYMBOL_CODE:
            raise ValueError(f"Invalid Huffman code: {code!r}")
        return root.symbol

    node = root
    for bit in code:
        if node.is_leaf:
            raise ValueError(f"Invalid Huffman code: {code!r}")
        if bit == "0":
            node = node.left
        elif bit == "1":
            node = node.right
        else:
            raise ValueError(f"Invalid bit {bit!r} in code {code!r}")

    if not node.is_leaf:
        raise ValueError(f"Incomplete Huffman code: {code!r}")
    return node.symbol


def weighted_length(frequencies: Dict[int, int], codes: Dict[int, str]) -> int:
    """Total encoded size in bits, i.e. sum of ``freq * len(code)``."""
    return sum(freq * len(codes[symbol]) for symbol, freq in frequencies.items())


def _label(node: HuffmanNode) -> str:
    if not node.is_leaf:
        return f"* ({node.freq})"
    char = chr(node.symbol)
    shown = char if char.isprintable() else repr(char)
    return f"{shown} ({node.freq})"


def _render(node: Optional[HuffmanNode], prefix: str, is_left: bool,
            lines: List[str]) -> None:
    if node is None:
        return
    lines.append(prefix + ("├───" if is_left else "└───") + _label(node))
    child_prefix = prefix + ("│   " if is_left else "    ")
    _render(node.left, child_prefix, True, lines)
    _render(node.right, child_prefix, False, lines)


def render_tree(root: Optional[HuffmanNode]) -> str:
    """Render the tree as an indented diagram.

    Each node is followed by its left subtree, then its right subtree.

    :param root: Root of the tree, or ``None``.
    :type root: HuffmanNode | None
    :returns: Multi-line diagram, ``"<empty>"`` for a missing tree.
    :rtype: str
    """
    if root is None:
        return "<empty>"
    lines: List[str] = []
    _render(root, "", False, lines)
    return "\n".join(lines)
