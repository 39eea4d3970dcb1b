from typing import Dict, Optional

from frequency import FrequencyCounter, bucket_frequencies
from huffman import HuffmanNode, build_tree, decode_code, generate_codes, render_tree


class FileAccessError(OSError):
    """Raised when the input cannot be read or the mapping cannot be written."""


def read_text(path: str) -> bytes:
    """Read ``path`` line by line and join the lines without their ``\\n``.

    :param path: File to read.
    :type path: str
    :returns: Concatenated line contents.
    :rtype: bytes
    :raises FileAccessError: If the file cannot be opened or read.
    """
    try:
        with open(path, "rb") as f:
            return b"".join(line.rstrip(b"\n") for line in f)
    except OSError as e:
        raise FileAccessError(f"Cannot read input file: {path}") from e


def format_mapping(codes: Dict[int, str]) -> bytes:
    """Serialize a code table as ``<char> <code>`` lines, symbols ascending.

    Symbols are written raw; a space or newline symbol is not escaped.

    :param codes: Mapping from symbol to code.
    :type codes: Dict[int, str]
    :returns: Encoded mapping text.
    :rtype: bytes
    """
    return b"".join(
        bytes([symbol]) + b" " + codes[symbol].encode("ascii") + b"\n"
        for symbol in sorted(codes)
    )


def write_mapping(path: str, codes: Dict[int, str]) -> None:
    """Write :func:`format_mapping` output to ``path``.

    :raises FileAccessError: If the file cannot be written.
    """
    try:
        with open(path, "wb") as out:
            out.write(format_mapping(codes))
    except OSError as e:
        raise FileAccessError(f"Cannot write mapping file: {path}") from e


def load_mapping(path: str) -> Dict[int, str]:
    """Read a mapping written by :func:`write_mapping`.

    Each line is split on its last space, so a space symbol reads back
    correctly. A newline symbol spans two lines and is not recoverable.

    :param path: Mapping file.
    :type path: str
    :returns: Mapping from symbol to code.
    :rtype: Dict[int, str]
    :raises FileAccessError: If the file cannot be read.
    :raises ValueError: If a line is not ``<char> <code>``.
    """
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise FileAccessError(f"Cannot read mapping file: {path}") from e

    codes: Dict[int, str] = {}
    for line in raw.split(b"\n"):
        if not line:
            continue
        head, sep, code = line.rpartition(b" ")
        if not sep or len(head) != 1 or not code:
            raise ValueError(f"Malformed mapping line: {line!r}")
        codes[head[0]] = code.decode("ascii")
    return codes


class HuffmanCoder:
    """Builds the Huffman tree and code table of a text.

    :ivar frequencies: Mapping from symbol to occurrence count.
    :type frequencies: Dict[int, int]
    :ivar root: Root of the Huffman tree.
    :type root: HuffmanNode
    :ivar codes: Mapping from symbol to its ``"0"``/``"1"`` code.
    :type codes: Dict[int, str]
    """

    def __init__(
        self,
        data: bytes,
        parallel: bool = False,
        workers: int = FrequencyCounter.DEFAULT_WORKERS,
    ):
        """Count, bucket, merge and assign codes for ``data``.

        :param data: Input text.
        :type data: bytes
        :param parallel: Count symbol frequencies on a thread pool.
        :type parallel: bool
        :param workers: Number of counting threads when ``parallel`` is set.
        :type workers: int
        :returns: None
        :rtype: None
        :raises EmptyInputError: If ``data`` has no countable symbol.
        """
        counter = FrequencyCounter(parallel=parallel, workers=workers)
        self.frequencies: Dict[int, int] = counter.count(data)
        self.root: HuffmanNode = build_tree(bucket_frequencies(self.frequencies))
        self.codes: Dict[int, str] = generate_codes(self.root)

    @classmethod
    def from_file(cls, path: str, **kwargs) -> "HuffmanCoder":
        """Build a coder from the contents of ``path``.

        :param path: Input text file.
        :type path: str
        :returns: Coder for the file's text.
        :rtype: HuffmanCoder
        :raises FileAccessError: If the file cannot be read.
        :raises EmptyInputError: If the file has no countable symbol.
        """
        return cls(read_text(path), **kwargs)

    def save(self, path: str) -> None:
        write_mapping(path, self.codes)

    def lookup(self, code: str) -> int:
        """Return the symbol reached by walking ``code`` down the tree."""
        return decode_code(self.root, code)

    def encode_symbol(self, symbol: int) -> Optional[str]:
        return self.codes.get(symbol)

    def render(self) -> str:
        return render_tree(self.root)

    def __str__(self):
        return self.render()
