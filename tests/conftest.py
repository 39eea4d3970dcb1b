import sys
from pathlib import Path
import importlib
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture()
def m():
    """Lazily import the main module for tests to avoid module-level import."""
    return importlib.import_module("main")


@pytest.fixture()
def sample_text():
    """A short text with repeated and tied frequencies."""
    return b"the quick brown fox jumps over the lazy dog, twice: " * 3


@pytest.fixture()
def text_file(tmp_path: Path):
    """Write a small multi-line input file and return its path.

    Lines read back without their newlines: ``"aaabbc"``.
    """
    path = tmp_path / "input.txt"
    path.write_bytes(b"aaa\nbb\nc\n")
    return path


def is_prefix_free(codes):
    """Return ``True`` if no code is a prefix of another."""
    values = sorted(codes.values())
    return all(
        not values[i + 1].startswith(values[i]) for i in range(len(values) - 1)
    )


def optimal_cost(freqs):
    """Minimal weighted code length: the sum of all merge weights."""
    weights = sorted(freqs.values())
    if len(weights) == 1:
        return weights[0]
    cost = 0
    while len(weights) > 1:
        a, b = weights.pop(0), weights.pop(0)
        cost += a + b
        weights.append(a + b)
        weights.sort()
    return cost


@pytest.fixture()
def prefix_free_fn():
    return is_prefix_free


@pytest.fixture()
def optimal_cost_fn():
    return optimal_cost
