import pytest

from coder import (
    FileAccessError,
    HuffmanCoder,
    format_mapping,
    load_mapping,
    read_text,
    write_mapping,
)
from huffman import EmptyInputError


def test_read_text_drops_newlines(text_file):
    assert read_text(str(text_file)) == b"aaabbc"


def test_read_text_missing_file_raises(tmp_path):
    with pytest.raises(FileAccessError):
        read_text(str(tmp_path / "nope.txt"))


def test_coder_from_file(text_file):
    coder = HuffmanCoder.from_file(str(text_file))
    assert coder.frequencies == {ord("a"): 3, ord("b"): 2, ord("c"): 1}
    assert coder.codes == {ord("a"): "0", ord("b"): "11", ord("c"): "10"}
    assert coder.encode_symbol(ord("a")) == "0"
    assert coder.encode_symbol(ord("z")) is None
    assert coder.lookup("10") == ord("c")
    assert str(coder) == coder.render()


def test_coder_empty_input_raises():
    with pytest.raises(EmptyInputError):
        HuffmanCoder(b"")
    with pytest.raises(EmptyInputError):
        HuffmanCoder(b"\xc3\xa9\xc3\xa8")


def test_coder_parallel_matches_serial(sample_text):
    serial = HuffmanCoder(sample_text)
    parallel = HuffmanCoder(sample_text, parallel=True, workers=3)
    assert serial.codes == parallel.codes


def test_format_mapping():
    assert format_mapping({ord("b"): "11", ord("a"): "0", ord(" "): "10"}) == (
        b"  10\na 0\nb 11\n"
    )


def test_save_and_load_mapping(tmp_path, sample_text):
    coder = HuffmanCoder(sample_text)
    out = tmp_path / "codes.txt"
    coder.save(str(out))
    lines = out.read_bytes().split(b"\n")
    assert lines[-1] == b""
    assert len(lines) - 1 == len(coder.codes)
    assert load_mapping(str(out)) == coder.codes


def test_write_mapping_unwritable_raises(tmp_path):
    with pytest.raises(FileAccessError):
        write_mapping(str(tmp_path / "missing" / "codes.txt"), {97: "0"})


def test_load_mapping_malformed_raises(tmp_path):
    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"abc\n")
    with pytest.raises(ValueError):
        load_mapping(str(bad))
