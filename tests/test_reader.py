import pytest

from local_file_reader.fs.mime import MIME_TYPES
from local_file_reader.fs.reader import BINARY_EXTENSIONS, ReadError, ReadOk, is_binary, read_content, render

from conftest import PNG_BYTES


def test_text_file_round_trips(tmp_path):
    original = "line one\r\nline two\n中文 ✓\n"
    path = tmp_path / "mixed.txt"
    path.write_bytes(original.encode("utf-8"))

    result = read_content(path)

    assert isinstance(result, ReadOk)
    assert result.text == original
    copy = tmp_path / "copy.txt"
    copy.write_bytes(result.text.encode("utf-8"))
    assert copy.read_bytes() == path.read_bytes()


def test_binary_file_is_described_not_read(data_dir):
    result = read_content(data_dir / "image.png")

    assert isinstance(result, ReadOk)
    assert "image.png" in result.text
    assert f"{len(PNG_BYTES)} bytes" in result.text
    assert result.text == f"[Binary file: image.png, size: {len(PNG_BYTES)} bytes]"


def test_binary_detection_uses_extension_case_insensitively(tmp_path):
    assert is_binary(tmp_path / "SCAN.PDF")
    assert not is_binary(tmp_path / "notes.txt")
    assert len(BINARY_EXTENSIONS) >= 16


def test_missing_file_becomes_read_error(tmp_path):
    result = read_content(tmp_path / "gone.txt")

    assert isinstance(result, ReadError)
    assert result.message.startswith("[Error reading file:")


def test_invalid_utf8_becomes_read_error(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("café".encode("latin-1"))

    result = read_content(path)

    assert isinstance(result, ReadError)


def test_directory_becomes_read_error(tmp_path):
    assert isinstance(read_content(tmp_path), ReadError)


def test_render_unwraps_both_variants():
    assert render(ReadOk("hello")) == "hello"
    assert render(ReadError("[Error reading file: boom]")) == "[Error reading file: boom]"


def test_non_text_mime_entries_are_binary():
    archive_types = {"application/zip", "application/vnd.rar", "application/x-7z-compressed",
                     "application/x-tar", "application/gzip"}
    for extension, mime_type in MIME_TYPES.items():
        if extension == ".svg":
            continue
        if mime_type.split("/")[0] in ("image", "audio", "video") or mime_type in archive_types:
            assert extension in BINARY_EXTENSIONS, extension


@pytest.mark.parametrize("name, payload", [
    ("backup.gz", b"\x1f\x8b\x08\x00" + bytes(range(128, 256))),
    ("bundle.tar", b"\x00" * 100 + b"\xff\xfe"),
    ("photo.webp", b"RIFF\x10\x00\x00\x00WEBPVP8 \x9d\x01\x2a"),
])
def test_archives_and_webp_are_described(tmp_path, name, payload):
    path = tmp_path / name
    path.write_bytes(payload)

    result = read_content(path)

    assert result == ReadOk(f"[Binary file: {name}, size: {len(payload)} bytes]")
