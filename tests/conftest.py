import pytest

from local_file_reader.fs.paths import PathResolver
from local_file_reader.mcp.servers.resources import ResourceCatalog
from local_file_reader.mcp.servers.srv_fs import FileSystemServer, build_server_definition

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256))


@pytest.fixture
def data_dir(tmp_path):
    root = tmp_path / "data"
    root.mkdir()
    (root / "notes.txt").write_text("first line\nsecond line\n", encoding="utf-8")
    (root / "chinese.md").write_bytes("# 标题\n内容\r\n".encode("utf-8"))
    (root / "image.png").write_bytes(PNG_BYTES)
    (root / "nested").mkdir()
    (root / "nested" / "inner.json").write_text('{"a": 1}', encoding="utf-8")
    return root


@pytest.fixture
def definition():
    return build_server_definition()


@pytest.fixture
def resolver(data_dir):
    return PathResolver(data_dir)


@pytest.fixture
def server(definition, resolver):
    return FileSystemServer(definition, resolver)


@pytest.fixture
def catalog(definition, resolver):
    return ResourceCatalog(definition, resolver)
