import io
import json
import sys

from local_file_reader.mcp.protocol import METHOD_NOT_FOUND, PARSE_ERROR
from local_file_reader.mcp.servers import srv_fs_stdio
from local_file_reader.mcp.servers.srv_fs_stdio import serve


def _run(server, catalog, *messages):
    lines = [m if isinstance(m, str) else json.dumps(m) for m in messages]
    stdin = io.StringIO("\n".join(lines) + "\n")
    stdout = io.StringIO()
    exit_code = serve(server, catalog, stdin, stdout)
    responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
    return exit_code, responses


def _request(request_id, method, params=None):
    return {"jsonrpc": "2.0", "id": request_id, "method": method, "params": params or {}}


def test_initialize_reports_server_info(server, catalog):
    _, [response] = _run(server, catalog, _request(1, "initialize"))

    result = response["result"]
    assert result["serverInfo"] == {"name": "mcp-local-file-reader", "version": "0.1.0"}
    assert set(result["capabilities"]) == {"resources", "tools", "prompts"}


def test_tools_list_returns_three_tools(server, catalog):
    _, [response] = _run(server, catalog, _request(1, "tools/list"))

    assert response["id"] == 1
    assert [tool["name"] for tool in response["result"]["tools"]] == [
        "read_file", "list_files", "get_file_info"
    ]


def test_tools_call_returns_content(server, catalog):
    _, [response] = _run(server, catalog, _request(
        7, "tools/call", {"name": "read_file", "arguments": {"filePath": "notes.txt"}}
    ))

    assert response["result"] == {
        "content": [{"type": "text", "text": "first line\nsecond line\n"}]
    }


def test_tool_error_carries_kind(server, catalog):
    _, [response] = _run(server, catalog, _request(
        2, "tools/call", {"name": "read_file", "arguments": {"filePath": ""}}
    ))

    error = response["error"]
    assert error["code"] == -32602
    assert error["data"] == {"kind": "invalid_argument"}
    assert "filePath" in error["message"]


def test_resources_list_and_read(server, catalog):
    _, responses = _run(
        server, catalog,
        _request(1, "resources/list"),
        _request(2, "resources/read", {"uri": "file:///chinese.md"}),
    )

    names = {r["name"] for r in responses[0]["result"]["resources"]}
    assert "chinese.md" in names
    [content] = responses[1]["result"]["contents"]
    assert content == {"uri": "file:///chinese.md", "mimeType": "text/markdown", "text": "# 标题\n内容\r\n"}


def test_resource_not_found_error(server, catalog):
    _, [response] = _run(server, catalog, _request(3, "resources/read", {"uri": "file:///absent.txt"}))

    assert response["error"]["code"] == -32002
    assert response["error"]["data"] == {"kind": "file_not_found"}


def test_resources_read_requires_uri(server, catalog):
    _, [response] = _run(server, catalog, _request(3, "resources/read"))
    assert response["error"]["code"] == -32602


def test_malformed_line_does_not_stop_the_loop(server, catalog):
    exit_code, responses = _run(server, catalog, "{not json", _request(2, "ping"))

    assert exit_code == 0
    assert responses[0]["error"]["code"] == PARSE_ERROR
    assert responses[1] == {"jsonrpc": "2.0", "id": 2, "result": {}}


def test_unknown_method(server, catalog):
    _, [response] = _run(server, catalog, _request(5, "sampling/createMessage"))
    assert response["error"]["code"] == METHOD_NOT_FOUND


def test_notifications_get_no_response(server, catalog):
    _, responses = _run(
        server, catalog,
        {"jsonrpc": "2.0", "method": "notifications/initialized"},
        _request(1, "prompts/list"),
    )

    assert len(responses) == 1
    assert responses[0]["result"] == {"prompts": []}


def test_main_fails_without_stdin(monkeypatch, data_dir):
    monkeypatch.setenv("FILE_READER_DATA_DIR", str(data_dir))
    monkeypatch.setattr(sys, "stdin", None)

    assert srv_fs_stdio.main([]) == 1


def test_main_serves_until_eof(monkeypatch, data_dir):
    monkeypatch.setenv("FILE_READER_DATA_DIR", str(data_dir))
    monkeypatch.setattr(sys, "stdin", io.StringIO(json.dumps(_request(1, "ping")) + "\n"))
    stdout = io.StringIO()
    monkeypatch.setattr(sys, "stdout", stdout)

    assert srv_fs_stdio.main([]) == 0
    assert json.loads(stdout.getvalue()) == {"jsonrpc": "2.0", "id": 1, "result": {}}


def test_failing_notifications_get_no_response(server, catalog):
    _, responses = _run(
        server, catalog,
        {"jsonrpc": "2.0", "method": "tools/call",
         "params": {"name": "read_file", "arguments": {"filePath": "absent.txt"}}},
        {"jsonrpc": "2.0", "method": "resources/read", "params": {}},
        {"jsonrpc": "2.0", "method": "resources/read", "params": {"uri": "file:///absent.txt"}},
        _request(9, "ping"),
    )

    assert responses == [{"jsonrpc": "2.0", "id": 9, "result": {}}]


def test_malformed_tool_call_carries_kind(server, catalog):
    _, [response] = _run(server, catalog, _request(
        4, "tools/call", {"name": "read_file", "arguments": "notes.txt"}
    ))

    assert response["error"]["code"] == -32602
    assert response["error"]["data"] == {"kind": "invalid_argument"}
