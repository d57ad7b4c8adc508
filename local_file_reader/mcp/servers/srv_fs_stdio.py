#!/usr/bin/env python3
"""FileSystem Server - MCP stdio implementation"""
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../../..'))

from dotenv import load_dotenv

from local_file_reader.config import Config
from local_file_reader.mcp.errors import FileReaderError
from local_file_reader.mcp.protocol import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    MethodNotFound,
    MCPProtocol,
)
from local_file_reader.mcp.servers.resources import ResourceCatalog
from local_file_reader.mcp.servers.srv_fs import FileSystemServer, build_servers
from local_file_reader.observability.logger import logger


def handle_request(server: FileSystemServer, catalog: ResourceCatalog,
                   method: str, params: dict):
    """Route one JSON-RPC method to the server and return its result"""
    if method == "initialize":
        return server.definition.server_info()
    if method == "ping":
        return {}
    if method == "resources/list":
        return {"resources": [resource.to_wire() for resource in catalog.list_resources()]}
    if method == "resources/read":
        uri = params.get("uri")
        if not isinstance(uri, str) or not uri:
            raise ValueError("uri is required")
        return catalog.read_resource(uri).to_wire()
    if method == "tools/list":
        return {"tools": [tool.to_wire() for tool in server.list_tools()]}
    if method == "tools/call":
        return server.call_tool({
            "name": params.get("name"),
            "arguments": params.get("arguments"),
        }).to_wire()
    if method == "prompts/list":
        return {"prompts": []}
    raise MethodNotFound(method)


def serve(server: FileSystemServer, catalog: ResourceCatalog,
          stdin_handle=None, stdout_handle=None) -> int:
    """Read and answer requests until stdin closes"""
    while True:
        request = MCPProtocol.read_request(stdin_handle, stdout_handle)
        if request is None:
            break
        if not request:
            continue

        request_id = request.get("id")
        method = request["method"]
        params = request.get("params") or {}
        is_notification = "id" not in request
        logger.info("request_received", method=method, id=request_id)

        error = None
        try:
            result = handle_request(server, catalog, method, params)
        except MethodNotFound:
            error = (METHOD_NOT_FOUND, f"Method not found: {method}", None)
        except FileReaderError as e:
            error = (e.code, e.message, {"kind": e.kind.value})
        except ValueError as e:
            error = (INVALID_PARAMS, f"Invalid params: {str(e)}", None)
        except Exception as e:
            logger.exception("request_failed", method=method, id=request_id)
            error = (INTERNAL_ERROR, f"Internal error: {str(e)}", None)

        # Notifications never get a response, not even an error
        if is_notification:
            continue
        if error:
            code, message, data = error
            MCPProtocol.write_error(request_id, code, message, data=data,
                                    stdout_handle=stdout_handle)
        else:
            MCPProtocol.write_response(request_id, result, stdout_handle)
    return 0


def main(argv=None) -> int:
    """Main entry point for stdio server"""
    argv = sys.argv[1:] if argv is None else argv
    load_dotenv()
    config = Config.from_env()

    # Check for --manifest flag
    if argv and argv[0] == "--manifest":
        server, _ = build_servers(config)
        MCPProtocol.write_manifest(server.manifest())
        return 0

    if sys.stdin is None or sys.stdin.closed:
        logger.error("transport_unavailable", reason="stdin is not available")
        return 1

    # Setup stdio mode - redirect debug prints to stderr
    original_stdout = MCPProtocol.setup_stdio_mode()

    server, catalog = build_servers(config)
    logger.info(
        "server_started",
        name=server.definition.name,
        version=server.definition.version,
        data_dir=str(config.data_path),
        mode=config.MODE
    )
    try:
        return serve(server, catalog, sys.stdin, original_stdout)
    finally:
        logger.info("server_stopped")


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
