"""MCP Protocol - JSON-RPC 2.0 implementation for stdio communication"""
import json
import sys
from typing import Dict, Any, Optional, TextIO

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class MethodNotFound(Exception):
    """Raised when a JSON-RPC method has no handler"""


class MCPProtocol:
    """Handle MCP JSON-RPC 2.0 protocol"""

    @staticmethod
    def setup_stdio_mode():
        """Setup stdio mode - redirect all print statements to stderr"""
        original_stdout = sys.stdout

        # Only JSON-RPC responses may reach the real stdout
        sys.stdout = sys.stderr

        return original_stdout

    @staticmethod
    def read_request(stdin_handle: TextIO = None, stdout_handle: TextIO = None) -> Optional[Dict]:
        """
        Read one JSON-RPC message from stdin

        Returns:
            The decoded message, {} for a line that could not be used (an error
            response has already been written), or None at end of input
        """
        source = stdin_handle if stdin_handle else sys.stdin
        line = source.readline()
        if not line:
            return None
        if not line.strip():
            return {}

        try:
            message = json.loads(line)
        except json.JSONDecodeError as e:
            MCPProtocol.write_error(None, PARSE_ERROR, f"Parse error: {str(e)}",
                                    stdout_handle=stdout_handle)
            return {}

        if not isinstance(message, dict) or not isinstance(message.get("method"), str):
            MCPProtocol.write_error(
                message.get("id") if isinstance(message, dict) else None,
                INVALID_REQUEST,
                "Invalid request",
                stdout_handle=stdout_handle
            )
            return {}
        return message

    @staticmethod
    def write_response(request_id: Any, result: Any, stdout_handle=None):
        """Write JSON-RPC success response to stdout"""
        response = {
            "jsonrpc": "2.0",
            "id": request_id,
            "result": result
        }
        MCPProtocol._write(response, stdout_handle)

    @staticmethod
    def write_error(request_id: Any, code: int, message: str, data: Any = None, stdout_handle=None):
        """Write JSON-RPC error response to stdout"""
        error = {
            "code": code,
            "message": message
        }
        if data is not None:
            error["data"] = data

        response = {
            "jsonrpc": "2.0",
            "id": request_id,
            "error": error
        }
        MCPProtocol._write(response, stdout_handle)

    @staticmethod
    def write_manifest(manifest: Dict):
        """Write manifest to stdout (for --manifest flag)"""
        sys.__stdout__.write(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n")
        sys.__stdout__.flush()

    @staticmethod
    def _write(message: Dict, stdout_handle=None):
        # Use provided stdout handle or get the real stdout
        out = stdout_handle if stdout_handle else sys.__stdout__
        out.write(json.dumps(message, ensure_ascii=False) + "\n")
        out.flush()
