"""MCP stdio client - communicates with the file reader server via stdin/stdout"""
import json
import os
import subprocess
import sys
from typing import Dict, Any, List, Optional
from pathlib import Path

DEFAULT_SERVER_SCRIPT = Path(__file__).parent / "servers" / "srv_fs_stdio.py"


class MCPClientError(Exception):
    """Raised when the server reports an error or cannot be reached"""

    def __init__(self, message: str, code: Optional[int] = None, data: Any = None):
        super().__init__(message)
        self.code = code
        self.data = data

    @property
    def kind(self) -> Optional[str]:
        if isinstance(self.data, dict):
            return self.data.get("kind")
        return None


class MCPStdioClient:
    """Client for communicating with the MCP server via stdio"""

    def __init__(self, server_script: str = None, env: Dict[str, str] = None, timeout: float = 30):
        """
        Initialize client for a server script

        Args:
            server_script: Path to the server script (defaults to srv_fs_stdio.py)
            env: Extra environment variables for the server process,
                 e.g. {"FILE_READER_DATA_DIR": "/srv/data"}
            timeout: Seconds to wait for each response
        """
        self.server_script = Path(server_script or DEFAULT_SERVER_SCRIPT)
        if not self.server_script.exists():
            raise FileNotFoundError(f"Server script not found: {server_script}")

        self.env = {**os.environ, **(env or {})}
        self.timeout = timeout
        self._request_id = 0

    def _get_next_id(self) -> int:
        """Get next request ID"""
        self._request_id += 1
        return self._request_id

    def request(self, method: str, params: Dict[str, Any] = None) -> Any:
        """
        Send one JSON-RPC request to a fresh server process

        Args:
            method: JSON-RPC method (e.g. 'tools/call')
            params: Method parameters

        Returns:
            The response's result

        Raises:
            MCPClientError: If the server fails, times out or returns an error
        """
        request = {
            "jsonrpc": "2.0",
            "id": self._get_next_id(),
            "method": method,
            "params": params or {}
        }

        process = subprocess.Popen(
            [sys.executable, str(self.server_script)],
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            env=self.env
        )

        try:
            stdout, stderr = process.communicate(
                input=json.dumps(request) + "\n",
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired:
            process.kill()
            process.communicate()
            raise MCPClientError(f"Server timeout: {self.server_script}")

        if not stdout.strip():
            raise MCPClientError(f"No response from server: {self.server_script}: {stderr.strip()}")

        try:
            response = json.loads(stdout.strip().splitlines()[-1])
        except json.JSONDecodeError as e:
            raise MCPClientError(f"Invalid JSON response from server: {e}")

        # Check for JSON-RPC error
        if "error" in response:
            error = response["error"]
            raise MCPClientError(
                f"Server error: {error.get('message', 'Unknown error')}",
                code=error.get("code"),
                data=error.get("data")
            )

        return response.get("result")

    def call_tool(self, name: str, arguments: Dict[str, Any]) -> List[Dict]:
        """Call a tool and return its content items"""
        result = self.request("tools/call", {"name": name, "arguments": arguments})
        return result["content"]

    def list_tools(self) -> List[Dict]:
        return self.request("tools/list")["tools"]

    def list_resources(self) -> List[Dict]:
        return self.request("resources/list")["resources"]

    def read_resource(self, uri: str) -> List[Dict]:
        return self.request("resources/read", {"uri": uri})["contents"]

    def get_manifest(self) -> Dict:
        """
        Get server manifest

        Returns:
            Server manifest with tool definitions
        """
        process = subprocess.Popen(
            [sys.executable, str(self.server_script), "--manifest"],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            env=self.env
        )

        try:
            stdout, stderr = process.communicate(timeout=5)
        except subprocess.TimeoutExpired:
            process.kill()
            process.communicate()
            raise MCPClientError(f"Manifest timeout: {self.server_script}")

        if not stdout.strip():
            raise MCPClientError(f"No manifest from server: {self.server_script}")

        try:
            return json.loads(stdout.strip())
        except json.JSONDecodeError as e:
            raise MCPClientError(f"Invalid manifest JSON: {e}")
