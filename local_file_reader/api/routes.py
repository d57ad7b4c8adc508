from fastapi import APIRouter, Depends, HTTPException
from local_file_reader.api.models import ErrorDetail, ToolCallBody, ToolsResponse, ResourcesResponse
from local_file_reader.config import Config
from local_file_reader.mcp.errors import ErrorKind, FileReaderError
from local_file_reader.mcp.servers.srv_fs import build_servers
from local_file_reader.observability.logger import logger
from typing import Dict

router = APIRouter(prefix="/v1")

NOT_FOUND_KINDS = {ErrorKind.FILE_NOT_FOUND, ErrorKind.DIRECTORY_NOT_FOUND}


class Services:
    """Dispatcher and catalog sharing one server definition"""

    def __init__(self, config: Config):
        self.config = config
        self.server, self.catalog = build_servers(config)


_services = None

def get_services() -> Services:
    global _services
    if _services is None:
        _services = Services(Config.from_env())
    return _services

def _http_error(e: FileReaderError) -> HTTPException:
    """Map a file reader error onto an HTTP status"""
    if e.kind in NOT_FOUND_KINDS:
        status_code = 404
    elif e.kind in (ErrorKind.INVALID_ARGUMENT, ErrorKind.UNKNOWN_TOOL):
        status_code = 400
    else:
        status_code = 500
    logger.warning("http_request_failed", kind=e.kind.value, error=e.message)
    return HTTPException(status_code=status_code, detail=ErrorDetail(**e.to_dict()).model_dump())

@router.get("/tools", response_model=ToolsResponse)
async def list_tools(services: Services = Depends(get_services)):
    """List the fixed tool set"""
    return ToolsResponse(tools=[tool.to_wire() for tool in services.server.list_tools()])

@router.post("/tools/call")
async def call_tool(body: ToolCallBody, services: Services = Depends(get_services)) -> Dict:
    """Call a tool and return its content envelope"""
    try:
        envelope = services.server.call_tool({"name": body.name, "arguments": body.arguments})
    except FileReaderError as e:
        raise _http_error(e)
    return envelope.to_wire()

@router.get("/resources", response_model=ResourcesResponse)
async def list_resources(services: Services = Depends(get_services)):
    """List the data directory as resources"""
    try:
        resources = services.catalog.list_resources()
    except FileReaderError as e:
        raise _http_error(e)
    return ResourcesResponse(resources=[resource.to_wire() for resource in resources])

@router.get("/resources/read")
async def read_resource(uri: str, services: Services = Depends(get_services)) -> Dict:
    """Read one resource by URI"""
    try:
        result = services.catalog.read_resource(uri)
    except FileReaderError as e:
        raise _http_error(e)
    return result.to_wire()
