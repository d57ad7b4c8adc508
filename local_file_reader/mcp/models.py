"""MCP protocol models - serialized with by_alias=True to get the wire names"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Literal, Tuple

PROTOCOL_VERSION = "2024-11-05"


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class Resource(WireModel):
    uri: str
    mime_type: str = Field(alias="mimeType")
    name: str
    description: str = ""


class ToolDescriptor(WireModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    description: str
    input_schema: Dict[str, Any] = Field(alias="inputSchema")


class ToolCallRequest(WireModel):
    name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


class TextContent(WireModel):
    type: Literal["text"] = "text"
    text: str


class ContentEnvelope(WireModel):
    content: List[TextContent]

    @classmethod
    def text(cls, text: str) -> "ContentEnvelope":
        return cls(content=[TextContent(text=text)])


class ResourceContents(WireModel):
    uri: str
    mime_type: str = Field(alias="mimeType")
    text: str


class ReadResourceResult(WireModel):
    contents: List[ResourceContents]


class FileInfo(WireModel):
    path: str
    size: int
    is_directory: bool = Field(alias="isDirectory")
    is_file: bool = Field(alias="isFile")
    created_at: str = Field(alias="createdAt")
    modified_at: str = Field(alias="modifiedAt")
    extension: str
    mime_type: str = Field(alias="mimeType")


class ServerDefinition(BaseModel):
    """Static server declaration, built once at startup and shared by reference"""
    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    protocol_version: str = PROTOCOL_VERSION
    capabilities: Tuple[str, ...] = ("resources", "tools", "prompts")
    tools: Tuple[ToolDescriptor, ...]

    @property
    def tool_names(self) -> List[str]:
        return [tool.name for tool in self.tools]

    def get_tool(self, name: str):
        return next((tool for tool in self.tools if tool.name == name), None)

    def server_info(self) -> Dict[str, Any]:
        return {
            "protocolVersion": self.protocol_version,
            "capabilities": {capability: {} for capability in self.capabilities},
            "serverInfo": {"name": self.name, "version": self.version},
        }
