from pydantic import BaseModel, Field
from typing import Any, Dict, List

class ToolCallBody(BaseModel):
    name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)

class ToolsResponse(BaseModel):
    tools: List[Dict[str, Any]]

class ResourcesResponse(BaseModel):
    resources: List[Dict[str, Any]]

class ErrorDetail(BaseModel):
    kind: str
    message: str
