"""Resource Catalog - expose the data directory's entries as MCP resources"""
import os
from typing import List

from local_file_reader.fs.mime import classify
from local_file_reader.fs.paths import PathResolver
from local_file_reader.fs.reader import ReadError, read_content, render
from local_file_reader.mcp import errors
from local_file_reader.mcp.errors import ResourceError
from local_file_reader.mcp.models import (
    ReadResourceResult,
    Resource,
    ResourceContents,
    ServerDefinition,
)
from local_file_reader.observability.logger import logger


class ResourceCatalog:
    """List and read the entries of the resolver's base directory.

    Listing is one level deep and unfiltered: hidden files and subdirectories
    show up as resources too.
    """

    def __init__(self, definition: ServerDefinition, resolver: PathResolver):
        self.definition = definition
        self.resolver = resolver

    @property
    def base_dir(self):
        return self.resolver.base_dir

    def list_resources(self) -> List[Resource]:
        try:
            entries = os.listdir(self.base_dir)
        except OSError as e:
            raise ResourceError.from_failure(errors.directory_unreadable(self.base_dir, e)) from e

        return [
            Resource(
                uri=f"file:///{entry}",
                mime_type=classify(entry),
                name=entry,
                description=f"File in data directory: {entry}",
            )
            for entry in entries
        ]

    def read_resource(self, uri: str) -> ReadResourceResult:
        path = self.resolver.resolve_uri(uri)
        if not path.exists():
            raise ResourceError.from_failure(errors.file_not_found(path))

        result = read_content(path)
        if isinstance(result, ReadError):
            logger.warning("resource_read_failed", uri=uri, error=result.message)
        else:
            logger.info("resource_read", uri=uri, path=str(path))

        return ReadResourceResult(contents=[
            ResourceContents(uri=uri, mime_type=classify(path), text=render(result))
        ])
