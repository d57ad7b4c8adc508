"""Path Resolver - map caller-supplied paths and URIs onto the filesystem"""
import os
from pathlib import Path
from typing import Union
from urllib.parse import unquote, urlparse

SANDBOXED = "sandboxed"
OPEN = "open"


class PathResolver:
    """Resolve paths under one policy for every endpoint.

    In sandboxed mode everything is joined under ``base_dir``; a leading
    separator is stripped first, so ``/notes.txt`` means ``<base_dir>/notes.txt``.
    In open mode paths are taken as given, relative to the working directory.

    ``..`` segments are not rejected in either mode. No existence checks are
    made here; callers check before using the result.
    """

    def __init__(self, base_dir: Union[str, os.PathLike], mode: str = SANDBOXED):
        if mode not in (SANDBOXED, OPEN):
            raise ValueError(f"Unknown resolution mode: {mode}")
        self.base_dir = Path(base_dir).resolve()
        self.mode = mode

    def resolve(self, path: str) -> Path:
        if self.mode == OPEN:
            return Path(path).expanduser().resolve()
        if os.sep == "\\":
            path = path.replace("\\", "/")
        relative = path.lstrip("/")
        return (self.base_dir / relative).resolve()

    def resolve_uri(self, uri: str) -> Path:
        """Resolve the path component of a ``file:///name`` style URI"""
        parsed = urlparse(uri)
        path = unquote(parsed.path)
        if self.mode == OPEN:
            return Path(path).resolve()
        return (self.base_dir / path.lstrip("/")).resolve()

    def __repr__(self):
        return f"PathResolver(base_dir={str(self.base_dir)!r}, mode={self.mode!r})"
