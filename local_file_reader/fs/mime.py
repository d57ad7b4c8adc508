"""MIME Classifier - map file extensions to content types"""
from pathlib import PurePath
from typing import Union

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = {
    # Text and code
    ".txt": "text/plain",
    ".md": "text/markdown",
    ".csv": "text/csv",
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".xml": "application/xml",
    ".json": "application/json",
    ".yaml": "application/yaml",
    ".yml": "application/yaml",
    ".js": "text/javascript",
    ".ts": "text/x-typescript",
    ".py": "text/x-python",
    # Images
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
    # Office documents
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".xls": "application/vnd.ms-excel",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".ppt": "application/vnd.ms-powerpoint",
    ".pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    # Audio
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    # Video
    ".mp4": "video/mp4",
    ".avi": "video/x-msvideo",
    # Archives
    ".zip": "application/zip",
    ".rar": "application/vnd.rar",
    ".7z": "application/x-7z-compressed",
    ".tar": "application/x-tar",
    ".gz": "application/gzip",
}


def classify(path: Union[str, PurePath]) -> str:
    """Return the content type for ``path`` based on its extension"""
    suffix = PurePath(str(path)).suffix.lower()
    return MIME_TYPES.get(suffix, DEFAULT_MIME_TYPE)
