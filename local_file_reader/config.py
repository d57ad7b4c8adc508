import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

MODES = ("sandboxed", "open")


class Config(BaseModel):
    """Configuration management using environment variables"""

    model_config = ConfigDict(frozen=True)

    # Filesystem
    DATA_DIR: str = "./data"
    MODE: str = "sandboxed"

    # Logging
    LOG_LEVEL: str = "INFO"

    # HTTP inspection server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    @field_validator("MODE")
    @classmethod
    def _check_mode(cls, value: str) -> str:
        value = value.lower()
        if value not in MODES:
            raise ValueError(f"FILE_READER_MODE must be one of {', '.join(MODES)}, got {value!r}")
        return value

    @classmethod
    def from_env(cls) -> "Config":
        """Build the configuration from the current environment"""
        return cls(
            DATA_DIR=os.getenv("FILE_READER_DATA_DIR", "./data"),
            MODE=os.getenv("FILE_READER_MODE", "sandboxed"),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
            HOST=os.getenv("HOST", "0.0.0.0"),
            PORT=int(os.getenv("PORT", "8000")),
        )

    @property
    def data_path(self) -> Path:
        return Path(self.DATA_DIR).resolve()

    def ensure_directories(self):
        """Create necessary directories"""
        self.data_path.mkdir(parents=True, exist_ok=True)
