"""
Configuration management for the i3 config searcher
"""
import os
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator


class ModifierMarkers(BaseModel):
    """Literal tokens in a keys annotation that mark a required modifier"""
    shift: str = "shift"
    control: str = "ctrl"
    alt: str = "alt"
    meta: str = "super"

    @field_validator("shift", "control", "alt", "meta")
    @classmethod
    def normalize_marker(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("modifier marker cannot be empty")
        return value

    def marker_for(self, modifier: str) -> str:
        return getattr(self, modifier)


class SearchConfig(BaseModel):
    """Configuration for ranking"""
    max_results: Optional[int] = Field(default=None, ge=1)
    markers: ModifierMarkers = Field(default_factory=ModifierMarkers)


class LoaderConfig(BaseModel):
    """Where the i3 configuration text comes from"""
    source: Literal["ipc", "file", "url"] = "ipc"
    path: Optional[str] = None
    url: Optional[str] = None
    socket_path: Optional[str] = None
    timeout: float = Field(default=10.0, gt=0)  # seconds


class LoggingConfig(BaseModel):
    """Configuration for log output"""
    level: str = "WARNING"
    file: Optional[str] = None
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Config(BaseModel):
    """Main configuration class"""
    search: SearchConfig = Field(default_factory=SearchConfig)
    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables"""
        path = os.getenv("I3CS_PATH")
        url = os.getenv("I3CS_URL")
        default_source = "file" if path else "url" if url else "ipc"
        return cls(
            loader=LoaderConfig(
                source=os.getenv("I3CS_SOURCE", default_source),
                path=path,
                url=url,
                socket_path=os.getenv("I3SOCK"),
            ),
            logging=LoggingConfig(
                level=os.getenv("I3CS_LOG_LEVEL", "WARNING")
            )
        )

    @classmethod
    def load_from_file(cls, file_path: str) -> "Config":
        """Load configuration from JSON file"""
        import json
        with open(file_path, 'r') as f:
            data = json.load(f)
        return cls(**data)

    def save_to_file(self, file_path: str) -> None:
        """Save configuration to JSON file"""
        import json
        with open(file_path, 'w') as f:
            json.dump(self.model_dump(), f, indent=2)
