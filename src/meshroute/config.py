"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="MESHROUTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    mesh_file: Path = Field(
        default=Path("data/mesh.txt"),
        description="Default logistics mesh, one '<origin> <destination> <distance>' segment per line.",
    )
    bidirectional_segments: bool = Field(
        default=False,
        description="When True, every mesh line also yields the reverse segment with the same distance.",
    )
    pathfinder_strategy: Literal["heap", "linear"] = Field(
        default="heap",
        description="Minimum-selection strategy used by the shortest-path search.",
    )
    cost_decimal_places: int = Field(default=2, ge=0, description="Rounding applied to route costs.")

    @field_validator("mesh_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()


settings = Settings()
