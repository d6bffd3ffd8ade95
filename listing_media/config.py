# listing_media/config.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    ALLOWED_ENVIRONMENTS,
    COMPRESSION_QUALITY,
    DEFAULT_COMPRESSION_MAX_WORKERS,
    DEFAULT_ENVIRONMENT,
    DEFAULT_THUMBNAIL_EDGE_PX,
    MAX_COMPRESSION_WORKERS,
    MAX_THUMBNAIL_EDGE_PX,
    MIN_THUMBNAIL_EDGE_PX,
)
from .enums import LogLevel


class ImagePipelineConfig(BaseModel):
    """Immutable configuration handed to the image pipeline at construction."""

    thumbnail_edge_px: int = Field(
        default=DEFAULT_THUMBNAIL_EDGE_PX,
        ge=MIN_THUMBNAIL_EDGE_PX,
        le=MAX_THUMBNAIL_EDGE_PX,
        description="Length the shorter side of a thumbnail is scaled to",
    )
    compression_quality: float = Field(
        default=COMPRESSION_QUALITY,
        ge=0.0,
        le=1.0,
        description="Lossy quality for recompression (0.0 worst, 1.0 best)",
    )
    compression_max_workers: int = Field(
        default=DEFAULT_COMPRESSION_MAX_WORKERS,
        ge=1,
        le=MAX_COMPRESSION_WORKERS,
        description="Upper bound on threads used for concurrent batch compression",
    )

    model_config = ConfigDict(frozen=True)


class Settings(BaseSettings):
    environment: str = DEFAULT_ENVIRONMENT

    # Image pipeline
    thumbnail_edge_px: int = Field(
        default=DEFAULT_THUMBNAIL_EDGE_PX,
        ge=MIN_THUMBNAIL_EDGE_PX,
        le=MAX_THUMBNAIL_EDGE_PX,
        description="Thumbnail edge in pixels (shorter side of list-view thumbnails)",
    )
    compression_max_workers: int = Field(
        default=DEFAULT_COMPRESSION_MAX_WORKERS,
        ge=1,
        le=MAX_COMPRESSION_WORKERS,
        description="Maximum threads for concurrent batch compression",
    )

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_file: Optional[str] = Field(
        default=None, description="Log file path (optional)"
    )

    def pipeline_config(self) -> ImagePipelineConfig:
        """Build the immutable pipeline configuration from these settings"""
        return ImagePipelineConfig(
            thumbnail_edge_px=self.thumbnail_edge_px,
            compression_max_workers=self.compression_max_workers,
        )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v) -> LogLevel:
        """Validate log level is one of the allowed values"""
        if isinstance(v, LogLevel):
            return v
        allowed_levels = LogLevel.__members__.keys()
        v_upper = str(v).upper()
        if v_upper not in allowed_levels:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(allowed_levels)}"
            )
        return LogLevel[v_upper]

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is one of the allowed values"""
        v_lower = v.lower()
        if v_lower not in ALLOWED_ENVIRONMENTS:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {', '.join(ALLOWED_ENVIRONMENTS)}"
            )
        return v_lower

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )


# Global settings instance
settings = Settings()
