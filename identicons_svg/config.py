"""Configuration loading and validation using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from identicons_svg.domain import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_BACKGROUND_RADIUS,
    DEFAULT_WIDTH,
    Background,
)
from identicons_svg.infrastructure.config import YAMLConfigLoader


class BackgroundConfig(BaseModel):
    """Background rectangle configuration."""

    enabled: bool = True
    color: str = DEFAULT_BACKGROUND_COLOR
    radius: int = Field(default=DEFAULT_BACKGROUND_RADIUS, ge=0)

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Reject blank colors; the background always needs a fill."""
        if not v.strip():
            raise ValueError("background color must not be blank")
        return v

    def to_background(self) -> Background | None:
        """Build the domain value, or None when disabled."""
        if not self.enabled:
            return None
        return Background(color=self.color, radius=self.radius)


class IdenticonConfig(BaseModel):
    """Defaults used when options are not given explicitly."""

    size_min: int = Field(default=4, ge=1, le=64)
    size_max: int = Field(default=8, ge=2, le=65)
    width: int = Field(default=DEFAULT_WIDTH, ge=1)
    color: str | None = None
    hash_length: int = Field(default=15, ge=1)
    background: BackgroundConfig = Field(default_factory=BackgroundConfig)

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str | None) -> str | None:
        """Treat blank colors as unset."""
        if v is not None and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def validate_size_range(self) -> "IdenticonConfig":
        """size_max is exclusive and must exceed size_min."""
        if self.size_max <= self.size_min:
            raise ValueError(
                f"size_max ({self.size_max}) must be greater than size_min ({self.size_min})"
            )
        return self


class PreviewConfig(BaseModel):
    """Browser preview configuration."""

    enabled: bool = False


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class Config(BaseModel):
    """Application configuration."""

    identicon: IdenticonConfig = Field(default_factory=IdenticonConfig)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Missing files yield the defaults. ``None`` falls back to
    ``IDENTICONS_CONFIG_PATH`` and then ``identicons.yaml``.
    """
    data = YAMLConfigLoader(config_path).load()
    return Config.model_validate(data)
