"""
Configuration management using Pydantic Settings.

Environment variables (prefix ORGCHART_):
- ORGCHART_FIT_PADDING: Pixels kept free around a fitted tree
- ORGCHART_FIT_MIN_SCALE / ORGCHART_FIT_MAX_SCALE: Initial fit scale range
- ORGCHART_ZOOM_MIN_SCALE / ORGCHART_ZOOM_MAX_SCALE: Interactive zoom range
- ORGCHART_CARD_WIDTH / ORGCHART_CARD_HEIGHT: Node card size for layout
- ORGCHART_LOG_LEVEL: Root logging level
"""
from pydantic import Field
from pydantic_settings import BaseSettings

from core import constants


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Fit-to-screen
    fit_padding: float = Field(default=constants.FIT_PADDING)
    fit_min_scale: float = Field(default=constants.FIT_SCALE_RANGE[0])
    fit_max_scale: float = Field(default=constants.FIT_SCALE_RANGE[1])
    fit_vertical_bias: float = Field(default=constants.FIT_VERTICAL_BIAS)
    min_extent: float = Field(default=constants.MIN_EXTENT, gt=0)

    # Interactive zoom
    zoom_min_scale: float = Field(default=constants.ZOOM_SCALE_RANGE[0], gt=0)
    zoom_max_scale: float = Field(default=constants.ZOOM_SCALE_RANGE[1], gt=0)

    # Layout
    card_width: float = Field(default=constants.CARD_WIDTH)
    card_height: float = Field(default=constants.CARD_HEIGHT)
    horizontal_spacing: float = Field(default=constants.HORIZONTAL_SPACING)
    vertical_spacing: float = Field(default=constants.VERTICAL_SPACING)

    # API Configuration
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8002)

    log_level: str = Field(default="INFO")

    class Config:
        env_prefix = "ORGCHART_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    def get_fit_config(self) -> dict:
        """Get fit-to-screen parameters as dictionary."""
        return {
            'padding': self.fit_padding,
            'min_scale': self.fit_min_scale,
            'max_scale': self.fit_max_scale,
            'vertical_bias': self.fit_vertical_bias,
            'min_extent': self.min_extent,
        }

    def get_zoom_range(self) -> tuple:
        """Get the absolute interactive zoom bounds."""
        return self.zoom_min_scale, self.zoom_max_scale

    def get_layout_config(self) -> dict:
        """Get layout parameters as dictionary."""
        return {
            'node_width': self.card_width,
            'node_height': self.card_height,
            'h_spacing': self.horizontal_spacing,
            'v_spacing': self.vertical_spacing,
        }


# Global settings instance
settings = Settings()
