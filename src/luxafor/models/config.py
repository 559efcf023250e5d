"""Application configuration model."""

import platform
from pathlib import Path

from pydantic import BaseModel, Field

from luxafor.utils.persistence import PydanticPersistence

WEBHOOK_API_V1 = "https://api.luxafor.com/webhook/v1/actions"
LUXAFOR_VENDOR_ID = 0x04D8
LUXAFOR_PRODUCT_ID = 0xF372

DEFAULT_CONFIG_PATH = Path.home() / ".luxafor" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Device selection (CLI --device and LUX_DEVICE take precedence)
    device: str | None = Field(
        default=None,
        description="Default device: 'usb' or a webhook device ID",
    )

    # Webhook settings
    webhook_url: str = Field(
        default=WEBHOOK_API_V1,
        description="Base URL for webhook actions",
    )
    timeout: float = Field(
        default=10.0,
        gt=0,
        description="Webhook request timeout in seconds",
    )

    # Capabilities
    extended_patterns: bool = Field(
        default_factory=lambda: platform.system() == "Windows",
        description="Allow the rainbow, sea, white wave and synthetic patterns",
    )

    # USB discovery
    usb_vendor_id: int = Field(default=LUXAFOR_VENDOR_ID, description="USB vendor ID")
    usb_product_id: int = Field(default=LUXAFOR_PRODUCT_ID, description="USB product ID")

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.luxafor/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
