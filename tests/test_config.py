"""Tests for AppConfig and JSON persistence."""

import json
from unittest.mock import patch

import pytest

from luxafor.exceptions import ConfigFileInvalidError, ConfigValidationError
from luxafor.models import AppConfig
from luxafor.models.config import LUXAFOR_PRODUCT_ID, LUXAFOR_VENDOR_ID, WEBHOOK_API_V1
from luxafor.utils import PydanticPersistence


@pytest.mark.unit
class TestAppConfig:
    """Test config defaults and loading."""

    def test_defaults(self):
        """Defaults match the public API and USB IDs."""
        config = AppConfig()
        assert config.device is None
        assert config.webhook_url == WEBHOOK_API_V1
        assert config.timeout == 10.0
        assert config.usb_vendor_id == LUXAFOR_VENDOR_ID == 0x04D8
        assert config.usb_product_id == LUXAFOR_PRODUCT_ID == 0xF372

    @pytest.mark.parametrize("system, expected", [("Windows", True), ("Linux", False), ("Darwin", False)])
    def test_extended_patterns_follow_platform(self, system, expected):
        """Extended patterns default on for Windows only."""
        with patch("luxafor.models.config.platform.system", return_value=system):
            assert AppConfig().extended_patterns is expected

    def test_missing_file_gives_defaults(self, config_path):
        """No file means defaults, nothing is written."""
        config = AppConfig.load_or_default(config_path)
        assert config == AppConfig(extended_patterns=config.extended_patterns)
        assert not config_path.exists()

    def test_load_values(self, config_path):
        """Saved values are read back."""
        config_path.write_text(json.dumps({"device": "usb", "timeout": 2.5}))

        config = AppConfig.load_or_default(config_path)

        assert config.device == "usb"
        assert config.timeout == 2.5

    def test_invalid_json(self, config_path):
        """Broken JSON raises ConfigFileInvalidError."""
        config_path.write_text('{"device": "usb",}')

        with pytest.raises(ConfigFileInvalidError):
            AppConfig.load_or_default(config_path)

    def test_empty_file(self, config_path):
        """An empty file is reported, not treated as defaults."""
        config_path.write_text("   ")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            AppConfig.load_or_default(config_path)

        assert exc_info.value.user_message == "Configuration file is empty"

    def test_invalid_value(self, config_path):
        """Out of range values raise ConfigValidationError naming the field."""
        config_path.write_text(json.dumps({"timeout": 0}))

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(config_path)

        assert exc_info.value.field == "timeout"
        assert "greater than zero" in exc_info.value.recovery_hint

    def test_save_round_trip(self, config_path):
        """save() writes a file load_or_default can read."""
        AppConfig(device="2a0f2c73b72", extended_patterns=True).save(config_path)

        loaded = AppConfig.load_or_default(config_path)

        assert loaded.device == "2a0f2c73b72"
        assert loaded.extended_patterns is True


@pytest.mark.unit
class TestPersistenceSafety:
    """Test backups and atomic writes."""

    def test_save_creates_backup(self, config_path):
        """Overwriting keeps the previous file as .bak."""
        PydanticPersistence.save_json(AppConfig(device="usb"), config_path)
        PydanticPersistence.save_json(AppConfig(device="abc"), config_path)

        backup = PydanticPersistence.load_json(config_path.with_suffix(".json.bak"), AppConfig)
        current = PydanticPersistence.load_json(config_path, AppConfig)
        assert backup.device == "usb"
        assert current.device == "abc"

    def test_save_without_backup(self, config_path):
        """Backups can be turned off."""
        PydanticPersistence.save_json(AppConfig(), config_path)
        PydanticPersistence.save_json(AppConfig(), config_path, backup=False)

        assert not config_path.with_suffix(".json.bak").exists()

    def test_no_temp_file_left(self, config_path):
        """The temp file is renamed into place."""
        PydanticPersistence.save_json(AppConfig(), config_path)

        assert not config_path.with_suffix(".json.tmp").exists()

    def test_creates_parent_directories(self, tmp_path):
        """Missing parent directories are created."""
        path = tmp_path / "nested" / "dir" / "config.json"
        PydanticPersistence.save_json(AppConfig(), path)

        assert path.exists()

    def test_load_missing_raises(self, config_path):
        """load_json does not invent defaults."""
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(config_path, AppConfig)
