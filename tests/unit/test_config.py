"""
Unit tests for release tool configuration.
"""
import os
from pathlib import Path
from unittest.mock import patch

import pytest


class TestSettings:
    """Tests for the Settings class."""

    def test_default_settings(self):
        """Settings should have defaults matching the repo layout."""
        from release_tools.config import get_settings

        settings = get_settings()

        assert settings.has_publish is False
        assert settings.has_install_apk is False
        assert settings.has_install is False
        assert settings.allowed_devices is None
        assert settings.allowed_device_set is None
        assert settings.wants_devices is False
        assert settings.apk_path == Path("android/app/build/outputs/apk/release/app-release.apk")
        assert settings.remote_dir == "/storage/emulated/0/Downloads"
        assert settings.pin_file == Path(".node-version")
        assert settings.adb_bin == "adb"

    def test_get_settings_cached(self):
        """get_settings should return cached instance."""
        from release_tools.config import get_settings

        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2


class TestSettingsEnvironmentVariables:
    """Tests for settings loaded from environment variables."""

    @pytest.mark.parametrize("value", ["1", "true", "yes", "anything"])
    def test_flag_set(self, value):
        from release_tools.config import get_settings

        with patch.dict(os.environ, {"HAS_PUBLISH": value}):
            get_settings.cache_clear()
            assert get_settings().has_publish is True

    @pytest.mark.parametrize("value", ["", "0", "false", "No", "off"])
    def test_flag_unset(self, value):
        from release_tools.config import get_settings

        with patch.dict(os.environ, {"HAS_INSTALL": value}):
            get_settings.cache_clear()
            assert get_settings().has_install is False

    def test_install_flags_want_devices(self):
        from release_tools.config import get_settings

        with patch.dict(os.environ, {"HAS_INSTALL_APK": "1"}):
            get_settings.cache_clear()
            settings = get_settings()
            assert settings.has_install_apk is True
            assert settings.wants_devices is True

    def test_allowed_devices_from_env(self):
        from release_tools.config import get_settings

        with patch.dict(os.environ, {"ALLOWED_DEVICES": "usb:1, emulator:5554,"}):
            get_settings.cache_clear()
            settings = get_settings()
            assert settings.allowed_device_set == {"usb:1", "emulator:5554"}

    def test_paths_from_env(self):
        from release_tools.config import get_settings

        with patch.dict(os.environ, {"APK_PATH": "/tmp/app.apk", "PIN_FILE": ".python-version"}):
            get_settings.cache_clear()
            settings = get_settings()
            assert settings.apk_path == Path("/tmp/app.apk")
            assert settings.pin_file == Path(".python-version")
