"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


def is_valid_port(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 < value < 65536


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        try:
            # 1st: environment variable
            config_dir = os.environ.get("EMOJI_DIFF_CONFIG_DIR")

            # 2nd: ~/.emoji_diff
            if not config_dir:
                try:
                    config_dir = os.path.expanduser("~/.emoji_diff")
                except Exception:
                    config_dir = None

            if config_dir:
                config_path = Path(config_dir)
                try:
                    config_path.mkdir(parents=True, exist_ok=True)
                    self._config_file = config_path / "config.json"
                except Exception as e:
                    print(f"[Config] Warning: Cannot write to {config_dir}: {e}")
                    self._config_file = None

            # Last resort: temp dir
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "emoji_diff"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                print(f"[Config] Using temporary config path: {self._config_file}")

        except Exception as e:
            print(f"[Config] Critical Error in ConfigManager init: {e}")
            self._config_file = Path(tempfile.gettempdir()) / "emoji_diff_config_fallback.json"

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next get_instance() re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, filling in missing sections"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (ValueError, OSError) as e:
            # ValueError covers bad JSON and undecodable bytes
            print(f"[Config] Error loading config: {e}")
            return config

        if not isinstance(stored, dict):
            print(f"[Config] Ignoring malformed config in {self._config_file}")
            return config

        for section, values in stored.items():
            if not isinstance(config.get(section), dict):
                config[section] = values
            elif isinstance(values, dict):
                config[section] = {**config[section], **values}
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "server": {"host": DEFAULT_HOST, "port": DEFAULT_PORT},
            "upload": {"maxFileSize": DEFAULT_MAX_FILE_SIZE},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return self._config.copy()

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        # Merge with existing config
        self._config.update(config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)

    def get_max_file_size(self) -> int:
        """Upload size cap in bytes, never above DEFAULT_MAX_FILE_SIZE"""
        upload = self.get_config().get("upload", {})
        if not isinstance(upload, dict):
            return DEFAULT_MAX_FILE_SIZE
        try:
            size = int(upload.get("maxFileSize", DEFAULT_MAX_FILE_SIZE))
        except (TypeError, ValueError, OverflowError):
            return DEFAULT_MAX_FILE_SIZE
        if size <= 0:
            return DEFAULT_MAX_FILE_SIZE
        return min(size, DEFAULT_MAX_FILE_SIZE)

    def get_server_address(self) -> tuple[str, int]:
        """Host and port to bind, falling back to defaults for bad values"""
        server = self.get_config().get("server", {})
        if not isinstance(server, dict):
            return DEFAULT_HOST, DEFAULT_PORT
        host = server.get("host")
        port = server.get("port")
        if not isinstance(host, str) or not host:
            host = DEFAULT_HOST
        if not is_valid_port(port):
            print(f"[Config] Ignoring invalid port {port!r}, using {DEFAULT_PORT}")
            port = DEFAULT_PORT
        return host, port
