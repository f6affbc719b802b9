"""
Tests for services.config_manager - settings file loading, merging and saving
"""

from __future__ import annotations

import json

import pytest

from services.config_manager import DEFAULT_MAX_FILE_SIZE, ConfigManager


class TestConfigManager:
    def test_uses_env_directory(self, isolated_config, tmp_path):
        assert isolated_config.config_file == tmp_path / "config" / "config.json"

    def test_singleton(self, isolated_config):
        assert ConfigManager.get_instance() is isolated_config

    def test_defaults_without_file(self, isolated_config):
        config = isolated_config.get_config()

        assert config["upload"]["maxFileSize"] == DEFAULT_MAX_FILE_SIZE
        assert config["server"] == {"host": "0.0.0.0", "port": 8000}

    def test_save_and_reload(self, isolated_config):
        isolated_config.save_config({"upload": {"maxFileSize": 1234}})

        ConfigManager.reset_instance()
        reloaded = ConfigManager.get_instance()

        assert reloaded is not isolated_config
        assert reloaded.get_max_file_size() == 1234
        assert json.loads(reloaded.config_file.read_text())["upload"]["maxFileSize"] == 1234

    def test_partial_file_keeps_other_defaults(self, isolated_config):
        isolated_config.config_file.write_text(json.dumps({"server": {"port": 9000}}))

        config = isolated_config.get_config()

        assert config["server"] == {"host": "0.0.0.0", "port": 9000}
        assert config["upload"]["maxFileSize"] == DEFAULT_MAX_FILE_SIZE

    @pytest.mark.parametrize("content", ["{broken", "[1, 2]"])
    def test_unreadable_file_falls_back_to_defaults(self, isolated_config, content):
        isolated_config.config_file.write_text(content)

        assert isolated_config.get_config()["upload"]["maxFileSize"] == DEFAULT_MAX_FILE_SIZE

    @pytest.mark.parametrize("value", [0, -5, "lots", None])
    def test_invalid_limit_falls_back(self, isolated_config, value):
        isolated_config.config_file.write_text(json.dumps({"upload": {"maxFileSize": value}}))

        assert isolated_config.get_max_file_size() == DEFAULT_MAX_FILE_SIZE

    def test_set_replaces_one_section(self, isolated_config):
        isolated_config.set("server", {"host": "127.0.0.1", "port": 8080})

        stored = json.loads(isolated_config.config_file.read_text())
        assert stored["server"] == {"host": "127.0.0.1", "port": 8080}
        assert stored["upload"]["maxFileSize"] == DEFAULT_MAX_FILE_SIZE

    def test_infinite_limit_falls_back(self, isolated_config):
        isolated_config.config_file.write_text('{"upload": {"maxFileSize": Infinity}}')

        assert isolated_config.get_max_file_size() == DEFAULT_MAX_FILE_SIZE

    def test_undecodable_file_falls_back_to_defaults(self, isolated_config):
        isolated_config.config_file.write_bytes(b"\xff\xfe{")

        assert isolated_config.get_config()["upload"]["maxFileSize"] == DEFAULT_MAX_FILE_SIZE
        assert isolated_config.get_max_file_size() == DEFAULT_MAX_FILE_SIZE

    def test_limit_above_default_is_capped(self, isolated_config):
        isolated_config.config_file.write_text(json.dumps({"upload": {"maxFileSize": 10**12}}))

        assert isolated_config.get_max_file_size() == DEFAULT_MAX_FILE_SIZE

    def test_server_address_defaults(self, isolated_config):
        assert isolated_config.get_server_address() == ("0.0.0.0", 8000)

    @pytest.mark.parametrize("port", ["x", 0, 70000, True, 80.5])
    def test_bad_port_falls_back(self, isolated_config, port):
        isolated_config.config_file.write_text(
            json.dumps({"server": {"host": "127.0.0.1", "port": port}})
        )

        assert isolated_config.get_server_address() == ("127.0.0.1", 8000)
