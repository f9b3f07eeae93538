"""Tests for configuration loading."""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from influenceai.config.loader import (
    load_config,
    get_api_key,
    DEFAULT_CONFIG,
)


class TestConfigLoading(unittest.TestCase):
    """Test configuration loading."""

    def test_default_config_structure(self):
        """Verify default config has required keys."""
        for key in ['api_key_env', 'search', 'server', 'display']:
            self.assertIn(key, DEFAULT_CONFIG)

    def test_default_search_endpoint(self):
        self.assertEqual(DEFAULT_CONFIG['search']['endpoint'], 'https://serpapi.com/search')
        self.assertEqual(DEFAULT_CONFIG['search']['engine'], 'google')
        self.assertEqual(DEFAULT_CONFIG['api_key_env'], 'SERPAPI_KEY')

    def test_load_config_returns_defaults(self):
        """Verify load_config returns defaults when no config file exists."""
        with mock.patch('influenceai.config.loader.get_config_path') as mock_path:
            mock_path.return_value = Path('/nonexistent/config.json')
            config = load_config()

        self.assertEqual(config, DEFAULT_CONFIG)

    def test_load_config_does_not_mutate_defaults(self):
        with mock.patch('influenceai.config.loader.get_config_path') as mock_path:
            mock_path.return_value = Path('/nonexistent/config.json')
            config = load_config()
        config['search']['engine'] = 'bing'
        self.assertEqual(DEFAULT_CONFIG['search']['engine'], 'google')

    def test_load_config_merges_user_config(self):
        """Verify user config overrides defaults."""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.json"
            with open(config_path, 'w') as f:
                json.dump({
                    "search": {"timeout_seconds": 5},
                    "server": {"port": 9000},
                    "api_key_env": "MY_SERP_KEY",
                }, f)

            with mock.patch('influenceai.config.loader.get_config_path') as mock_path:
                mock_path.return_value = config_path
                config = load_config()

        self.assertEqual(config['search']['timeout_seconds'], 5)
        self.assertEqual(config['search']['engine'], 'google')
        self.assertEqual(config['server']['port'], 9000)
        self.assertEqual(config['server']['host'], '127.0.0.1')
        self.assertEqual(config['api_key_env'], 'MY_SERP_KEY')

    def test_load_config_bad_json_falls_back(self):
        """A malformed file keeps the defaults."""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.json"
            config_path.write_text("{not json", encoding='utf-8')

            with mock.patch('influenceai.config.loader.get_config_path') as mock_path:
                mock_path.return_value = config_path
                with self.assertLogs('influenceai.config.loader', level='WARNING'):
                    config = load_config()

        self.assertEqual(config, DEFAULT_CONFIG)


class TestApiKey(unittest.TestCase):
    """Test per-request API key lookup."""

    def test_key_from_environment(self):
        with mock.patch.dict(os.environ, {'SERPAPI_KEY': 'abc123'}):
            self.assertEqual(get_api_key(DEFAULT_CONFIG), 'abc123')

    def test_missing_key(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(get_api_key(DEFAULT_CONFIG))

    def test_blank_key(self):
        with mock.patch.dict(os.environ, {'SERPAPI_KEY': '   '}):
            self.assertIsNone(get_api_key(DEFAULT_CONFIG))

    def test_custom_env_name(self):
        config = dict(DEFAULT_CONFIG, api_key_env='OTHER_KEY')
        with mock.patch.dict(os.environ, {'OTHER_KEY': 'xyz', 'SERPAPI_KEY': 'abc'}):
            self.assertEqual(get_api_key(config), 'xyz')

    def test_key_read_each_call(self):
        """The key is not cached between calls."""
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(get_api_key(DEFAULT_CONFIG))
            os.environ['SERPAPI_KEY'] = 'late'
            self.assertEqual(get_api_key(DEFAULT_CONFIG), 'late')


if __name__ == '__main__':
    unittest.main()
