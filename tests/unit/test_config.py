"""Configuration tests"""

import os.path
from unittest import TestCase

from resfind.config import ResfindConfig
from resfind.config.base import BaseConfig


class ConfigTestCase(TestCase):
    def test_singleton(self):
        self.assertIs(ResfindConfig(), ResfindConfig())

    def test_default_files_exist(self):
        config = ResfindConfig()
        self.assertTrue(os.path.isfile(config.base_config_path))
        self.assertTrue(os.path.isfile(config.default_user_config_path))

    def test_sections(self):
        config = ResfindConfig()
        for section in ("search", "ranking", "ladder", "format"):
            with self.subTest(section):
                self.assertIn(section, config)

        self.assertIn("max_size", config["search"])
        self.assertIn("tolerance", config["ranking"])

    def test_user_config_path(self):
        self.assertEqual(os.path.basename(ResfindConfig().user_config_path), "resfind.yaml")


class MergeTestCase(TestCase):
    def test_add_keys(self):
        config = {"search": {"max_size": 5}}
        BaseConfig._merge_recursive(config, {"search": {"series": "E12"}, "ladder": {"vref": 3.3}})
        self.assertEqual(config, {"search": {"max_size": 5, "series": "E12"},
                                  "ladder": {"vref": 3.3}})

    def test_override_values(self):
        config = {"search": {"max_size": 5, "series": "E24"}}
        BaseConfig._merge_recursive(config, {"search": {"max_size": 3}})
        self.assertEqual(config, {"search": {"max_size": 3, "series": "E24"}})

    def test_conflict(self):
        config = {"search": {"max_size": 5}}
        self.assertRaises(Exception, BaseConfig._merge_recursive, config, {"search": 3})

    def test_null_keeps_default(self):
        config = {"search": {"max_size": 5}, "ranking": {"tolerance": 5}}
        BaseConfig._merge_recursive(config, {"search": {"max_size": None}, "ranking": None})
        self.assertEqual(config, {"search": {"max_size": 5}, "ranking": {"tolerance": 5}})
