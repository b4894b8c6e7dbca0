# tests/test_config.py

import os
import tempfile
import unittest

from sweeper.config import load_config
from sweeper.errors import InvalidMineCount


class TestConfig(unittest.TestCase):

    def _write(self, text):
        fd, path = tempfile.mkstemp(suffix=".yaml")
        with os.fdopen(fd, "w") as f:
            f.write(text)
        self.addCleanup(os.remove, path)
        return path

    def test_bundled_presets(self):
        config = load_config()
        self.assertEqual(config.default_difficulty, "beginner")
        expert = config.preset("expert")
        self.assertEqual((expert.width, expert.height, expert.num_mines), (29, 16, 99))
        self.assertEqual(config.preset("Intermediate").num_mines, 40)
        self.assertEqual(config.tick_interval, 1.0)
        self.assertEqual(config.port, 5000)

    def test_unknown_preset(self):
        with self.assertRaises(KeyError):
            load_config().preset("nightmare")

    def test_invalid_preset_is_rejected(self):
        path = self._write(
            "difficulties:\n"
            "  tiny:\n"
            "    width: 3\n"
            "    height: 3\n"
            "    num_mines: 1\n"
            "default_difficulty: tiny\n"
        )
        with self.assertRaises(InvalidMineCount):
            load_config(path)

    def test_default_must_be_a_preset(self):
        path = self._write(
            "difficulties:\n"
            "  small:\n"
            "    width: 5\n"
            "    height: 5\n"
            "    num_mines: 3\n"
            "default_difficulty: huge\n"
        )
        with self.assertRaises(KeyError):
            load_config(path)

    def test_partial_file_uses_defaults(self):
        path = self._write(
            "difficulties:\n"
            "  small:\n"
            "    width: 5\n"
            "    height: 5\n"
            "    num_mines: 3\n"
            "default_difficulty: small\n"
            "server:\n"
            "  port: 8080\n"
        )
        config = load_config(path)
        self.assertEqual(config.port, 8080)
        self.assertEqual(config.host, "0.0.0.0")
        self.assertEqual(config.tick_interval, 1.0)
        self.assertEqual(config.preset("small").to_dict(), {"width": 5, "height": 5, "num_mines": 3})


if __name__ == "__main__":
    unittest.main()
