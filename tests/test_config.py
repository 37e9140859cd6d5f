import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from advent.core.config import CONFIG_ENV_VAR, DEFAULT_INPUT_PATTERN, load_config, load_master_config


class ConfigTests(unittest.TestCase):
    def test_relative_paths_resolve_against_config_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "advent.yaml"
            path.write_text(
                "inputs:\n"
                "  dir: ./data\n"
                "  pattern: '{year}/day{day}.txt'\n"
                "workers: 3\n"
                "challenges:\n"
                "  - id: scratch\n"
                "    path: ./scratch/day12.py\n"
                "  - id: off\n"
                "    path: /abs/off.py\n"
                "    enabled: false\n",
                encoding="utf-8",
            )
            cfg = load_master_config(path)
            root = Path(tmp).resolve()

        self.assertEqual(cfg.inputs_dir, str(root / "data"))
        self.assertEqual(cfg.input_pattern, "{year}/day{day}.txt")
        self.assertEqual(cfg.workers, 3)
        self.assertEqual(cfg.challenges[0].path, str(root / "scratch" / "day12.py"))
        self.assertTrue(cfg.challenges[0].enabled)
        self.assertEqual(cfg.challenges[1].path, "/abs/off.py")
        self.assertFalse(cfg.challenges[1].enabled)

    def test_empty_file_uses_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "advent.yaml"
            path.write_text("", encoding="utf-8")
            cfg = load_master_config(path)
            self.assertEqual(cfg.inputs_dir, str(Path(tmp).resolve() / "inputs"))
        self.assertEqual(cfg.input_pattern, DEFAULT_INPUT_PATTERN)
        self.assertEqual(cfg.workers, 0)
        self.assertEqual(cfg.challenges, [])

    def test_negative_workers_rejected(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "advent.yaml"
            path.write_text("workers: -1\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_master_config(path)

    def test_explicit_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config("/nonexistent/advent.yaml")

    def test_env_var_is_used(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "custom.yaml"
            path.write_text("workers: 2\n", encoding="utf-8")
            with mock.patch.dict(os.environ, {CONFIG_ENV_VAR: str(path)}):
                cfg = load_config()
        self.assertEqual(cfg.workers, 2)
        self.assertEqual(cfg.source, str(path.resolve()))

    def test_defaults_when_nothing_found(self):
        with tempfile.TemporaryDirectory() as tmp:
            cwd = os.getcwd()
            os.chdir(tmp)
            try:
                with mock.patch.dict(os.environ, {}, clear=False):
                    os.environ.pop(CONFIG_ENV_VAR, None)
                    cfg = load_config()
            finally:
                os.chdir(cwd)
        self.assertIsNone(cfg.source)
        self.assertTrue(cfg.inputs_dir.endswith("inputs"))


if __name__ == "__main__":
    unittest.main()
