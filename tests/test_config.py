"""Configuration tests: GAConfig, ConfigManager and CLI configuration loading."""

from pathlib import Path
import argparse
import json
import sys
import tempfile
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config_manager import ConfigManager
from freequeens.analysis import cli, settings
from freequeens.config import GAConfig


class GAConfigTests(unittest.TestCase):

    def test_default_run_parameters(self):
        self.assertEqual(GAConfig().to_dict(), {
            "queens": 20,
            "board_size": 20,
            "population_size": 2000,
            "max_generations": 3000,
        })

    def test_camel_case_keys(self):
        config = GAConfig.from_dict({"queens": 6, "boardSize": 6, "populationSize": 50, "maxGenerations": 10})
        self.assertEqual(config, GAConfig(6, 6, 50, 10))
        self.assertEqual(config.cells, 36)

    def test_round_trip(self):
        config = GAConfig(queens=8, board_size=9, population_size=30, max_generations=40)
        self.assertEqual(GAConfig.from_dict(config.to_dict()), config)

    def test_unknown_key(self):
        with self.assertRaises(ValueError):
            GAConfig.from_dict({"boardsize": 8})

    def test_fractional_values_rejected(self):
        with self.assertRaises(ValueError):
            GAConfig.from_dict({"boardSize": 4.7})
        with self.assertRaises(ValueError):
            GAConfig.from_dict({"queens": "8"})
        with self.assertRaises(ValueError):
            GAConfig(queens=True)
        self.assertEqual(GAConfig.from_dict({"boardSize": 6.0}).board_size, 6)

    def test_duplicate_spellings_rejected(self):
        with self.assertRaises(ValueError):
            GAConfig.from_dict({"boardSize": 6, "board_size": 8})

    def test_validate(self):
        with self.assertRaises(ValueError):
            GAConfig(population_size=0).validate()
        self.assertIsInstance(GAConfig(4, 4, 4, 4).validate(), GAConfig)


class ConfigFileTests(unittest.TestCase):

    def setUp(self):
        self._saved = {name: getattr(settings, name) for name in (
            "N_VALUES", "RUNS_GA_FINAL", "POPULATION_SIZE", "MAX_GENERATIONS", "BASE_SEED", "OUT_DIR",
        )}
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = Path(self.tmpdir.name) / "config.json"

    def tearDown(self):
        for name, value in self._saved.items():
            setattr(settings, name, value)
        self.tmpdir.cleanup()

    def _write(self, payload):
        self.path.write_text(json.dumps(payload))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            ConfigManager(self.path)

    def test_update_setting_persists(self):
        self._write({})
        manager = ConfigManager(self.path)
        manager.update_setting("ga_settings", "queens", 7)
        self.assertEqual(ConfigManager(self.path).get_ga_settings(), {"queens": 7})

    def test_apply_configuration(self):
        self._write({
            "ga_settings": {"queens": 6, "boardSize": 6, "populationSize": 20, "maxGenerations": 5},
            "experiment_settings": {"N_values": [4, 5], "runs_ga_final": 2, "base_seed": 3, "output_dir": "out"},
        })
        _, config = cli.apply_configuration(str(self.path))
        self.assertEqual(config, GAConfig(6, 6, 20, 5))
        self.assertEqual(settings.N_VALUES, [4, 5])
        self.assertEqual(settings.RUNS_GA_FINAL, 2)
        self.assertEqual(settings.BASE_SEED, 3)
        self.assertEqual(settings.OUT_DIR, "out")

    def test_apply_configuration_rejects_bad_values(self):
        self._write({"ga_settings": {"queens": -1}})
        with self.assertRaises(ValueError):
            cli.apply_configuration(str(self.path))

    def test_command_line_overrides(self):
        args = argparse.Namespace(queens=5, board_size=5, population_size=None, max_generations=9)
        config = cli.override_ga_config(GAConfig(8, 8, 100, 100), args)
        self.assertEqual(config, GAConfig(5, 5, 100, 9))


if __name__ == "__main__":
    unittest.main()
