"""JSON-backed settings for ``freequeens``.

``ConfigManager`` reads ``config.json`` (or another path) once and exposes
its two sections:

``ga_settings``
    Parameters of a single search: ``queens``, ``boardSize``,
    ``populationSize`` and ``maxGenerations``. ``GAConfig.from_dict`` checks
    them.
``experiment_settings``
    Batch parameters read by ``cli.apply_configuration``: ``N_values``,
    ``runs_ga_final``, ``population_size``, ``max_generations``,
    ``base_seed`` and ``output_dir``.

A missing file raises ``FileNotFoundError``.
"""
import json
from pathlib import Path


class ConfigManager:
    """Read and update the JSON configuration file.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Returns
        -------
        dict
            Root configuration object.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or copy the config.json template"
            )

        with open(self.config_path, 'r') as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_ga_settings(self):
        """Return single-run GA settings (queens, board size, population, budget)."""
        return self.config.get("ga_settings", {})

    def get_experiment_settings(self):
        """Return batch experiment settings (sizes, runs, seed, output dir)."""
        return self.config.get("experiment_settings", {})

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
