"""Configuration management for the N-Queens explorer.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize board-size bounds, display colours, export locations and solver
time limits shared by the interactive page and the command-line interface.

File format (high-level)
------------------------
- board_settings: min_size, max_size and default_size offered by the page.
- display_settings: light_square_color, dark_square_color, queen_color.
- export_settings: output_dir for CSV files and charts.
- timeout_settings: bt_time_limit in seconds (null disables the limit).

All methods return Python native types; the class does not validate semantics
beyond presence of keys. Consistency checks live in
``nqueens_explorer.cli.apply_configuration``.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist explorer configuration.

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
                f"Create it or use the default config.json template"
            )

        with open(self.config_path, 'r') as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_board_settings(self):
        """Return board-size bounds (min_size, max_size, default_size)."""
        return self.config.get("board_settings", {})

    def get_display_settings(self):
        """Return checkerboard and queen colours."""
        return self.config.get("display_settings", {})

    def get_export_settings(self):
        """Return export settings (output directory)."""
        return self.config.get("export_settings", {})

    def get_timeout_settings(self):
        """Return solver time limits."""
        return self.config.get("timeout_settings", {})

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
