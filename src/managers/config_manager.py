"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files and initializes sub-managers.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from models.config import AnimationConfig, ConfigError, RunConfig
from models.zone import ZoneLayout
from utils.logger import get_logger, LogCategory

if TYPE_CHECKING:
    from managers.animation_manager import AnimationManager
    from managers.zone_manager import ZoneManager

log = get_logger().for_category(LogCategory.CONFIG)

SRC_DIR = Path(__file__).parent.parent


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes include: directive to load modular YAML files.
    Initializes sub-managers (AnimationManager, ZoneManager).
    Command-line values are layered on top with apply_overrides().

    Example:
        config = ConfigManager()
        config.load()
        config.apply_overrides(animation={"threshold": 0.01}, run={"seed": 7})

        layout = config.get_layout()
        anim = config.get_animation_config()
        run = config.get_run_config()
    """

    def __init__(self, config_path="config/config.yaml", defaults_path="config/factory_defaults.yaml"):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main config.yaml (relative to src/, or absolute)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}
        self.source: Optional[Path] = None

        # Sub-managers (initialized in load())
        self.animation_manager: 'AnimationManager'
        self.zone_manager: 'ZoneManager'

    def load(self) -> Dict[str, Any]:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat as monolithic config
        4. Fallback to factory_defaults.yaml on failure
        5. Initialize sub-managers

        Returns:
            Merged config data dict

        Raises:
            ConfigError: Factory defaults unreadable too, or invalid values
        """
        full_path = SRC_DIR / self.config_path
        try:
            main_config = self._read_yaml(full_path)

            if 'include' in main_config:
                log.info("Using include-based configuration", path=str(full_path))
                includes = main_config.pop('include') or []
                self.data = self._load_with_includes(includes, full_path.parent)
                # keys next to include: win over included files
                self.data.update(main_config)
            else:
                log.info("Using monolithic configuration", path=str(full_path))
                self.data = main_config
            self.source = full_path

        except (OSError, yaml.YAMLError, ConfigError) as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            defaults_path = SRC_DIR / self.factory_defaults_path
            try:
                self.data = self._read_yaml(defaults_path)
            except (OSError, yaml.YAMLError) as defaults_ex:
                raise ConfigError(f"Cannot load factory defaults {defaults_path}: {defaults_ex}") from defaults_ex
            self.source = defaults_path

        self._initialize_managers()
        return self.data

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path.name}: top level must be a mapping, got {type(data).__name__}")
        return data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict[str, Any]:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["animation.yaml", "zones.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict (later files override earlier top-level keys)
        """
        merged: Dict[str, Any] = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                file_data = self._read_yaml(filepath)
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise
            except (OSError, yaml.YAMLError, ConfigError) as ex:
                log.error(f"Error loading {filename}", error=str(ex))
                raise

            if file_data:
                merged.update(file_data)
                log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))

        log.info("Config merge complete", total_keys=len(merged), keys=str(list(merged.keys())[:10]))
        return merged

    def _initialize_managers(self):
        """
        Initialize sub-managers with loaded config data

        Creates:
        - AnimationManager: animation + run parameters
        - ZoneManager: zone list and offset table
        """
        from managers.animation_manager import AnimationManager
        from managers.zone_manager import ZoneManager

        self.animation_manager = AnimationManager(self.data)
        self.zone_manager = ZoneManager(self.data.get("zones", []))
        log.info(f"Loaded {len(self.zone_manager.zones)} zone definitions from config")

    # ===== Overrides =====

    def apply_overrides(self, animation: Optional[Dict[str, Any]] = None, run: Optional[Dict[str, Any]] = None):
        """
        Layer command-line values over the loaded sections

        None values are ignored, so argparse defaults never clobber the file.

        Args:
            animation: Keys of the 'animation' section
            run: Keys of the 'run' section
        """
        for section, values in (("animation", animation), ("run", run)):
            if not values:
                continue
            target = dict(self.data.get(section) or {})
            applied = {k: v for k, v in values.items() if v is not None}
            if not applied:
                continue
            target.update(applied)
            self.data[section] = target
            log.debug(f"Overrides applied to {section}", keys=str(sorted(applied)))

        self._initialize_managers()

    # ===== Access API =====

    def get_layout(self) -> ZoneLayout:
        return self.zone_manager.layout

    def get_animation_config(self) -> AnimationConfig:
        return self.animation_manager.get_animation_config()

    def get_run_config(self) -> RunConfig:
        return self.animation_manager.get_run_config()
