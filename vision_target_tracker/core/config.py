"""
Configuration Management
========================

Provides a centralized configuration system with:
- YAML file loading
- Environment variable overrides
- Default values
- Singleton pattern for global access
"""

import os
import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass

from vision_target_tracker.particles import ParticleFilter
from vision_target_tracker.profiles import CameraProfile, TargetGeometryProfile

logger = logging.getLogger(__name__)


@dataclass
class TargetGeometryConfig:
    """Ideal target geometry configuration."""
    ideal_aspect_ratio: float = 20.0 / 14.0
    ideal_area_ratio: float = 88.0 / 280.0
    physical_height: float = 14 / 12.0
    physical_width: float = 20 / 12.0


@dataclass
class CameraConfig:
    """Camera configuration."""
    width: int = 640
    height: int = 480
    vertical_fov: float = 39.935
    elevation_angle: float = 45.0


@dataclass
class ParticleFilterConfig:
    """Particle area filter configuration (percent of image area)."""
    enabled: bool = True
    area_minimum: float = 1.0
    area_maximum: float = 100.0


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    file_enabled: bool = False
    file_path: str = "/var/log/vision_target_tracker.log"
    max_file_size: int = 10485760
    backup_count: int = 3
    console_enabled: bool = True


class Config:
    """
    Central configuration manager.

    Loads configuration from YAML file with environment variable overrides.
    Uses singleton pattern for global access.

    Usage:
        config = Config.load("config/tracker_config.yaml")
        # or
        config = get_config()  # Gets existing instance

        fov = config.camera.vertical_fov
        session = TrackerSession.from_config(config)
    """

    _instance: Optional['Config'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config_path: Optional[str] = None):
        if Config._initialized and config_path is None:
            return

        self._raw: Dict[str, Any] = {}
        self._config_path: Optional[Path] = None

        # Initialize sub-configs with defaults
        self.target = TargetGeometryConfig()
        self.camera = CameraConfig()
        self.particle_filter = ParticleFilterConfig()
        self.logging = LoggingConfig()
        self._apply_env_overrides()

        Config._initialized = True

    @classmethod
    def load(cls, config_path: str) -> 'Config':
        """Load configuration from YAML file."""
        instance = cls(config_path)
        instance._load_file(config_path)
        return instance

    @classmethod
    def reset(cls):
        """Reset singleton instance (for testing)."""
        cls._instance = None
        cls._initialized = False

    def _load_file(self, config_path: str) -> None:
        """Load and parse YAML configuration file."""
        path = Path(config_path)

        # Search for config file in common locations
        search_paths = [
            path,
            Path(__file__).parent.parent.parent / "config" / path.name,
            Path("/etc/vision_target_tracker") / path.name,
        ]

        for search_path in search_paths:
            if search_path.exists():
                self._config_path = search_path
                break

        if self._config_path is None or not self._config_path.exists():
            logger.warning(f"Config file not found: {config_path}, using defaults")
            self._apply_env_overrides()
            return

        try:
            with open(self._config_path, 'r') as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load config: {e}")
            self._apply_env_overrides()
            return

        if not isinstance(raw, dict):
            logger.error(f"Config file {self._config_path} is not a mapping, using defaults")
            self._apply_env_overrides()
            return

        self._raw = raw
        logger.info(f"Loaded config from: {self._config_path}")

        self._parse_config()
        self._apply_env_overrides()

    def _section(self, name: str) -> Optional[Dict[str, Any]]:
        """Return a config section as a dict, or None when absent or malformed."""
        if name not in self._raw:
            return None
        section = self._raw[name]
        if section is None:
            return {}
        if not isinstance(section, dict):
            logger.error(f"Config section '{name}' is not a mapping, using defaults")
            return None
        return section

    def _parse_config(self) -> None:
        """Parse raw config into typed dataclasses."""
        # Target geometry
        t = self._section('target')
        if t is not None:
            self.target = TargetGeometryConfig(
                ideal_aspect_ratio=t.get('ideal_aspect_ratio', 20.0 / 14.0),
                ideal_area_ratio=t.get('ideal_area_ratio', 88.0 / 280.0),
                physical_height=t.get('physical_height', 14 / 12.0),
                physical_width=t.get('physical_width', 20 / 12.0),
            )

        # Camera
        c = self._section('camera')
        if c is not None:
            self.camera = CameraConfig(
                width=c.get('width', 640),
                height=c.get('height', 480),
                vertical_fov=c.get('vertical_fov', 39.935),
                elevation_angle=c.get('elevation_angle', 45.0),
            )

        # Particle filter
        p = self._section('particle_filter')
        if p is not None:
            self.particle_filter = ParticleFilterConfig(
                enabled=p.get('enabled', True),
                area_minimum=p.get('area_minimum', 1.0),
                area_maximum=p.get('area_maximum', 100.0),
            )

        # Logging
        log = self._section('logging')
        if log is not None:
            self.logging = LoggingConfig(
                level=log.get('level', 'INFO'),
                file_enabled=log.get('file_enabled', False),
                file_path=log.get('file_path', '/var/log/vision_target_tracker.log'),
                max_file_size=log.get('max_file_size', 10485760),
                backup_count=log.get('backup_count', 3),
                console_enabled=log.get('console_enabled', True),
            )

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides."""
        # Camera optics
        if os.environ.get('VTT_CAMERA_FOV'):
            self.camera.vertical_fov = float(os.environ['VTT_CAMERA_FOV'])
        if os.environ.get('VTT_CAMERA_ELEVATION'):
            self.camera.elevation_angle = float(os.environ['VTT_CAMERA_ELEVATION'])

        # Target
        if os.environ.get('VTT_TARGET_HEIGHT'):
            self.target.physical_height = float(os.environ['VTT_TARGET_HEIGHT'])

        # Particle filter
        if os.environ.get('VTT_AREA_MINIMUM'):
            self.particle_filter.area_minimum = float(os.environ['VTT_AREA_MINIMUM'])
        if os.environ.get('VTT_AREA_MAXIMUM'):
            self.particle_filter.area_maximum = float(os.environ['VTT_AREA_MAXIMUM'])

        # Logging
        if os.environ.get('VTT_LOG_LEVEL'):
            self.logging.level = os.environ['VTT_LOG_LEVEL']

    def geometry_profile(self) -> TargetGeometryProfile:
        """Build the immutable target geometry profile."""
        return TargetGeometryProfile(
            ideal_aspect_ratio=self.target.ideal_aspect_ratio,
            ideal_area_ratio=self.target.ideal_area_ratio,
            target_physical_height=self.target.physical_height,
            target_physical_width=self.target.physical_width,
        )

    def camera_profile(self) -> CameraProfile:
        """Build the immutable camera profile."""
        return CameraProfile(
            vertical_fov_degrees=self.camera.vertical_fov,
            elevation_angle_degrees=self.camera.elevation_angle,
        )

    def build_particle_filter(self) -> Optional[ParticleFilter]:
        """Build the particle area filter, or None when disabled."""
        if not self.particle_filter.enabled:
            return None
        return ParticleFilter(
            area_minimum=self.particle_filter.area_minimum,
            area_maximum=self.particle_filter.area_maximum,
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Get raw config value by dot-notation key."""
        keys = key.split('.')
        value = self._raw
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def __repr__(self) -> str:
        return f"Config(path={self._config_path}, fov={self.camera.vertical_fov})"


# Global config accessor
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def load_config(config_path: str) -> Config:
    """Load configuration from file and set as global."""
    global _config
    _config = Config.load(config_path)
    return _config
