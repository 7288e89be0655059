"""
Managers for configuration
"""

from .config_manager import ConfigManager
from .animation_manager import AnimationManager
from .zone_manager import ZoneManager

__all__ = ['ConfigManager', 'AnimationManager', 'ZoneManager']
