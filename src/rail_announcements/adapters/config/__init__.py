"""Configuration adapters."""

from rail_announcements.adapters.config.app_config import AppConfig
from rail_announcements.adapters.config.operator_catalogue_loader import OperatorCatalogueLoader
from rail_announcements.adapters.config.preset_loader import PresetLoader

__all__ = ["AppConfig", "OperatorCatalogueLoader", "PresetLoader"]
