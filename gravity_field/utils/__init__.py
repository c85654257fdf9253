"""Configuration utilities."""

from gravity_field.utils.config import Config, load_config, save_config

__all__ = ["Config", "load_config", "save_config"]
