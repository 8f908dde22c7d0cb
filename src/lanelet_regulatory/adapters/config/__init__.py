"""Configuration adapters."""

from lanelet_regulatory.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
