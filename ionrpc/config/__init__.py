"""Configuration module for ionrpc."""

from ionrpc.config.loader import load_config, get_config_path
from ionrpc.config.schema import ClientConfig, Config
from ionrpc.config.access import get_config, get_client_config, clear_config_cache

__all__ = ["ClientConfig", "Config", "load_config", "get_config_path", "get_config", "get_client_config", "clear_config_cache"]
