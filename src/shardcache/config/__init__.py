"""Configuration for the shardcache command-line tool."""

from shardcache.config.hierarchy import load_config_hierarchy, load_settings
from shardcache.config.schema import CacheSettings

__all__ = ["CacheSettings", "load_config_hierarchy", "load_settings"]
