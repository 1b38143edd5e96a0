"""Parser adapters for configuration file formats."""

from oxfmt_config.adapters.parser.json_parser import JsonConfigParser


__all__ = ["JsonConfigParser"]
