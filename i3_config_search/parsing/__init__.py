"""
Extraction of tagged keybinding metadata from i3 config text.
"""
from .extractor import ConfigMetadata, parse

__all__ = ['ConfigMetadata', 'parse']
