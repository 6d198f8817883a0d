"""
Sources of i3 config text.
"""
from .ipc import I3IpcClient
from .sources import load_from_file, load_from_url, load_metadata, load_text

__all__ = ['I3IpcClient', 'load_from_file', 'load_from_url', 'load_metadata', 'load_text']
