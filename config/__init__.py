"""
Configuration for the pattern demonstrations.
"""
from .settings import DemoSettings, load_settings

__all__ = [
    'DemoSettings',
    'load_settings',
]
