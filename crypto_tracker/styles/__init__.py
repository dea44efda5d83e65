"""
Styles package for the Crypto Currency App
"""

from .theme import inject_theme, build_theme_css, active_mode

__all__ = ['inject_theme', 'build_theme_css', 'active_mode']
