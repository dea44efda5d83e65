"""
Components package for the Crypto Currency App
"""

from .header import render_header
from .top_coins import render_top_coins_tab

__all__ = [
    'render_header',
    'render_top_coins_tab',
]
