"""
📊 Top 100 Coins Module

Displays:
- Search box
- Loading / error status
- Summary metrics, market overview chart and the coins table
"""

from .main import render_top_coins_tab

__all__ = ['render_top_coins_tab']
