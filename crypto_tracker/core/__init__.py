"""
Core state of the dashboard: fetch lifecycle, search filter, theme
"""

from .lifecycle import FetchLifecycleController, LifecycleState
from .filters import project_assets
from .theme import PresentationScope, ThemeController, ThemeMode
from .session import DashboardSession, ViewSnapshot

__all__ = [
    'FetchLifecycleController',
    'LifecycleState',
    'project_assets',
    'PresentationScope',
    'ThemeController',
    'ThemeMode',
    'DashboardSession',
    'ViewSnapshot',
]
