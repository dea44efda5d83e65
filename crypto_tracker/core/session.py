"""
Dashboard session: the boundary between the core and the Streamlit view.

Inputs: search query changes and theme toggle requests.
Output: a read-only ViewSnapshot, rebuilt on demand.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from ..services.coingecko import Asset, CoinGeckoService, get_coingecko_service
from .filters import project_assets
from .lifecycle import FetchLifecycleController, LifecycleState
from .theme import PresentationScope, ThemeController, ThemeMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewSnapshot:
    """What the renderer sees after each state change"""
    lifecycle_state: LifecycleState
    assets: Tuple[Asset, ...]
    error_message: Optional[str]
    theme: ThemeMode
    search_query: str
    fetched_at: Optional[datetime] = None

    @property
    def visible_assets(self) -> List[Asset]:
        return project_assets(self.assets, self.search_query)


class DashboardSession:
    """
    One mounted dashboard view.

    Usage:
        session = DashboardSession()
        asyncio.run(session.mount())
        session.on_search_query_changed("bit")
        snapshot = session.snapshot()
    """

    def __init__(self, client: Optional[CoinGeckoService] = None,
                 scope: Optional[PresentationScope] = None):
        self.lifecycle = FetchLifecycleController(client or get_coingecko_service())
        self.theme = ThemeController(scope)
        self._search_query = ""
        self._mounted = False

    @property
    def mounted(self) -> bool:
        """True once the fetch of this session has been started"""
        return self._mounted

    @property
    def search_query(self) -> str:
        return self._search_query

    async def mount(self) -> LifecycleState:
        self._mounted = True
        return await self.lifecycle.activate()

    def unmount(self):
        self.lifecycle.deactivate()

    def on_search_query_changed(self, new_query: str):
        self._search_query = new_query or ""
        logger.debug("🔍 Search query changed (%d chars)", len(self._search_query))

    def on_theme_toggle_requested(self) -> ThemeMode:
        return self.theme.toggle()

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot(
            lifecycle_state=self.lifecycle.state,
            assets=self.lifecycle.assets,
            error_message=self.lifecycle.error_message,
            theme=self.theme.current(),
            search_query=self._search_query,
            fetched_at=self.lifecycle.fetched_at,
        )
