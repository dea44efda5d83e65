"""
Fetch lifecycle for the markets snapshot.

LOADING -> READY(assets) | FAILED(message)

The controller owns the state and is its only writer. Activation suspends
once, on the markets request; a completion that arrives after the
controller was deactivated, or after a newer activation started, is
discarded instead of applied.
"""

import asyncio
import logging
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

import pytz

from ..config import FETCH_ERROR_MESSAGE
from ..services.coingecko import Asset, CoinGeckoService, FetchError

logger = logging.getLogger(__name__)


class LifecycleState(Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class FetchLifecycleController:
    """
    Runs the one markets fetch of a dashboard session.

    Consumers must branch on `state`. An empty `assets` tuple is a valid
    READY result and never means "still loading" or "failed".
    """

    def __init__(self, client: CoinGeckoService):
        self._client = client
        self._state = LifecycleState.LOADING
        self._assets: Tuple[Asset, ...] = ()
        self._error_message: Optional[str] = None
        self._last_error: Optional[BaseException] = None
        self._fetched_at: Optional[datetime] = None
        self._generation = 0
        self._active = True

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def assets(self) -> Tuple[Asset, ...]:
        return self._assets

    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    @property
    def last_error(self) -> Optional[BaseException]:
        """Underlying failure of the last attempt, for diagnostics only"""
        return self._last_error

    @property
    def fetched_at(self) -> Optional[datetime]:
        return self._fetched_at

    @property
    def is_active(self) -> bool:
        return self._active

    async def activate(self) -> LifecycleState:
        """
        Start a fetch attempt and wait for it to resolve.

        Never raises: failures are stored as FAILED state.

        Returns:
            The state after this attempt, or the current state unchanged if
            the result was discarded as stale.
        """
        self._generation += 1
        generation = self._generation
        self._active = True

        self._state = LifecycleState.LOADING
        self._assets = ()
        self._error_message = None
        self._last_error = None
        logger.info("⏳ Lifecycle: LOADING (attempt #%d)", generation)

        try:
            assets = await asyncio.to_thread(self._client.fetch_top_assets)
        except FetchError as e:
            if self._is_stale(generation):
                return self._state
            logger.error(f"❌ Lifecycle: FAILED ({type(e).__name__}): {e}")
            self._fail(e)
        except Exception as e:
            if self._is_stale(generation):
                return self._state
            logger.exception(f"🚨 Lifecycle: FAILED (unexpected {type(e).__name__}): {e}")
            self._fail(e)
        else:
            if self._is_stale(generation):
                return self._state
            self._assets = tuple(assets)
            self._fetched_at = datetime.now(pytz.UTC)
            self._state = LifecycleState.READY
            logger.info("✅ Lifecycle: READY with %d coins", len(self._assets))

        return self._state

    def deactivate(self):
        """Tear down: any in-flight completion will be discarded."""
        if self._active:
            logger.debug("🔌 Lifecycle deactivated at attempt #%d", self._generation)
        self._active = False
        self._generation += 1

    def _is_stale(self, generation: int) -> bool:
        if self._active and generation == self._generation:
            return False
        logger.warning("⚠️ Discarding stale completion of attempt #%d", generation)
        return True

    def _fail(self, error: BaseException):
        self._last_error = error
        self._assets = ()
        self._error_message = FETCH_ERROR_MESSAGE
        self._state = LifecycleState.FAILED
