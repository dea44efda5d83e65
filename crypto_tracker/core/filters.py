"""
Search filter over the markets snapshot
"""

from typing import List, Sequence

from ..services.coingecko import Asset


def project_assets(assets: Sequence[Asset], query: str) -> List[Asset]:
    """
    Return the assets whose name contains `query`, ignoring case.

    Order is preserved and the input is never modified. The query is used
    as typed: whitespace is not trimmed, so "  " only matches names that
    contain two spaces. An empty query returns every asset.
    """
    if not query:
        return list(assets)

    needle = query.lower()
    return [asset for asset in assets if needle in asset.name.lower()]
