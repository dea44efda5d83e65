"""
Plotly charts for the Crypto Currency App
"""

from typing import Optional, Sequence

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from .config import OVERVIEW_BAR_COUNT, OVERVIEW_PIE_COUNT
from .core.theme import ThemeMode
from .services.coingecko import Asset
from .styles.colors import CHART_TEMPLATES, get_palette


def assets_to_frame(assets: Sequence[Asset]) -> pd.DataFrame:
    """One row per asset, provider order kept"""
    return pd.DataFrame(
        [
            {
                'id': a.id,
                'rank': a.market_cap_rank,
                'name': a.name,
                'coin': a.display_symbol,
                'market_cap': a.market_cap,
                'price': a.current_price,
                'total_supply': a.total_supply,
                'volume_24h': a.total_volume,
                'image': a.image_url,
            }
            for a in assets
        ],
        columns=['id', 'rank', 'name', 'coin', 'market_cap', 'price',
                 'total_supply', 'volume_24h', 'image'],
    )


def create_market_overview_chart(assets: Sequence[Asset],
                                 mode: ThemeMode = ThemeMode.LIGHT) -> Optional[go.Figure]:
    """Top coins by market cap (bar) and market cap share (donut)"""
    if not assets:
        return None

    df = assets_to_frame(assets[:OVERVIEW_BAR_COUNT])
    palette = get_palette(mode)

    fig = make_subplots(
        rows=1, cols=2,
        subplot_titles=(f'Top {len(df)} by Market Cap', 'Market Cap Share'),
        specs=[[{"type": "bar"}, {"type": "pie"}]]
    )

    fig.add_trace(go.Bar(x=df['coin'], y=df['market_cap'], name='Market Cap',
                         marker=dict(color=df['market_cap'], colorscale='Viridis')), row=1, col=1)

    df_pie = df.head(OVERVIEW_PIE_COUNT)
    fig.add_trace(go.Pie(labels=df_pie['coin'], values=df_pie['market_cap'],
                         hole=0.4, name='Share'), row=1, col=2)

    fig.update_layout(
        template=CHART_TEMPLATES[mode],
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
        font=dict(color=palette['text_primary']),
        height=400,
        showlegend=False,
        margin=dict(l=50, r=50, t=60, b=40)
    )

    return fig
