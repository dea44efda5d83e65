"""
CSS and HTML for the Top 100 coins table.
"""

from html import escape

import pandas as pd

from ...core.theme import ThemeMode
from ...styles.colors import get_palette
from ...utils import format_price, format_supply, format_usd

TABLE_HEADERS = [
    "Rank",
    "Name",
    "Symbol",
    "Market Cap",
    "Price",
    "Total Supply",
    "Volume(24hr)",
]


def get_crypto_table_css(mode: ThemeMode) -> str:
    """Returns CSS for the crypto table in the given theme."""
    p = get_palette(mode)
    return f"""
    <style>
        body {{
            margin: 0;
            font-family: 'Inter', sans-serif;
        }}
        .crypto-table {{
            min-width: 100%;
            border-collapse: collapse;
            background: {p['bg_table']};
        }}
        .crypto-table th {{
            background: {p['bg_table_head']};
            color: {p['text_primary']};
            padding: 14px 12px;
            text-align: left;
            font-size: 0.875rem;
            font-weight: 600;
            border-bottom: 1px solid {p['border']};
        }}
        .crypto-table td {{
            color: {p['text_muted']};
            padding: 16px 12px;
            font-size: 0.875rem;
            white-space: nowrap;
            border-bottom: 1px solid {p['border']};
        }}
        .crypto-table tr:hover td {{
            background: {p['bg_row_hover']};
        }}
        .name-col {{
            display: flex;
            align-items: center;
        }}
        .name-col img {{
            width: 24px;
            height: 24px;
            border-radius: 50%;
        }}
        .name-col span {{
            margin-left: 8px;
            font-weight: 500;
            color: {p['text_primary']};
        }}
        .price-col {{
            color: {p['accent_price']} !important;
        }}
        .table-container {{
            border-radius: 8px;
            overflow: auto;
            border: 1px solid {p['border']};
        }}
        .empty-row td {{
            text-align: center;
        }}
    </style>
    """


def render_crypto_table_html(df_display: pd.DataFrame, mode: ThemeMode = ThemeMode.LIGHT) -> str:
    """
    Generate HTML table for the visible coins.

    Args:
        df_display: DataFrame from charts.assets_to_frame, already filtered
        mode: Theme used for the colours

    Returns:
        Complete HTML string for the table
    """
    table_html = get_crypto_table_css(mode)

    header_cells = ''.join(f'<th scope="col">{h}</th>' for h in TABLE_HEADERS)
    table_html += f"""
    <div class="table-container">
    <table class="crypto-table">
        <thead>
            <tr>{header_cells}</tr>
        </thead>
        <tbody>
    """

    for _, row in df_display.iterrows():
        supply = None if pd.isna(row['total_supply']) else row['total_supply']
        table_html += f"""
            <tr data-id="{escape(str(row['id']))}">
                <td>{row['rank']}</td>
                <td><div class="name-col"><img src="{escape(str(row['image']))}" alt="" /><span>{escape(str(row['name']))}</span></div></td>
                <td>{escape(str(row['coin']))}</td>
                <td>{format_usd(row['market_cap'])}</td>
                <td class="price-col">{format_price(row['price'])}</td>
                <td>{format_supply(supply)}</td>
                <td>{format_usd(row['volume_24h'])}</td>
            </tr>
        """

    if df_display.empty:
        table_html += f"""
            <tr class="empty-row"><td colspan="{len(TABLE_HEADERS)}">No cryptocurrencies match your search</td></tr>
        """

    table_html += """
        </tbody>
    </table>
    </div>
    """

    return table_html


__all__ = ['TABLE_HEADERS', 'get_crypto_table_css', 'render_crypto_table_html']
