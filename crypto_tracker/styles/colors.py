"""
🎨 Colour palettes for the Crypto Currency App
One palette per ThemeMode - modify here to change the whole look
"""

from ..core.theme import ThemeMode

LIGHT_PALETTE = {
    # Backgrounds
    'bg_gradient': 'linear-gradient(135deg, #f3f4f6 0%, #ffffff 100%)',
    'bg_header': 'linear-gradient(90deg, #bbf7d0 0%, #93c5fd 100%)',
    'bg_table': '#ffffff',
    'bg_table_head': '#f3f4f6',
    'bg_row_hover': '#f9fafb',
    'bg_input': '#ffffff',

    # Text
    'text_primary': '#111827',
    'text_muted': '#6b7280',
    'text_error': '#dc2626',
    'text_loading': '#374151',

    # Accents
    'accent_price': '#16a34a',
    'accent_focus': '#4ade80',

    # Borders
    'border': '#e5e7eb',
    'border_input': '#d1d5db',

    # Toggle button
    'toggle_bg': '#e5e7eb',
    'toggle_fg': '#1f2937',
}

DARK_PALETTE = {
    # Backgrounds
    'bg_gradient': 'linear-gradient(135deg, #111827 0%, #1f2937 100%)',
    'bg_header': 'linear-gradient(90deg, #4ade80 0%, #3b82f6 100%)',
    'bg_table': '#111827',
    'bg_table_head': '#1f2937',
    'bg_row_hover': '#1f2937',
    'bg_input': '#374151',

    # Text
    'text_primary': '#ffffff',
    'text_muted': '#d1d5db',
    'text_error': '#f87171',
    'text_loading': '#d1d5db',

    # Accents
    'accent_price': '#16a34a',
    'accent_focus': '#4ade80',

    # Borders
    'border': '#374151',
    'border_input': '#4b5563',

    # Toggle button
    'toggle_bg': '#1f2937',
    'toggle_fg': '#facc15',
}

# Plotly templates per mode
CHART_TEMPLATES = {
    ThemeMode.LIGHT: 'plotly_white',
    ThemeMode.DARK: 'plotly_dark',
}


def get_palette(mode: ThemeMode) -> dict:
    """Return the palette for a theme mode"""
    return DARK_PALETTE if mode is ThemeMode.DARK else LIGHT_PALETTE
