"""
Crypto Currency App - Top 100 cryptocurrencies dashboard
"""

__version__ = "0.1.0"
