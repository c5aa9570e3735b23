"""
Spreadsheet custom functions for Brazilian market data.

Tesouro Direto bonds, CDB/LCA/LCI valuations, macro indicators and B3
stock fundamentals, fetched from the grana.io and pafuncio APIs.
"""

__version__ = "1.0.0"
