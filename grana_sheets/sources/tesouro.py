"""
Tesouro Direto bond data provider.

Current and historical values for government bonds sold through the
Tesouro Direto retail program, e.g. "Tesouro Selic 2025" / preco_venda.
"""

import logging
from typing import Any

from grana_sheets.utils.dates import normalize_date

from .base import DataProvider

logger = logging.getLogger(__name__)


class TesouroProvider(DataProvider):
    """grana.io /tesouro endpoint."""

    path = "/tesouro"

    def get_bond(self, bond: str, field: str) -> Any:
        """
        Current value of a bond field.

        Args:
            bond: Bond title (e.g. 'Tesouro IPCA+ 2035')
            field: Field name (e.g. 'preco_venda', 'taxa_compra')
        """
        return self._request([("bond", bond), ("field", field)])

    def get_bond_history(self, bond: str, field: str, initial_date: Any, final_date: Any) -> Any:
        """
        Bond field over a date range.

        Each date is normalized on its own; the range is not checked. The
        server decides whether a single value or a series comes back.

        Args:
            bond: Bond title
            field: Field name
            initial_date: Start date (DD/MM/YYYY string or date)
            final_date: End date (DD/MM/YYYY string or date)
        """
        return self._request([
            ("bond", bond),
            ("field", field),
            ("initial_date", normalize_date(initial_date)),
            ("final_date", normalize_date(final_date)),
        ])
