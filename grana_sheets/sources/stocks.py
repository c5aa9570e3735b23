"""
B3 stock fundamentals provider.

Served by a separate API that takes the ticker as a path segment and the
field as a query parameter. No caller identity is sent.
"""

from typing import Any

from .base import DataProvider, encode_component


class StocksProvider(DataProvider):
    """pafuncio /stocks/{ticker} endpoint."""

    path = "/stocks"

    def get_fundamental(self, ticker: str, field: str) -> Any:
        """
        A fundamentals field for one ticker.

        Args:
            ticker: B3 ticker (e.g. 'ABEV3')
            field: Indicator name as the API spells it (e.g. 'P/L', 'ROE')
        """
        return self._request(
            [("field", field)],
            path=f"{self.path}/{encode_component(ticker)}",
        )
