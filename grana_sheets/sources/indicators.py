"""Macro and market indicator provider (grana.io /indicators)."""

from typing import Any, Union

from grana_sheets.models import Indicator

from .base import DataProvider


class IndicatorProvider(DataProvider):
    """Bitcoin, exchange rates, poupança, CDI, IPCA, IGP-M and SELIC."""

    path = "/indicators"

    def get_indicator(self, indicator: Union[Indicator, str], field: str) -> Any:
        return self._request([
            ("indicator", Indicator(indicator).value),
            ("field", field),
        ])
