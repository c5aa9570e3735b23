"""
Fixed-income valuation provider.

Asks grana.io for the current value of a CDB, CDB-PRE, LCA or LCI given
the amount invested, the contracted rate and the start date.
"""

from typing import Any, Union

from grana_sheets.models import InvestmentType
from grana_sheets.utils.dates import normalize_date

from .base import DataProvider


class FixedIncomeProvider(DataProvider):
    """grana.io /fixed_income endpoint."""

    path = "/fixed_income"

    def get_current_value(
        self,
        investment_type: Union[InvestmentType, str],
        initial_investment: Any,
        rate: Any,
        initial_date: Any,
    ) -> Any:
        """
        Current value of a fixed-income investment.

        Args:
            investment_type: cdb, cdb-pre, lca or lci
            initial_investment: Amount invested (e.g. 1000)
            rate: Annual rate. For post-fixed types it's a share of the CDI
                  ('115%'), for cdb-pre the contracted rate ('9%')
            initial_date: Investment date (DD/MM/YYYY string or date)
        """
        return self._request([
            ("investment_type", InvestmentType(investment_type).value),
            ("initial_date", normalize_date(initial_date)),
            ("rate", rate),
            ("initial_investment", initial_investment),
        ])
