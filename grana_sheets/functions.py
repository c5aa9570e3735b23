"""
Spreadsheet custom functions.

Each formula (TESOURODIRETO, CDB, SELIC, FUN, ...) is a thin forwarder to
one of the providers. Arguments go through as given; only dates are
coerced, and provider errors are left to propagate to the host so it can
show them in the cell.

Usage:
    fns = GranaFunctions.from_settings()
    fns.cdb(1000, "115%", "01/01/2017")
    fns.call("TESOURODIRETO", "Tesouro Selic 2025", "preco_venda")
"""

import logging
from typing import Any, Dict, Optional

from grana_sheets.config import Settings, settings as default_settings
from grana_sheets.models import Indicator, InvestmentType
from grana_sheets.sources.base import Transport
from grana_sheets.sources.fixed_income import FixedIncomeProvider
from grana_sheets.sources.identity import EnvironmentIdentity, IdentityResolver
from grana_sheets.sources.indicators import IndicatorProvider
from grana_sheets.sources.stocks import StocksProvider
from grana_sheets.sources.tesouro import TesouroProvider
from grana_sheets.utils.session import RequestSession

logger = logging.getLogger(__name__)


class UnknownFormulaError(KeyError):
    """Raised when a formula name has no matching function."""
    pass


class GranaFunctions:
    """
    The formula surface exposed to the spreadsheet host.

    Holds one provider per endpoint, all sharing the same transport and
    identity resolver. Stateless between calls.
    """

    # Formula name -> method name
    FORMULAS: Dict[str, str] = {
        "TESOURODIRETO": "tesouro_direto",
        "TESOURODIRETOHIST": "tesouro_direto_hist",
        "CDB": "cdb",
        "CDBPRE": "cdb_pre",
        "LCA": "lca",
        "LCI": "lci",
        "BITCOIN": "bitcoin",
        "CAMBIO": "cambio",
        "POUPANCA": "poupanca",
        "POUPANCANOVA": "poupanca_nova",
        "CDI": "cdi",
        "IPCA": "ipca",
        "IGPM": "igpm",
        "SELIC": "selic",
        "FUN": "fun",
    }

    def __init__(
        self,
        transport: Transport,
        identity: IdentityResolver,
        settings: Optional[Settings] = None,
    ):
        settings = settings or default_settings
        self.tesouro = TesouroProvider(transport, settings.GRANA_API_URL, identity)
        self.fixed_income = FixedIncomeProvider(transport, settings.GRANA_API_URL, identity)
        self.indicators = IndicatorProvider(transport, settings.GRANA_API_URL, identity)
        self.stocks = StocksProvider(transport, settings.STOCKS_API_URL)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "GranaFunctions":
        """Default wiring: a live HTTP session and the owner email from the environment."""
        settings = settings or default_settings
        return cls(
            transport=RequestSession(),
            identity=EnvironmentIdentity(settings.OWNER_EMAIL_VAR),
            settings=settings,
        )

    # ----------------------------------------------------------------
    # Dispatch
    # ----------------------------------------------------------------

    def call(self, formula: str, *args: Any) -> Any:
        """
        Evaluate a formula by name.

        Raises:
            UnknownFormulaError: If the name isn't one of FORMULAS
        """
        method = self.FORMULAS.get(formula.strip().upper())
        if method is None:
            raise UnknownFormulaError(formula)
        logger.debug(f"{formula.upper()}{args}")
        return getattr(self, method)(*args)

    # ----------------------------------------------------------------
    # Tesouro Direto
    # ----------------------------------------------------------------

    def tesouro_direto(self, title: str, field: str) -> Any:
        """
        TESOURODIRETO(titulo; campo)

        Current data for a Tesouro Direto bond, e.g.
        TESOURODIRETO("Tesouro Selic 2025"; "preco_venda").
        """
        return self.tesouro.get_bond(title, field)

    def tesouro_direto_hist(self, title: str, field: str, start_date: Any, end_date: Any) -> Any:
        """
        TESOURODIRETOHIST(titulo; campo; data_inicio; data_final)

        Bond data between two dates. Returns a value or a series depending
        on what the server sends back.
        """
        return self.tesouro.get_bond_history(title, field, start_date, end_date)

    # ----------------------------------------------------------------
    # Fixed income
    # ----------------------------------------------------------------

    def cdb(self, initial_investment: Any, rate: Any, start_date: Any) -> Any:
        """
        CDB(investimento_inicial; rentabilidade; data_inicial)

        Current value of a post-fixed CDB. rate is a share of the CDI,
        e.g. CDB(1000; 115%; "01/01/2017").
        """
        return self.fixed_income.get_current_value(InvestmentType.CDB, initial_investment, rate, start_date)

    def cdb_pre(self, initial_investment: Any, rate: Any, start_date: Any) -> Any:
        """CDBPRE: current value of a pre-fixed CDB; rate is the contracted annual rate."""
        return self.fixed_income.get_current_value(InvestmentType.CDB_PRE, initial_investment, rate, start_date)

    def lca(self, initial_investment: Any, rate: Any, start_date: Any) -> Any:
        """LCA: current value of an agribusiness credit bill (rate as % of CDI)."""
        return self.fixed_income.get_current_value(InvestmentType.LCA, initial_investment, rate, start_date)

    def lci(self, initial_investment: Any, rate: Any, start_date: Any) -> Any:
        """LCI: current value of a real-estate credit bill (rate as % of CDI)."""
        return self.fixed_income.get_current_value(InvestmentType.LCI, initial_investment, rate, start_date)

    # ----------------------------------------------------------------
    # Indicators
    # ----------------------------------------------------------------

    def bitcoin(self, field: str) -> Any:
        return self.indicators.get_indicator(Indicator.BITCOIN, field)

    def cambio(self, field: str) -> Any:
        """Currency exchange rates; field picks the currency/quote."""
        return self.indicators.get_indicator(Indicator.CAMBIO, field)

    def poupanca(self, field: str) -> Any:
        return self.indicators.get_indicator(Indicator.POUPANCA, field)

    def poupanca_nova(self, field: str) -> Any:
        """Savings yield under the post-2012 rule."""
        return self.indicators.get_indicator(Indicator.POUPANCA_NOVA, field)

    def cdi(self, field: str) -> Any:
        return self.indicators.get_indicator(Indicator.CDI, field)

    def ipca(self, field: str) -> Any:
        return self.indicators.get_indicator(Indicator.IPCA, field)

    def igpm(self, field: str) -> Any:
        return self.indicators.get_indicator(Indicator.IGPM, field)

    def selic(self, field: str) -> Any:
        return self.indicators.get_indicator(Indicator.SELIC, field)

    # ----------------------------------------------------------------
    # Stocks
    # ----------------------------------------------------------------

    def fun(self, ticker: str, field: str) -> Any:
        """
        FUN(ticker; campo)

        Fundamentals for a B3 stock, e.g. FUN("ABEV3"; "P/L").
        """
        return self.stocks.get_fundamental(ticker, field)
