"""
Pydantic data models for the grana-sheets functions.

Covers the transient values that flow through a single function call:
date arguments, the endpoint identifiers and the JSON response envelope.
Nothing here is persisted or shared between calls.
"""

import datetime
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from grana_sheets.utils.values import render_value


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class InvestmentType(str, Enum):
    CDB = "cdb"
    CDB_PRE = "cdb-pre"
    LCA = "lca"
    LCI = "lci"


class Indicator(str, Enum):
    BITCOIN = "bitcoin"
    CAMBIO = "cambio"
    POUPANCA = "poupanca"
    POUPANCA_NOVA = "poupanca-nova"
    CDI = "cdi"
    IPCA = "ipca"
    IGPM = "igpm"
    SELIC = "selic"


# ---------------------------------------------------------------------------
# Date arguments
# ---------------------------------------------------------------------------

class LiteralDate(BaseModel):
    """A date the caller already formatted (expected DD/MM/YYYY)."""
    model_config = ConfigDict(frozen=True)

    text: str


class StructuredDate(BaseModel):
    """A calendar date, as produced by a date-typed cell."""
    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @classmethod
    def from_date(cls, value: datetime.date) -> "StructuredDate":
        return cls(year=value.year, month=value.month, day=value.day)


DateInput = Union[LiteralDate, StructuredDate]


def as_date_input(value: Any) -> Optional[DateInput]:
    """
    Coerce a host value into a DateInput.

    Strings become LiteralDate and are never parsed; date and datetime
    objects become StructuredDate. None means the date was not supplied.
    Anything else (a date serial number, a boolean, ...) is not checked
    here: it becomes a LiteralDate of its rendered text and goes to the
    API as is.
    """
    if value is None:
        return None
    if isinstance(value, (LiteralDate, StructuredDate)):
        return value
    if isinstance(value, str):
        return LiteralDate(text=value)
    # datetime is a subclass of date, so this covers both
    if isinstance(value, datetime.date):
        return StructuredDate.from_date(value)
    return LiteralDate(text=render_value(value))


# ---------------------------------------------------------------------------
# Response envelope
# ---------------------------------------------------------------------------

class ResponseEnvelope(BaseModel):
    """
    The {"data": ...} object every endpoint answers with.

    Other keys are ignored. A missing data key leaves data as None.
    """
    model_config = ConfigDict(extra="ignore")

    data: Any = None
