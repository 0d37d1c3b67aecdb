"""
Record shapes for the brokerage export tables.

The export carries an accounts table followed by a transactions table:

    Account Number,Investment Name,Symbol,Shares,Share Price,Total Value,

    Account Number,Trade Date,Settlement Date,Transaction Type,
    Transaction Description,Investment Name,Symbol,Shares,Share Price,
    Principal Amount,Commissions and Fees,Net Amount,Accrued Interest,
    Account Type,
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict

from ..constants import FieldKind
from .shape import FieldSpec, RecordShape


class Account(BaseModel):
    """One holding row of the accounts table"""
    model_config = ConfigDict(frozen=True)

    account_number: str
    investment_name: str
    symbol: str
    shares: float
    share_price: float
    total_value: float


class Transaction(BaseModel):
    """One row of the transactions table"""
    model_config = ConfigDict(frozen=True)

    account_number: str
    trade_date: str
    settlement_date: str
    transaction_type: str
    transaction_description: str
    investment_name: str
    symbol: str
    shares: float
    share_price: float
    principal_amount: float
    commissions_and_fees: float
    net_amount: float
    accrued_interest: float
    account_type: str


def _text(name: str, *aliases: str) -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.TEXT, aliases=aliases)


def _number(name: str, *aliases: str) -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.NUMBER, aliases=aliases)


ACCOUNT_SHAPE = RecordShape(
    name="account",
    record_model=Account,
    fields=(
        _text("account_number", "Account Number"),
        _text("investment_name", "Investment Name"),
        _text("symbol", "Symbol"),
        _number("shares", "Shares"),
        _number("share_price", "Share Price"),
        _number("total_value", "Total Value"),
    ),
)

TRANSACTION_SHAPE = RecordShape(
    name="transaction",
    record_model=Transaction,
    fields=(
        _text("account_number", "Account Number"),
        _text("trade_date", "Trade Date"),
        _text("settlement_date", "Settlement Date"),
        _text("transaction_type", "Transaction Type"),
        _text("transaction_description", "Transaction Description"),
        _text("investment_name", "Investment Name"),
        _text("symbol", "Symbol"),
        _number("shares", "Shares"),
        _number("share_price", "Share Price"),
        _number("principal_amount", "Principal Amount"),
        _number("commissions_and_fees", "Commissions and Fees"),
        _number("net_amount", "Net Amount"),
        _number("accrued_interest", "Accrued Interest"),
        _text("account_type", "Account Type"),
    ),
)

SHAPES: Dict[str, RecordShape] = {
    ACCOUNT_SHAPE.name: ACCOUNT_SHAPE,
    TRANSACTION_SHAPE.name: TRANSACTION_SHAPE,
}


def get_shape(name: str) -> RecordShape:
    """
    Look up a registered shape by name

    Raises:
        KeyError: If no shape is registered under *name*
    """
    try:
        return SHAPES[name]
    except KeyError:
        known = ", ".join(sorted(SHAPES))
        raise KeyError(f"Unknown shape {name!r}. Known shapes: {known}") from None
