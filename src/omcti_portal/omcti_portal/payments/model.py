from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.formatting import format_currency, format_date


@dataclass(frozen=True)
class Payment:
    """One fee receipt of a student."""

    payment_id: str
    paid_date: Optional[str]
    paid_amount: Decimal
    total: Decimal
    dues: Decimal
    remarks: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.payment_id,
            "paid_date": self.paid_date,
            "paid_date_display": format_date(self.paid_date),
            "paid_amount": format_currency(self.paid_amount),
            "total": format_currency(self.total),
            "dues": format_currency(self.dues),
            "remarks": self.remarks,
        }


@dataclass(frozen=True)
class FeeRecord:
    """Raw reply of the fee history endpoint."""

    course_fee: Decimal
    payments: list[Payment] = field(default_factory=list)


@dataclass(frozen=True)
class PaymentHistory:
    student_id: str
    course_fee: Decimal
    payments: list[Payment]
    total_paid: Decimal
    total_dues: Decimal

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "course_fee": format_currency(self.course_fee),
            "total_paid": format_currency(self.total_paid),
            "total_dues": format_currency(self.total_dues),
            "payments": [p.to_dict() for p in self.payments],
        }


@dataclass(frozen=True)
class FeePayment:
    """Validated fee payment ready to be submitted."""

    student_id: str
    paid_date: date
    paid_amount: Decimal
    previous_dues: Decimal
    remarks: str = ""
    send_sms: bool = False
    receipt_no: Optional[str] = None


@dataclass(frozen=True)
class FeePaymentResult:
    paid_amount: Decimal
    remaining_dues: Decimal
    message: str

    def to_dict(self) -> dict:
        return {
            "paid_amount": format_currency(self.paid_amount),
            "remaining_dues": format_currency(self.remaining_dues),
            "message": self.message,
        }


@dataclass(frozen=True)
class WalletTransaction:
    txn_id: str
    txn_date: Optional[str]
    credit_amt: Decimal
    debit_amt: Decimal
    balance: Optional[Decimal]
    status: str
    remarks: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.txn_id,
            "txn_date": self.txn_date,
            "txn_date_display": format_date(self.txn_date),
            "credit": format_currency(self.credit_amt) if self.credit_amt else "-",
            "debit": format_currency(self.debit_amt) if self.debit_amt else "-",
            "balance": format_currency(self.balance) if self.balance is not None else "-",
            "status": self.status,
            "remarks": self.remarks,
        }


@dataclass(frozen=True)
class WalletStatement:
    center_id: str
    page: int
    total_pages: int
    total_rows: int
    total_credit: Decimal
    total_debit: Decimal
    rows: list[WalletTransaction]

    def to_dict(self) -> dict:
        return {
            "center_id": self.center_id,
            "page": self.page,
            "total_pages": self.total_pages,
            "total_rows": self.total_rows,
            "total_credit": format_currency(self.total_credit),
            "total_debit": format_currency(self.total_debit),
            "rows": [r.to_dict() for r in self.rows],
        }
