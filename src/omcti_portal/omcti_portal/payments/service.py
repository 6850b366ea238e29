from __future__ import annotations

import logging
import math
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..common.validators import require_amount, require_iso_date, require_non_empty, require_text
from ..core.constants import WALLET_PAGE_SIZE
from ..core.exceptions import ApiResponseError, ValidationError
from .model import FeePayment, FeePaymentResult, PaymentHistory, WalletStatement, WalletTransaction
from .repository import PaymentRepository

log = logging.getLogger(__name__)

_FAILURE_MARKERS = ("error", "failed")


class FeeService:
    """Use cases: a student's fee history and recording a fee payment."""

    def __init__(self, payments: PaymentRepository):
        self._payments = payments

    def history(self, student_id: str) -> PaymentHistory:
        student_id = require_non_empty(str(student_id or ""), "Student id")
        record = self._payments.get_fee_record(student_id)

        total_paid = sum((p.paid_amount for p in record.payments), Decimal("0"))
        return PaymentHistory(
            student_id=student_id,
            course_fee=record.course_fee,
            payments=list(record.payments),
            total_paid=total_paid,
            total_dues=record.course_fee - total_paid,
        )

    def pay_fee(
        self,
        *,
        student_id: str,
        paid_date: str,
        paid_amount,
        previous_dues,
        remarks: str = "",
        send_sms: bool = False,
        receipt_no: Optional[str] = None,
    ) -> FeePaymentResult:
        payment = FeePayment(
            student_id=require_non_empty(str(student_id or ""), "Student id"),
            paid_date=require_iso_date(paid_date, "Paid date"),
            paid_amount=require_amount(paid_amount, "Paid amount"),
            previous_dues=require_amount(previous_dues, "Previous dues", allow_zero=True),
            remarks=require_text(remarks, "Remarks").strip(),
            send_sms=bool(send_sms),
            receipt_no=str(receipt_no if receipt_no is not None else "").strip() or None,
        )

        reply = self._payments.submit_fee_payment(payment)
        text = reply.text.strip()
        lowered = text.lower()
        if not reply.ok or not text or any(m in lowered for m in _FAILURE_MARKERS):
            log.warning("pay_fee rejected for student=%s: %s", payment.student_id, text[:200])
            raise ApiResponseError(text or "Payment could not be processed. Please try again.", task="pay_fee", body=text)

        remaining = max(Decimal("0"), payment.previous_dues - payment.paid_amount)
        log.info("fee %s recorded for student=%s", payment.paid_amount, payment.student_id)
        return FeePaymentResult(paid_amount=payment.paid_amount, remaining_dues=remaining, message=text)


def _txn_sort_key(txn: WalletTransaction) -> datetime:
    text = (txn.txn_date or "").strip()
    for fmt in ("%Y-%m-%d %H:%M:%S", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d"):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return datetime.min


class WalletService:
    """Use case: paginated wallet statement of a centre."""

    def __init__(self, payments: PaymentRepository, *, page_size: int = WALLET_PAGE_SIZE):
        self._payments = payments
        self._page_size = int(page_size)

    def statement(self, center_id: str, *, page: int = 1) -> WalletStatement:
        center_id = require_non_empty(str(center_id or ""), "Centre id")
        if int(page) < 1:
            raise ValidationError("Page must be 1 or greater")
        page = int(page)

        rows = sorted(self._payments.get_wallet_transactions(center_id), key=_txn_sort_key, reverse=True)
        total_pages = math.ceil(len(rows) / self._page_size)
        start = (page - 1) * self._page_size

        return WalletStatement(
            center_id=center_id,
            page=page,
            total_pages=total_pages,
            total_rows=len(rows),
            total_credit=sum((r.credit_amt for r in rows), Decimal("0")),
            total_debit=sum((r.debit_amt for r in rows), Decimal("0")),
            rows=rows[start:start + self._page_size],
        )
