from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..api.client import ApiClient, TextResponse, require_success
from ..common.formatting import to_decimal
from ..core.exceptions import ApiResponseError
from .model import FeePayment, FeeRecord, Payment, WalletTransaction
from .repository import PaymentRepository


def _row_to_payment(r: Mapping[str, Any]) -> Payment:
    return Payment(
        payment_id=str(r.get("id") or ""),
        paid_date=r.get("paid_date"),
        paid_amount=to_decimal(r.get("paid_amount")),
        total=to_decimal(r.get("total")),
        dues=to_decimal(r.get("dues")),
        remarks=r.get("remarks") or None,
    )


def _row_to_txn(r: Mapping[str, Any]) -> WalletTransaction:
    balance = r.get("balance")
    return WalletTransaction(
        txn_id=str(r.get("id") or ""),
        txn_date=r.get("txn_date"),
        credit_amt=to_decimal(r.get("credit_amt")),
        debit_amt=to_decimal(r.get("debit_amt")),
        balance=to_decimal(balance) if balance not in (None, "") else None,
        status=str(r.get("status") or ""),
        remarks=r.get("txn_remarks") or None,
    )


class ApiPaymentRepository(PaymentRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def get_fee_record(self, student_id: str) -> FeeRecord:
        body = self._client.post("student_payments", {"student_id": student_id})
        if not isinstance(body, Mapping):
            raise ApiResponseError("Failed to load payment history", task="student_payments", body=body)
        rows = body.get("payments") or []
        return FeeRecord(
            course_fee=to_decimal(body.get("fee")),
            payments=[_row_to_payment(r) for r in rows if isinstance(r, Mapping)],
        )

    def submit_fee_payment(self, payment: FeePayment) -> TextResponse:
        dues = f"{payment.previous_dues:.2f}"
        payload = {
            "student_id": payment.student_id,
            "paid_date": payment.paid_date.isoformat(),
            "paid_amount": f"{payment.paid_amount:.2f}",
            "previous_dues": dues,
            "total": dues,
            "remarks": payment.remarks,
            "checksms": "yes" if payment.send_sms else "no",
        }
        if payment.receipt_no:
            payload["receipt_no"] = payment.receipt_no
        return self._client.post_text("pay_fee", payload)

    def get_wallet_transactions(self, center_id: str) -> Sequence[WalletTransaction]:
        body = self._client.post("wallet_statement", {"center_id": center_id})
        body = require_success(body, task="wallet_statement", default_message="Failed to fetch wallet statement")
        rows = body.get("data") or []
        return [_row_to_txn(r) for r in rows if isinstance(r, Mapping)]
