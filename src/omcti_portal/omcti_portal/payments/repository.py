from __future__ import annotations

from typing import Protocol, Sequence

from ..api.client import TextResponse
from .model import FeePayment, FeeRecord, WalletTransaction


class PaymentRepository(Protocol):
    def get_fee_record(self, student_id: str) -> FeeRecord:
        raise NotImplementedError

    def submit_fee_payment(self, payment: FeePayment) -> TextResponse:
        """Send a fee payment; the endpoint answers with plain text."""

        raise NotImplementedError

    def get_wallet_transactions(self, center_id: str) -> Sequence[WalletTransaction]:
        raise NotImplementedError
