from __future__ import annotations

from decimal import Decimal

import pytest

from src.omcti_portal.omcti_portal.api.client import TextResponse
from src.omcti_portal.omcti_portal.core.exceptions import ApiResponseError, ValidationError
from src.omcti_portal.omcti_portal.payments.model import FeeRecord, Payment, WalletTransaction
from src.omcti_portal.omcti_portal.payments.service import FeeService, WalletService


def payment(pid, amount):
    return Payment(
        payment_id=str(pid),
        paid_date="2025-01-10",
        paid_amount=Decimal(amount),
        total=Decimal("12000"),
        dues=Decimal("0"),
    )


def txn(tid, txn_date, credit="0", debit="0"):
    return WalletTransaction(
        txn_id=str(tid),
        txn_date=txn_date,
        credit_amt=Decimal(credit),
        debit_amt=Decimal(debit),
        balance=None,
        status="SUCCESS",
    )


class FakePaymentsRepo:
    def __init__(self, record=None, reply=None, txns=None):
        self.record = record
        self.reply = reply
        self.txns = txns or []
        self.submitted = None

    def get_fee_record(self, student_id):
        return self.record

    def submit_fee_payment(self, p):
        self.submitted = p
        return self.reply

    def get_wallet_transactions(self, center_id):
        return self.txns


def test_history_computes_paid_and_dues():
    repo = FakePaymentsRepo(record=FeeRecord(course_fee=Decimal("12000"), payments=[payment(1, "5000"), payment(2, "2500.50")]))

    history = FeeService(repo).history("48936")

    assert history.total_paid == Decimal("7500.50")
    assert history.total_dues == Decimal("4499.50")
    assert history.to_dict()["total_dues"] == "₹4,499.50"


def test_pay_fee_success_reports_remaining_dues():
    repo = FakePaymentsRepo(reply=TextResponse(ok=True, status_code=200, text="Payment saved"))

    result = FeeService(repo).pay_fee(
        student_id="48936",
        paid_date="2025-02-10",
        paid_amount="1,500",
        previous_dues="4000",
        remarks=" 2nd installment ",
        send_sms=True,
        receipt_no="  ",
    )

    assert result.remaining_dues == Decimal("2500")
    assert repo.submitted.paid_amount == Decimal("1500")
    assert repo.submitted.remarks == "2nd installment"
    assert repo.submitted.receipt_no is None


def test_overpayment_leaves_zero_dues():
    repo = FakePaymentsRepo(reply=TextResponse(ok=True, status_code=200, text="ok"))

    result = FeeService(repo).pay_fee(student_id="1", paid_date="2025-02-10", paid_amount="500", previous_dues="200")

    assert result.remaining_dues == Decimal("0")


@pytest.mark.parametrize("text", ["Error: duplicate receipt", "Payment FAILED", ""])
def test_pay_fee_failure_texts_raise(text):
    repo = FakePaymentsRepo(reply=TextResponse(ok=True, status_code=200, text=text))

    with pytest.raises(ApiResponseError):
        FeeService(repo).pay_fee(student_id="1", paid_date="2025-02-10", paid_amount="500", previous_dues="200")


@pytest.mark.parametrize(
    "amount,dues,paid_date",
    [("0", "100", "2025-02-10"), ("abc", "100", "2025-02-10"), ("10", "-5", "2025-02-10"), ("10", "100", "10/02/2025")],
)
def test_pay_fee_validation(amount, dues, paid_date):
    repo = FakePaymentsRepo()

    with pytest.raises(ValidationError):
        FeeService(repo).pay_fee(student_id="1", paid_date=paid_date, paid_amount=amount, previous_dues=dues)
    assert repo.submitted is None


def test_wallet_statement_sorts_totals_and_pages():
    txns = [txn(i, f"2025-01-{i:02d} 10:00:00", credit="100") for i in range(1, 31)]
    txns.append(txn(99, "2025-02-01", debit="250.75"))
    svc = WalletService(FakePaymentsRepo(txns=txns))

    first = svc.statement("273")
    second = svc.statement("273", page=2)

    assert first.total_pages == 2
    assert first.total_rows == 31
    assert first.rows[0].txn_id == "99"
    assert len(first.rows) == 25
    assert len(second.rows) == 6
    assert second.rows[-1].txn_id == "1"
    assert first.total_credit == Decimal("3000")
    assert first.total_debit == Decimal("250.75")


def test_wallet_statement_rejects_bad_page():
    with pytest.raises(ValidationError):
        WalletService(FakePaymentsRepo()).statement("273", page=0)
