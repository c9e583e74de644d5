"""Tests for record validation rules."""
import base64
import pytest
from datetime import date
from decimal import Decimal

from pydantic import ValidationError

from app.models.account import BankAccountCreate
from app.models.business import DailySalesCreate, ExpenseCreate
from app.models.card import CardCreate
from app.models.document import DocumentCreate
from app.utils.validation import (
    RecordValidationError,
    decode_file_data,
    normalize_ifsc,
    normalize_tags,
    validate_card_number,
    validate_cvv,
    validate_expiry,
)


class TestCardRules:

    def test_visa_needs_sixteen_digits(self):
        assert validate_card_number("4111111111111111", "Visa") == "4111111111111111"
        with pytest.raises(RecordValidationError):
            validate_card_number("411111111111111", "Visa")

    def test_amex_needs_fifteen_digits(self):
        assert validate_card_number("378282246310005", "American Express")
        with pytest.raises(RecordValidationError):
            validate_card_number("3782822463100051", "American Express")

    def test_card_number_digits_only(self):
        with pytest.raises(RecordValidationError):
            validate_card_number("4111 1111 1111 11", "Visa")

    def test_cvv_length_by_network(self):
        assert validate_cvv("123", "Rupay") == "123"
        assert validate_cvv("1234", "American Express") == "1234"
        with pytest.raises(RecordValidationError):
            validate_cvv("123", "American Express")
        with pytest.raises(RecordValidationError):
            validate_cvv("12a", "Visa")

    def test_expiry_format(self):
        today = date(2025, 6, 1)
        assert validate_expiry("01/25", today) == "01/25"
        assert validate_expiry("12/30", today) == "12/30"
        for bad in ("13/30", "1/30", "12-30", "12/2030"):
            with pytest.raises(RecordValidationError):
                validate_expiry(bad, today)

    def test_expiry_year_in_the_past(self):
        with pytest.raises(RecordValidationError) as exc_info:
            validate_expiry("12/24", date(2025, 6, 1))
        assert "25" in str(exc_info.value)

    def test_card_model_rejects_wrong_cvv(self):
        with pytest.raises(ValidationError):
            CardCreate(
                card_name="Gold", card_number="378282246310005", expiry_date="12/99",
                cvv="123", card_network="American Express", bank_name="Amex"
            )


class TestBankAccountRules:

    def test_ifsc_normalized(self):
        assert normalize_ifsc(" sbin0001234 ") == "SBIN0001234"

    @pytest.mark.parametrize("code", ["SBIN1001234", "SBI00001234", "SBIN000123"])
    def test_ifsc_rejected(self, code):
        with pytest.raises(RecordValidationError):
            normalize_ifsc(code)

    def test_account_number_digits_only(self):
        with pytest.raises(ValidationError):
            BankAccountCreate(
                bank_name="SBI", account_number="12AB", account_type="Savings", ifsc_code="SBIN0001234"
            )


def test_tags_stripped_and_deduplicated():
    assert normalize_tags([" travel", "travel", "", "food ", "  "]) == ["travel", "food"]


class TestExpenseRules:

    def test_single_payer_requires_method(self):
        with pytest.raises(ValidationError):
            ExpenseCreate(category="Rent", amount=100, date=date(2024, 1, 1), paid_by="Business")

    def test_other_payer_needs_name(self):
        with pytest.raises(ValidationError):
            ExpenseCreate(
                category="Rent", amount=100, date=date(2024, 1, 1),
                paid_by="Other", payment_method="Cash"
            )

    def test_shares_must_add_up(self):
        with pytest.raises(ValidationError) as exc_info:
            ExpenseCreate(
                category="Stock", amount=100, date=date(2024, 1, 1), is_shared=True,
                shares=[
                    {"payer_type": "Business", "amount": 60, "payment_method": "UPI"},
                    {"payer_type": "Personal", "amount": 30, "payment_method": "Cash"},
                ]
            )
        assert "add up" in str(exc_info.value)

    def test_shared_expense_clears_single_payer_fields(self):
        expense = ExpenseCreate(
            category="Stock", amount=100, date=date(2024, 1, 1), is_shared=True,
            paid_by="Business", payment_method="Card",
            shares=[
                {"payer_type": "Business", "amount": 60, "payment_method": "UPI"},
                {"payer_type": "Other", "payer_name": "Uncle", "amount": 40, "payment_method": "Cash"},
            ]
        )
        assert expense.paid_by is None
        assert expense.payment_method is None
        assert sum(share.amount for share in expense.shares) == Decimal("100")

    def test_shared_expense_needs_shares(self):
        with pytest.raises(ValidationError):
            ExpenseCreate(category="Stock", amount=100, date=date(2024, 1, 1), is_shared=True)

    def test_single_payer_cannot_have_shares(self):
        with pytest.raises(ValidationError):
            ExpenseCreate(
                category="Stock", amount=100, date=date(2024, 1, 1),
                paid_by="Business", payment_method="Card",
                shares=[{"payer_type": "Business", "amount": 100, "payment_method": "UPI"}]
            )

    def test_amount_must_be_positive(self):
        with pytest.raises(ValidationError):
            ExpenseCreate(
                category="Rent", amount=0, date=date(2024, 1, 1),
                paid_by="Business", payment_method="Cash"
            )


def test_sales_amounts_cannot_be_negative():
    with pytest.raises(ValidationError):
        DailySalesCreate(date=date(2024, 1, 1), cash_amount=-1)


class TestDocumentRules:

    def test_other_needs_custom_type(self):
        with pytest.raises(ValidationError):
            DocumentCreate(document_type="Other", file_name="a.pdf", file_data="aGVsbG8=")

    def test_custom_type_dropped_for_known_types(self):
        document = DocumentCreate(
            document_type="PAN Card", custom_type="ignored", file_name="pan.pdf", file_data="aGVsbG8="
        )
        assert document.custom_type is None

    def test_file_data_must_be_base64(self):
        with pytest.raises(ValidationError):
            DocumentCreate(document_type="Passport", file_name="p.pdf", file_data="not base64!")

    def test_size_limit(self):
        data = base64.b64encode(b"x" * 11).decode()
        assert decode_file_data(data, 11) == b"x" * 11
        with pytest.raises(RecordValidationError):
            decode_file_data(data, 10)
