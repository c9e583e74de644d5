"""Record validation utilities, applied by the request models before the store."""
import base64
import binascii
import re
from datetime import date
from typing import List, Optional

from app.utils.amounts import to_decimal

AMEX = "American Express"
EXPIRY_PATTERN = re.compile(r"^(0[1-9]|1[0-2])/([0-9]{2})$")
IFSC_PATTERN = re.compile(r"^[A-Z]{4}0[A-Z0-9]{6}$")


class RecordValidationError(ValueError):
    """Custom exception for record validation errors."""
    pass


def validate_card_number(number: str, network: str) -> str:
    """
    Validate a card number.

    Rules:
    - digits only
    - 15 digits for American Express, 16 for every other network
    """
    if not number.isdigit():
        raise RecordValidationError("Card number must contain only digits")
    expected = 15 if network == AMEX else 16
    if len(number) != expected:
        raise RecordValidationError(f"{expected} digits required for {network}")
    return number


def validate_cvv(cvv: str, network: str) -> str:
    if not cvv.isdigit():
        raise RecordValidationError("CVV must contain only digits")
    expected = 4 if network == AMEX else 3
    if len(cvv) != expected:
        raise RecordValidationError(f"{expected} digits required for {network}")
    return cvv


def validate_expiry(expiry: str, today: Optional[date] = None) -> str:
    """MM/YY, with the year not before the current two-digit year."""
    match = EXPIRY_PATTERN.match(expiry)
    if not match:
        raise RecordValidationError("Invalid expiry date format (MM/YY)")
    current_year = (today or date.today()).year % 100
    if int(match.group(2)) < current_year:
        raise RecordValidationError(f"Expiry year must be {current_year:02d} or later")
    return expiry


def normalize_ifsc(code: str) -> str:
    code = code.strip().upper()
    if not IFSC_PATTERN.match(code):
        raise RecordValidationError("Invalid IFSC code")
    return code


def normalize_tags(tags: List[str]) -> List[str]:
    """Strip blanks and duplicates, keeping first-seen order."""
    seen = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


def validate_payer(payer: str, payer_name: Optional[str]) -> None:
    if payer == "Other" and not (payer_name and payer_name.strip()):
        raise RecordValidationError("Payer name is required when paid by Other")


def validate_shares(shares: list, amount) -> None:
    """
    Validate the shares of a shared expense.

    Rules:
    - at least one share
    - share amounts add up exactly to the expense amount
    """
    if not shares:
        raise RecordValidationError("Shared expense needs at least one share")
    for share in shares:
        validate_payer(share.payer_type, share.payer_name)
    share_sum = sum((to_decimal(share.amount) for share in shares), to_decimal(0))
    if share_sum != to_decimal(amount):
        raise RecordValidationError(
            f"Share amounts ({share_sum}) must add up to the expense amount ({amount})"
        )


def decode_file_data(data: str, max_size: int) -> bytes:
    """Decode a base64 document payload and enforce the size limit."""
    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        raise RecordValidationError("File data must be base64 encoded")
    if len(raw) > max_size:
        raise RecordValidationError(f"File exceeds the {max_size} byte limit")
    return raw
