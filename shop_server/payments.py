"""
Payment records: decoding and validation of request bodies, and the
normalized echo rendering.
"""

import json
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Union

from werkzeug.exceptions import BadRequest

# Amounts outside [1e-6, 1e21) render in exponent notation
EXPONENT_THRESHOLD = 1e21
SMALL_THRESHOLD = 1e-6

STRING_FIELDS = ('id', 'cardNumber', 'cardExpiry', 'cardCvv')


@dataclass(frozen=True)
class Payment:
    id: str = ''
    amount: float = 0.0
    cardNumber: str = ''
    cardExpiry: str = ''
    cardCvv: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'amount': normalize_amount(self.amount),
            'cardNumber': self.cardNumber,
            'cardExpiry': self.cardExpiry,
            'cardCvv': self.cardCvv,
        }

    def to_json(self) -> str:
        """Compact JSON with `amount` written by format_amount"""
        members = []
        for key, value in self.to_dict().items():
            if key == 'amount':
                rendered = format_amount(self.amount)
            else:
                rendered = json.dumps(value, ensure_ascii=False)
            members.append(f'{json.dumps(key)}:{rendered}')
        return '{' + ','.join(members) + '}'


def _is_negative_zero(amount: float) -> bool:
    return amount == 0 and math.copysign(1, amount) < 0


def normalize_amount(amount: float) -> Union[int, float]:
    """Drop trailing zeros: 100.00 becomes 100, 12.50 stays 12.5"""
    if (amount.is_integer() and abs(amount) < EXPONENT_THRESHOLD
            and not _is_negative_zero(amount)):
        return int(amount)
    return amount


def format_amount(amount: float) -> str:
    """
    Render an amount as a JSON number.

    Magnitudes in [1e-6, 1e21) use plain decimal notation with the
    shortest digits that round-trip (0.00005, not 5e-05); integral values
    have no fractional part. Other magnitudes use exponent notation with
    a minimal exponent (1e-7, 1e+21).
    """
    if amount == 0:
        return '-0' if _is_negative_zero(amount) else '0'

    magnitude = abs(amount)
    if magnitude < SMALL_THRESHOLD or magnitude >= EXPONENT_THRESHOLD:
        mantissa, exponent = repr(amount).split('e')
        sign = '-' if exponent.startswith('-') else '+'
        return f"{mantissa}e{sign}{int(exponent.lstrip('+-'))}"

    if amount.is_integer():
        return str(int(amount))
    return format(Decimal(repr(amount)), 'f')


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON literal {name}")


def decode_payment(body: bytes) -> Payment:
    """
    Decode a raw request body into a Payment.

    Absent or null fields take their zero value and unknown fields are
    ignored. Keys match exactly (case-sensitive) and nothing but
    whitespace may follow the object. Raises BadRequest for an empty
    body, malformed JSON, a non-object document, or a field of the wrong
    JSON type.
    """
    if not body:
        raise BadRequest("request body is empty")

    try:
        # Integer literals decode as floats so "-0" keeps its sign
        data = json.loads(body, parse_constant=_reject_constant, parse_int=float)
    except ValueError as e:
        raise BadRequest(f"malformed JSON: {e}") from e

    if not isinstance(data, dict):
        raise BadRequest("payment must be a JSON object")

    fields = {}
    for name in STRING_FIELDS:
        value = data.get(name)
        if value is None:
            continue
        if not isinstance(value, str):
            raise BadRequest(f"field '{name}' must be a string")
        fields[name] = value

    amount = data.get('amount')
    if amount is not None:
        # bool is an int subclass but true/false are not JSON numbers
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise BadRequest("field 'amount' must be a number")
        if not math.isfinite(amount):
            raise BadRequest("field 'amount' is out of range")
        fields['amount'] = float(amount)

    return Payment(**fields)
