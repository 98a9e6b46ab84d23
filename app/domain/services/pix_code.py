from __future__ import annotations

import time
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from app.domain.exceptions import InvalidAmountError


PIX_GUI = "br.gov.bcb.pix"
PAYLOAD_FORMAT_INDICATOR = "01"
MERCHANT_CATEGORY_CODE = "0000"
CURRENCY_BRL = "986"
COUNTRY_CODE = "BR"
CRC_PLACEHOLDER = "6304"

CRC16_POLYNOMIAL = 0x1021
CRC16_INITIAL = 0xFFFF

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class PixConfig:
    key: str
    merchant_name: str
    merchant_city: str


def crc16_ccitt(payload: str) -> str:
    crc = CRC16_INITIAL
    for char in payload:
        crc ^= ord(char) << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = (crc << 1) ^ CRC16_POLYNOMIAL
            else:
                crc <<= 1
            crc &= 0xFFFF
    return f"{crc:04X}"


def format_tlv(field_id: str, value: str) -> str:
    if len(value) > 99:
        raise ValueError(f"PIX field {field_id} exceeds 99 characters.")
    return f"{field_id}{len(value):02d}{value}"


def format_amount(amount: Decimal | int | float | str) -> str:
    """Normaliza o valor para a string de 2 casas exigida pelo campo 54.

    O arredondamento e explicito (meio para cima sobre a representacao
    decimal), entao 19.9999 vira "20.00" e 0.125 vira "0.13".
    """
    if isinstance(amount, bool):
        raise InvalidAmountError("Amount must be a number.")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(f"Invalid amount: {amount!r}.") from exc

    if not value.is_finite():
        raise InvalidAmountError("Amount must be finite.")
    if value <= 0:
        raise InvalidAmountError("Amount must be positive.")

    rounded = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
    if rounded <= 0:
        raise InvalidAmountError("Amount rounds to zero.")
    return f"{rounded:.2f}"


def generate_transaction_id() -> str:
    return f"MP{str(time.time_ns() // 1_000_000)[-10:]}"


def generate_pix_code(
    amount: Decimal | int | float | str,
    config: PixConfig,
    transaction_id: str | None = None,
) -> str:
    formatted_amount = format_amount(amount)
    txid = transaction_id or generate_transaction_id()

    merchant_account_info = format_tlv("00", PIX_GUI) + format_tlv("01", config.key)

    payload = "".join(
        (
            format_tlv("00", PAYLOAD_FORMAT_INDICATOR),
            format_tlv("26", merchant_account_info),
            format_tlv("52", MERCHANT_CATEGORY_CODE),
            format_tlv("53", CURRENCY_BRL),
            format_tlv("54", formatted_amount),
            format_tlv("58", COUNTRY_CODE),
            format_tlv("59", config.merchant_name),
            format_tlv("60", config.merchant_city),
            format_tlv("62", format_tlv("05", txid)),
            CRC_PLACEHOLDER,
        )
    )
    return payload + crc16_ccitt(payload)
