import logging
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional

from .config import settings
from .exceptions import (
    DuplicateVoucherError,
    InvalidAmountError,
    InvalidVoucherError,
    VoucherNotFoundError,
)
from .models import ApplicationResult, Voucher
from .storage import VoucherStore

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")

# enough digits to quantize any finite float to cents
PRECISION = 400


def normalize_code(code: str) -> str:
    return code.strip().upper()


def compute_final_amount(amount: float, discount: float) -> float:
    """
    amount - amount * discount / 100, rounded half-up to two decimals.

    Decimal(str(x)) keeps the value the caller wrote (200.1 stays 200.1)
    instead of its binary float expansion.
    """
    with localcontext() as ctx:
        ctx.prec = PRECISION
        value = Decimal(str(amount))
        final = value - value * Decimal(str(discount)) / Decimal(100)
        return float(final.quantize(CENTS, rounding=ROUND_HALF_UP))


def declined(voucher: Voucher, amount: float) -> ApplicationResult:
    return ApplicationResult(
        amount=amount,
        discount=voucher.discount,
        finalAmount=amount,
        applied=False,
    )


class VoucherManager:
    """
    Creates vouchers and applies them to purchase amounts.

    Holds no voucher state of its own; everything goes through the store.
    """

    def __init__(self, store: VoucherStore, min_amount: Optional[float] = None):
        self.store = store
        self.min_amount = settings.min_amount if min_amount is None else min_amount

    def create_voucher(self, code: str, discount: float) -> Voucher:
        code = normalize_code(code or "")
        if not code:
            raise InvalidVoucherError("Voucher code must not be empty.")
        if not (0 < discount <= 100):
            raise InvalidVoucherError("Discount must be greater than 0 and at most 100.")

        if self.store.get_voucher_by_code(code) is not None:
            logger.warning("voucher %s already exists", code)
            raise DuplicateVoucherError()

        voucher = self.store.create_voucher(code, discount)
        logger.info("created voucher %s (id=%s, discount=%s%%)", voucher.code, voucher.id, voucher.discount)
        return voucher

    def apply_voucher(self, code: str, amount: float) -> ApplicationResult:
        if not math.isfinite(amount) or amount < 0:
            raise InvalidAmountError()

        code = normalize_code(code or "")
        voucher = self.store.get_voucher_by_code(code)
        if voucher is None:
            logger.warning("voucher %s does not exist", code)
            raise VoucherNotFoundError()

        if voucher.used:
            logger.info("voucher %s already used, not applied", code)
            return declined(voucher, amount)

        if amount < self.min_amount:
            logger.info("amount %s below minimum %s, voucher %s not applied", amount, self.min_amount, code)
            return declined(voucher, amount)

        final_amount = compute_final_amount(amount, voucher.discount)

        # conditional write: None means another caller used it first
        if self.store.use_voucher(voucher) is None:
            logger.info("voucher %s used concurrently, not applied", code)
            return declined(voucher, amount)

        logger.info("applied voucher %s: %s -> %s", code, amount, final_amount)
        return ApplicationResult(
            amount=amount,
            discount=voucher.discount,
            finalAmount=final_amount,
            applied=True,
        )
