"""
Domain exceptions for voucher management.

These represent business rule violations and are mapped to HTTP
responses in main.py. Ineligibility (used voucher, amount below the
minimum) is not an error and never raises.
"""


class VoucherError(Exception):
    """Base exception for all voucher errors."""
    message = "Voucher error."

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message


class DuplicateVoucherError(VoucherError):
    """Raised when a voucher with the same code already exists."""
    message = "Voucher already exist."


class VoucherNotFoundError(VoucherError):
    """Raised when a code does not resolve to any voucher."""
    message = "Voucher does not exist."


class VoucherValidationError(VoucherError):
    """Raised when input to a voucher operation is malformed."""
    message = "Invalid voucher input."


class InvalidVoucherError(VoucherValidationError):
    message = "Voucher code must not be empty and discount must be in (0, 100]."


class InvalidAmountError(VoucherValidationError):
    message = "Amount must be a finite number and not negative."
