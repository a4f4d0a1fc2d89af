from abc import ABC, abstractmethod
from threading import Lock
from typing import Dict, List, Optional

from .exceptions import DuplicateVoucherError
from .models import Voucher


class VoucherStore(ABC):
    """Persistence interface consumed by VoucherManager."""

    @abstractmethod
    def get_voucher_by_code(self, code: str) -> Optional[Voucher]:
        ...

    @abstractmethod
    def create_voucher(self, code: str, discount: float) -> Voucher:
        """
        Insert a new unused voucher and return it with its assigned id.

        Raises DuplicateVoucherError if the code is already stored.
        """
        ...

    @abstractmethod
    def use_voucher(self, voucher: Voucher) -> Optional[Voucher]:
        """
        Mark the voucher as used only if it is currently unused.

        Returns the updated voucher, or None when it had already been used.
        """
        ...

    @abstractmethod
    def list_vouchers(self) -> List[Voucher]:
        ...


class InMemoryVoucherStore(VoucherStore):
    def __init__(self):
        # code -> Voucher
        self._vouchers: Dict[str, Voucher] = {}
        self._next_id = 1
        self._lock = Lock()

    def get_voucher_by_code(self, code: str) -> Optional[Voucher]:
        voucher = self._vouchers.get(code)
        return voucher.model_copy() if voucher is not None else None

    def create_voucher(self, code: str, discount: float) -> Voucher:
        with self._lock:
            if code in self._vouchers:
                raise DuplicateVoucherError()
            voucher = Voucher(id=self._next_id, code=code, discount=discount, used=False)
            self._next_id += 1
            self._vouchers[code] = voucher
            return voucher.model_copy()

    def use_voucher(self, voucher: Voucher) -> Optional[Voucher]:
        with self._lock:
            stored = self._vouchers.get(voucher.code)
            if stored is None or stored.id != voucher.id:
                raise KeyError(f"voucher {voucher.id} is not stored")
            if stored.used:
                return None
            stored.used = True
            return stored.model_copy()

    def list_vouchers(self) -> List[Voucher]:
        return [v.model_copy() for v in self._vouchers.values()]
