from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from voucher_management.logic import VoucherManager
from voucher_management.main import app, get_manager
from voucher_management.models import Voucher
from voucher_management.storage import InMemoryVoucherStore, VoucherStore


_UPDATED = object()


class RecordingVoucherStore(VoucherStore):
    """Fake store with canned lookups that records every write."""

    def __init__(self, existing: Optional[Voucher] = None, use_result=_UPDATED):
        self.existing = existing
        self.use_result = use_result
        self.created: List[tuple] = []
        self.used: List[Voucher] = []

    def get_voucher_by_code(self, code: str) -> Optional[Voucher]:
        return self.existing

    def create_voucher(self, code: str, discount: float) -> Voucher:
        self.created.append((code, discount))
        return Voucher(id=1234, code=code, discount=discount, used=False)

    def use_voucher(self, voucher: Voucher) -> Optional[Voucher]:
        self.used.append(voucher)
        if self.use_result is _UPDATED:
            return voucher.model_copy(update={"used": True})
        return self.use_result

    def list_vouchers(self) -> List[Voucher]:
        return [self.existing] if self.existing else []


@pytest.fixture
def store():
    return InMemoryVoucherStore()


@pytest.fixture
def manager(store):
    return VoucherManager(store, min_amount=100)


@pytest.fixture
def client(manager):
    app.dependency_overrides[get_manager] = lambda: manager
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def recording_store():
    return RecordingVoucherStore
