import logging
from typing import List

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .config import settings
from .exceptions import (
    DuplicateVoucherError,
    VoucherError,
    VoucherNotFoundError,
    VoucherValidationError,
)
from .logic import VoucherManager
from .models import ApplicationResult, ApplyVoucherRequest, Voucher, VoucherCreate
from .storage import InMemoryVoucherStore

# ---------------------------
# Storage & service wiring
# ---------------------------

store = InMemoryVoucherStore()


def get_manager() -> VoucherManager:
    return VoucherManager(store)


# ---------------------------
# FastAPI App & Routes
# ---------------------------

app = FastAPI(title="Voucher Management Service")

ERROR_STATUS = {
    DuplicateVoucherError: 409,
    VoucherNotFoundError: 404,
    VoucherValidationError: 422,
}


@app.exception_handler(VoucherError)
async def voucher_error_handler(request: Request, exc: VoucherError):
    status_code = 400
    for error_type, code in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            status_code = code
            break
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.post("/vouchers", response_model=Voucher, status_code=201)
def create_voucher(payload: VoucherCreate, manager: VoucherManager = Depends(get_manager)):
    return manager.create_voucher(payload.code, payload.discount)


@app.get("/vouchers", response_model=List[Voucher])
def list_vouchers(manager: VoucherManager = Depends(get_manager)):
    return manager.store.list_vouchers()


@app.post("/vouchers/apply", response_model=ApplicationResult)
def apply_voucher(payload: ApplyVoucherRequest, manager: VoucherManager = Depends(get_manager)):
    return manager.apply_voucher(payload.code, payload.amount)


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.log_level)
    uvicorn.run(
        "voucher_management.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )
