from pydantic import BaseModel, Field


class Voucher(BaseModel):
    id: int
    code: str
    discount: float  # percentage, 0 < discount <= 100
    used: bool = False


class VoucherCreate(BaseModel):
    code: str = Field(min_length=1)
    discount: float = Field(gt=0, le=100)


class ApplyVoucherRequest(BaseModel):
    code: str = Field(min_length=1)
    amount: float = Field(ge=0)


class ApplicationResult(BaseModel):
    amount: float
    discount: float
    finalAmount: float
    applied: bool
