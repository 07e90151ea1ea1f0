import datetime as dt
from pydantic import BaseModel, Field
from typing import Any, Optional, Literal, List, Dict

Purpose = Literal["ADVANCE", "REPAIR", "INSURANCE"]

class Coords(BaseModel):
    lat: float
    lng: float

class CompletionEvidence(BaseModel):
    photos: Optional[List[int]] = None  # attachment ids, uploaded separately
    coords: Optional[Coords] = None
    completed_at: Optional[str] = None  # ISO-8601 as reported by the client
    notes: Optional[str] = Field(default=None, max_length=4000)

class OrderProof(BaseModel):
    payload: Dict[str, Any]
    proof_hash: str

class ReceiptInput(BaseModel):
    payment_id: int
    order_id: int
    amount: float
    currency: Optional[str] = None
    tx_hash: Optional[str] = None
    completed_at: Optional[dt.datetime] = None
    created_at: dt.datetime

class InvoiceRequest(BaseModel):
    order_id: int = Field(gt=0)
    amount: float = Field(gt=0, allow_inf_nan=False)
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)
    purpose: Optional[Purpose] = None
