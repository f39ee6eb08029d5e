from typing import Any
from pydantic import BaseModel
from fomopay.lib.enums.TransactionKind import TransactionKind


class TransactionResult(BaseModel):
    kind: TransactionKind
    status_code: str | None = None
    error_message: str | None = None
    hint: str | None = None
    signature_verified: bool | None = None
    raw: str
    fields: dict[str, Any] = {}
    parsed: bool = True
