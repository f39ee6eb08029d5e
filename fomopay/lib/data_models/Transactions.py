from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from fomopay.lib.enums.TransactionKind import TransactionKind
from fomopay.lib.core.validators.DataValidator import DataValidator


"""
Typed transaction requests. One model per transaction kind, the "kind" literal is a discriminator

The models hold what the caller supplies only. Terminal data, dates and the bitmap are added by the MessageBuilder
when the model is converted to the tag-keyed wire form
"""


class TransactionRequest(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)


class StanMixin(BaseModel):
    stan: int

    @field_validator("stan", mode="after")
    @classmethod
    def check_stan(cls, val):
        return DataValidator.validate_stan(val)


class AmountMixin(BaseModel):
    amount: int

    @field_validator("amount", mode="after")
    @classmethod
    def check_amount(cls, val):
        return DataValidator.validate_amount(val)


class Sale(TransactionRequest, StanMixin, AmountMixin):
    kind: Literal[TransactionKind.SALE] = TransactionKind.SALE
    description: str = str()


class Refund(TransactionRequest, StanMixin, AmountMixin):
    kind: Literal[TransactionKind.REFUND] = TransactionKind.REFUND
    retrieval_ref: str = Field(min_length=1)
    description: str = str()


class Query(TransactionRequest, StanMixin):
    kind: Literal[TransactionKind.QUERY] = TransactionKind.QUERY


class Void(TransactionRequest, StanMixin):
    kind: Literal[TransactionKind.VOID] = TransactionKind.VOID


class BatchSettlement(TransactionRequest):
    kind: Literal[TransactionKind.BATCH_SETTLEMENT] = TransactionKind.BATCH_SETTLEMENT


Transaction = Annotated[Union[Sale, Refund, Query, Void, BatchSettlement], Field(discriminator="kind")]
