from enum import StrEnum


class TransactionKind(StrEnum):
    SALE = "SALE"
    REFUND = "REFUND"
    QUERY = "QUERY"
    VOID = "VOID"
    BATCH_SETTLEMENT = "BATCH_SETTLEMENT"


class TransactionKindNames(StrEnum):
    SALE = "Sale"
    REFUND = "Refund"
    QUERY = "Query"
    VOID = "Void Transaction"
    BATCH_SETTLEMENT = "Batch Settlement"


class MessageType(StrEnum):
    SALE = "0200"
    REFUND = "0400"
    QUERY = "0100"
    VOID = "0420"
    BATCH_SETTLEMENT = "0500"


class ProcessingCode(StrEnum):
    PURCHASE = "000000"
    INQUIRY = "300000"
