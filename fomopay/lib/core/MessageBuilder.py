from json import dumps
from datetime import datetime
from loguru import logger
from fomopay.lib.core.Bitmap import Bitmap
from fomopay.lib.core.validators.DataValidator import DataValidator
from fomopay.lib.data_models.Config import Config
from fomopay.lib.data_models.Transactions import Transaction, Sale, Refund, Query, Void, BatchSettlement
from fomopay.lib.enums.ProtocolField import ProtocolField
from fomopay.lib.enums.TransactionKind import MessageType, ProcessingCode
from fomopay.lib.exceptions.exceptions import DataValidationError

TRANSMISSION_DATE_TIME_FORMAT = "%m%d%H%M%S"
LOCAL_TIME_FORMAT = "%H%M%S"
LOCAL_DATE_FORMAT = "%m%d"

FieldMap = dict[str, str]


class MessageBuilder:

    """
    Builds the tag-keyed field map of a transaction request

    Field "0" is the message type indicator, field "1" is the bitmap of every other field present in the message.
    The bitmap is always calculated from the fields actually put in the message
    """

    _config: Config

    @property
    def config(self):
        return self._config

    @config.setter
    def config(self, config):
        self._config = config

    def __init__(self, config: Config):
        self.config = config

    @staticmethod
    def format_stan(stan: int) -> str:
        return f"{DataValidator.validate_stan(stan):06d}"

    @staticmethod
    def format_amount(amount: int) -> str:
        return f"{DataValidator.validate_amount(amount):012d}"

    @staticmethod
    def serialize(field_map: FieldMap) -> str:
        return dumps(field_map, ensure_ascii=False, separators=(",", ":"))

    def build(self, transaction: Transaction, now: datetime | None = None) -> FieldMap:
        if now is None:
            now = datetime.now()

        merchant = self.config.merchant
        fields: dict[ProtocolField, str] = {
            ProtocolField.TRANSMISSION_DATE_TIME: now.strftime(TRANSMISSION_DATE_TIME_FORMAT)
        }

        match transaction:

            case Sale():
                message_type = MessageType.SALE
                fields[ProtocolField.PROCESSING_CODE] = ProcessingCode.PURCHASE
                fields[ProtocolField.STAN] = self.format_stan(transaction.stan)
                fields[ProtocolField.LOCAL_TIME] = now.strftime(LOCAL_TIME_FORMAT)
                fields[ProtocolField.LOCAL_DATE] = now.strftime(LOCAL_DATE_FORMAT)
                fields[ProtocolField.MERCHANT_TYPE] = merchant.merchant_type
                fields[ProtocolField.SERVICE_CONDITION] = merchant.service_condition
                fields[ProtocolField.CURRENCY] = merchant.currency
                fields[ProtocolField.DEBIT_AMOUNT] = self.format_amount(transaction.amount)
                fields[ProtocolField.DESCRIPTION] = transaction.description

            case Refund():
                message_type = MessageType.REFUND
                fields[ProtocolField.PROCESSING_CODE] = ProcessingCode.PURCHASE
                fields[ProtocolField.STAN] = self.format_stan(transaction.stan)
                fields[ProtocolField.LOCAL_TIME] = now.strftime(LOCAL_TIME_FORMAT)
                fields[ProtocolField.LOCAL_DATE] = now.strftime(LOCAL_DATE_FORMAT)
                fields[ProtocolField.RETRIEVAL_REFERENCE] = transaction.retrieval_ref
                fields[ProtocolField.CREDIT_AMOUNT] = self.format_amount(transaction.amount)
                fields[ProtocolField.DESCRIPTION] = transaction.description

            case Query():
                message_type = MessageType.QUERY
                fields[ProtocolField.PROCESSING_CODE] = ProcessingCode.INQUIRY
                fields[ProtocolField.STAN] = self.format_stan(transaction.stan)

            case Void():
                message_type = MessageType.VOID
                fields[ProtocolField.PROCESSING_CODE] = ProcessingCode.PURCHASE
                fields[ProtocolField.STAN] = self.format_stan(transaction.stan)

            case BatchSettlement():
                message_type = MessageType.BATCH_SETTLEMENT
                fields[ProtocolField.PROCESSING_CODE] = ProcessingCode.PURCHASE

            case _:
                raise DataValidationError(f"Unknown transaction type {type(transaction).__name__}")

        fields[ProtocolField.TERMINAL_ID] = merchant.terminal_id
        fields[ProtocolField.MERCHANT_ID] = merchant.merchant_id

        field_numbers: list[int] = sorted(int(field) for field in fields)

        field_map: FieldMap = {
            str(ProtocolField.MESSAGE_TYPE): str(message_type),
            str(ProtocolField.BITMAP): Bitmap.calculate(field_numbers),
        }

        for field_number in field_numbers:
            field_map[str(field_number)] = str(fields[ProtocolField(str(field_number))])

        logger.debug(f"Built {transaction.kind} message {message_type}, fields {', '.join(map(str, field_numbers))}")

        return field_map
