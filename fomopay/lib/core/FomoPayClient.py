from loguru import logger
from pydantic import ValidationError
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey
from fomopay.lib.core.Authenticator import Authenticator
from fomopay.lib.core.KeyLoader import KeyLoader
from fomopay.lib.core.MessageBuilder import MessageBuilder
from fomopay.lib.core.PendingTransactions import PendingTransactions
from fomopay.lib.core.ResponseInterpreter import ResponseInterpreter
from fomopay.lib.core.Transport import Transport
from fomopay.lib.data_models.Config import Config
from fomopay.lib.data_models.TransactionResult import TransactionResult
from fomopay.lib.enums.TransactionKind import TransactionKind, TransactionKindNames
from fomopay.lib.exceptions.exceptions import DataValidationError, FomoPayError
from fomopay.lib.data_models.Transactions import Transaction, Sale, Refund, Query, Void, BatchSettlement


"""
FomoPay client. The entry point for the callers: sale, query, refund, void and batch settlement

Every operation builds the message, signs it, sends it to the host and interprets the response. The result is
returned as TransactionResult, the caller is responsible for the output formatting

Keys are loaded once, on first use, using the paths from the configuration. Ready-made keys can be set instead
"""


class FomoPayClient:
    _config: Config

    @property
    def config(self):
        return self._config

    @config.setter
    def config(self, config):
        self._config = config

    @property
    def private_key(self) -> RSAPrivateKey:
        if self._private_key is None:
            self._private_key = self.key_loader.load_private_key(self.config.keys.private_key)

        return self._private_key

    @property
    def public_key(self) -> RSAPublicKey:
        if self._public_key is None:
            self._public_key = self.key_loader.load_public_key(self.config.keys.public_key)

        return self._public_key

    def __init__(self, config: Config, transport: Transport | None = None, key_loader: KeyLoader | None = None,
                 private_key: RSAPrivateKey | None = None, public_key: RSAPublicKey | None = None):

        if transport is None:
            transport = Transport(config)

        if key_loader is None:
            key_loader = KeyLoader()

        self.config = config
        self.transport = transport
        self.key_loader = key_loader
        self.builder = MessageBuilder(config)
        self.authenticator = Authenticator()
        self.interpreter = ResponseInterpreter(self.authenticator)
        self.pending = PendingTransactions()
        self._private_key = private_key
        self._public_key = public_key

    def sale(self, stan: int, amount: int, description: str = str()) -> TransactionResult:
        return self.send(self.create(Sale, stan=stan, amount=amount, description=description))

    def query(self, stan: int) -> TransactionResult:
        return self.send(self.create(Query, stan=stan))

    def refund(self, stan: int, amount: int, retrieval_ref: str, description: str = str()) -> TransactionResult:
        return self.send(
            self.create(Refund, stan=stan, amount=amount, retrieval_ref=retrieval_ref, description=description)
        )

    def void_transaction(self, stan: int) -> TransactionResult:
        return self.send(self.create(Void, stan=stan))

    def batch_submit(self) -> TransactionResult:
        return self.send(self.create(BatchSettlement))

    @staticmethod
    def create(model, **params) -> Transaction:
        try:
            return model(**params)

        except ValidationError as validation_error:
            errors = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in validation_error.errors())
            error = DataValidationError(f"Incorrect {model.__name__} data: {errors}")
            cause = validation_error

        except DataValidationError as validation_error:
            error = DataValidationError(f"Incorrect {model.__name__} data: {validation_error}")
            cause = validation_error

        logger.error(error)

        raise error from cause

    @staticmethod
    def describe(transaction: Transaction) -> str:
        description = TransactionKindNames[transaction.kind.name]

        if (stan := getattr(transaction, "stan", None)) is not None:
            description = f"{description} STAN {stan:06d}"

        return description

    def send(self, transaction: Transaction) -> TransactionResult:
        operation = self.describe(transaction)
        public_key = None

        logger.info(f"{operation}: processing")

        try:
            payload = self.builder.serialize(self.builder.build(transaction))
            headers = self.authenticator.authenticate(payload, self.config.merchant.key_id, self.private_key)

            if transaction.kind == TransactionKind.SALE:
                public_key = self.public_key

            with self.pending.track(getattr(transaction, "stan", None)):
                body = self.transport.post(self.config.host.api_url, payload, headers.as_http_headers())

            result = self.interpreter.interpret(body, transaction.kind, public_key)

        except FomoPayError as processing_error:
            logger.error(f"{operation}: {type(processing_error).__name__}: {processing_error}")
            raise

        logger.info(f"{operation}: got status {result.status_code}")

        return result
