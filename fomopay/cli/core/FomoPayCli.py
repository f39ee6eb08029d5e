from uuid import uuid4
from argparse import ArgumentParser, Namespace
from loguru import logger
from fomopay.cli.enums.CliDefinition import CliDefinition, CliExitCodes
from fomopay.cli.enums.LogMarks import LogMarks
from fomopay.lib.core.CustomConfigFile import CustomConfigFile
from fomopay.lib.core.FomoPayClient import FomoPayClient
from fomopay.lib.core.LogPrinter import LogPrinter
from fomopay.lib.data_models.Config import Config
from fomopay.lib.data_models.TransactionResult import TransactionResult
from fomopay.lib.enums.TextConstants import TextConstants
from fomopay.lib.enums.ReleaseDefinition import ReleaseDefinition
from fomopay.lib.exceptions.exceptions import FomoPayError, DataValidationError, KeyFormatError, TransportError


"""
Command line interface. Runs one operation per start and prints the result to the log

Example: python _fomopay.py sale --stan 123456 --amount 500 --description "Coffee"
"""


class FomoPayCli:
    _config: Config

    @property
    def config(self):
        return self._config

    @config.setter
    def config(self, config):
        self._config = config

    def __init__(self, config: Config, client: FomoPayClient | None = None):
        if client is None:
            client = FomoPayClient(config)

        self.config = config
        self.client = client
        self.printer = LogPrinter(config)
        self.parser = self.build_parser()

    @staticmethod
    def build_parser() -> ArgumentParser:
        parser = ArgumentParser(description=TextConstants.CLI_DESCRIPTION, parents=[CustomConfigFile()])
        version = f"{ReleaseDefinition.NAME} {ReleaseDefinition.VERSION}"
        parser.add_argument("--version", action="version", version=version)
        commands = parser.add_subparsers(dest="command", required=True, metavar="command")

        sale = commands.add_parser(CliDefinition.SALE, help="Sale, message type 0200")
        sale.add_argument("--stan", type=int, required=True, help="System trace audit number, up to 6 digits")
        sale.add_argument("--amount", type=int, required=True, help="Amount in minor currency units")
        sale.add_argument("--description", default=str(), help="Transaction description")

        query = commands.add_parser(CliDefinition.QUERY, help="Transaction status query, message type 0100")
        query.add_argument("--stan", type=int, required=True, help="STAN of the transaction")

        refund = commands.add_parser(CliDefinition.REFUND, help="Refund, message type 0400")
        refund.add_argument("--stan", type=int, required=True, help="System trace audit number, up to 6 digits")
        refund.add_argument("--amount", type=int, required=True, help="Amount in minor currency units")
        refund.add_argument("--retrieval-ref", required=True, help="Retrieval reference of the original transaction")
        refund.add_argument("--description", default=str(), help="Refund description")

        void = commands.add_parser(CliDefinition.VOID, help="Void transaction, message type 0420")
        void.add_argument("--stan", type=int, required=True, help="STAN of the transaction")

        commands.add_parser(CliDefinition.BATCH, help="Batch settlement, message type 0500")

        return parser

    def run_command(self, arguments: Namespace) -> TransactionResult:
        match arguments.command:

            case CliDefinition.SALE:
                return self.client.sale(arguments.stan, arguments.amount, arguments.description)

            case CliDefinition.QUERY:
                return self.client.query(arguments.stan)

            case CliDefinition.REFUND:
                return self.client.refund(
                    arguments.stan, arguments.amount, arguments.retrieval_ref, arguments.description
                )

            case CliDefinition.VOID:
                return self.client.void_transaction(arguments.stan)

            case CliDefinition.BATCH:
                return self.client.batch_submit()

            case _:
                raise DataValidationError(f"Unknown command {arguments.command}")

    def run_application(self, args: list[str] | None = None) -> int:
        arguments = self.parser.parse_args(args)
        job_id = uuid4()

        logger.info(LogMarks.BEGIN % (job_id, arguments.command))

        try:
            result = self.run_command(arguments)

        except (DataValidationError, KeyFormatError) as validation_error:
            logger.error(f"Error: {validation_error}")
            return CliExitCodes.VALIDATION_ERROR

        except TransportError as transport_error:
            logger.error(f"Error: {transport_error}")

            if transport_error.body:
                self.printer.print_multi_row(transport_error.body, level=logger.debug)

            return CliExitCodes.PROCESSING_ERROR

        except FomoPayError as processing_error:
            logger.error(f"Error: {processing_error}")
            return CliExitCodes.PROCESSING_ERROR

        finally:
            logger.info(LogMarks.FINISH % job_id)

        self.printer.print_result(result)

        return CliExitCodes.SUCCESS
