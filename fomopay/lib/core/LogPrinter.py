from json import dumps
from loguru import logger
from fomopay.lib.data_models.Config import Config
from fomopay.lib.data_models.TransactionResult import TransactionResult
from fomopay.lib.enums.TextConstants import TextConstants
from fomopay.lib.enums.TransactionKind import TransactionKind, TransactionKindNames


class LogPrinter:
    default_level = logger.info
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
    def print_multi_row(data: str, level=default_level):
        for string in data.splitlines():
            level(string)

        level("")

    def print_startup_info(self, level=default_level):
        self.print_multi_row(TextConstants.HELLO_MESSAGE, level=level)
        self.print_config(level=logger.debug)

    def print_config(self, level=default_level):
        rows: list[str] = ["## Configuration parameters ##", ""]

        for section, params in self.config.model_dump(mode="json").items():
            rows.append(f"[{section}]")
            rows.extend(f"  {name} = {value}" for name, value in params.items())

        rows.extend(["", "## End of configuration parameters ##"])

        self.print_multi_row("\n".join(rows), level=level)

    @staticmethod
    def format_result(result: TransactionResult) -> str:
        if not result.parsed:
            return f"API Response (raw): {result.raw}"

        rows: list[str] = [
            f"{TransactionKindNames[result.kind.name]} Result:",
            f"Status: {result.status_code}",
        ]

        if result.error_message is not None:
            rows.append(f"Error Message: {result.error_message}")

        if result.hint is not None:
            rows.append(f"Hint: {result.hint}")

        if result.kind == TransactionKind.SALE:
            verified = TextConstants.NO_SIGNATURE if result.signature_verified is None else result.signature_verified
            rows.append(f"Signature Verified: {verified}")

        rows.append(f"{TextConstants.RAW_RESPONSE}: {dumps(result.fields, indent=2, ensure_ascii=False)}")

        return "\n".join(rows)

    def print_result(self, result: TransactionResult, level=default_level):
        self.print_multi_row(self.format_result(result), level=level)
