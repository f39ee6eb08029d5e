from argparse import ArgumentParser
from pydantic import ValidationError
from fomopay.lib.data_models.Config import Config
from fomopay.lib.enums.TermFilesPath import TermFilesPath
from fomopay.lib.exceptions.exceptions import DataValidationError


class CustomConfigFile(ArgumentParser):
    def __init__(self, add_help=False):
        super(CustomConfigFile, self).__init__(add_help=add_help, description="Custom config parser")

        self.add_argument(
            "--config-file",
            action="store",
            default=TermFilesPath.CONFIG,
            help="Set configuration file path"
        )

    def get_config_filename(self, args: list[str] | None = None) -> str:
        config, others = self.parse_known_args(args)
        return config.config_file

    def read_config(self, args: list[str] | None = None) -> Config:
        config_file = self.get_config_filename(args)

        try:
            with open(config_file) as json_file:
                return Config.model_validate_json(json_file.read())

        except OSError as file_error:
            raise DataValidationError(f"Cannot read configuration file {config_file}: {file_error}") from file_error

        except ValidationError as config_error:
            raise DataValidationError(f"Incorrect configuration file {config_file}: {config_error}") from config_error
