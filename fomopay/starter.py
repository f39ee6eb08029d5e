#
# FomoPay client starting script
#
# This script runs the command line interface. The CLI runs once the file is imported, no additional actions are
# required. If you're using the library, create FomoPayClient with your Config instead
#
# Example of the script run command: "from fomopay import starter"
#


# Correct way to run
if __name__ != "__main__":  # Runs only by import command

    # Preparation to run the client

    try:
        from loguru import logger
        from sys import exit, argv
        from os import makedirs
        from os.path import dirname
        from fomopay.lib.core.CustomConfigFile import CustomConfigFile
        from fomopay.lib.core.Logger import Logger
        from fomopay.lib.core.LogPrinter import LogPrinter
        from fomopay.lib.data_models.Config import Config
        from fomopay.cli.core.FomoPayCli import FomoPayCli

        config: Config = CustomConfigFile().read_config(argv[1:])

        if log_dir := dirname(config.debug.log_file):  # Create log directory in case when it doesn't exist
            makedirs(log_dir, exist_ok=True)

        Logger(config)
        LogPrinter(config).print_startup_info()

        # Preparation is finished, starting the CLI

        cli: FomoPayCli = FomoPayCli(config)
        status: int = cli.run_application(argv[1:])
        exit(status)

    except Exception as run_exception:
        logger.error(run_exception)
        exit(100)


# Incorrect way to run
if __name__ == "__main__":  # Do not run directly
    error_message = """
The file fomopay/starter.py should be imported from the main working directory, the direct run has no effect
The CLI runs once the file is imported, no additional actions are required
"""

    raise RuntimeError(error_message)
