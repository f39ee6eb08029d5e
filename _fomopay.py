#
# FomoPay client | ISO 8583 over JSON, SHA256WithRSA signed requests
#
# Command line client of the FomoPay POS host: sale, query, refund, void and batch settlement
#
# Install the package with "pip install -e .", put the keys and the configuration in place, then run the file by the
# following command - "python _fomopay.py sale --stan 1 --amount 100 --description test"
#
# Run "python _fomopay.py --help" for the list of commands
#

from fomopay import starter
