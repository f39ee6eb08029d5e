from enum import StrEnum


class LogMarks(StrEnum):
    BEGIN = "## Begin command line job ID %s, command %s ##"
    FINISH = "## Finish command line job ID %s ##"
