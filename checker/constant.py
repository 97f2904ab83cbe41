from enum import Enum, IntEnum


class Verdict(str, Enum):
    OK = "OK"
    WA = "WA"


class ExitStatus(IntEnum):
    VERDICT = 0
    PROTOCOL_ERROR = 1
    INPUT_ERROR = 2


# custom checker protocol statuses understood by the sandbox
SANDBOX_STATUS = {
    Verdict.OK: "AC",
    Verdict.WA: "WA",
}
