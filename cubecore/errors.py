import typing

class CubeError(Exception):
    pass

class InvalidMoveToken(CubeError, ValueError):
    token: typing.Any

    def __init__(self, token, reason: str):
        super().__init__(f"Invalid move token {token!r}: {reason}")
        self.token = token

class CorruptedState(CubeError):
    report: "ValidationReport"

    def __init__(self, report: "ValidationReport", context: typing.Optional[str] = None):
        msg = report.describe()
        super().__init__(f"{context}: {msg}" if context else msg)
        self.report = report
