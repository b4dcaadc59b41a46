"""Diagnostics logger for deep-link routing."""

from utils.log_utils import log


class DeepLinkLogger:
    def __init__(self, system: str = "DEEPLINK") -> None:
        self.system = system

    def info(self, message: str) -> None:
        log(self.system, message)

    def warn(self, message: str) -> None:
        log(self.system, message, "WARN")

    def error(self, message: str) -> None:
        log(self.system, message, "ERROR")
