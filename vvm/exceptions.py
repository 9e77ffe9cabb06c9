# -*- coding: utf-8 -*-
from typing import Optional


class VvmException(Exception):
    """
    Base error reported to the user as a single ERROR line.

    :param message: Human-readable error text
    :param detail: Optional value printed after the message (operation, path, VM name)
    """

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message if detail is None else f"{message} {detail}")
        self.message = message
        self.detail = detail


class InvalidOperation(VvmException):
    pass


class ConfigNotFound(VvmException):
    pass


class ConfigParseError(VvmException):
    pass


class VmNotConfigured(VvmException):
    pass


class IncorrectVmConfig(VvmException):
    pass


class MissingMountConfig(VvmException):
    pass
