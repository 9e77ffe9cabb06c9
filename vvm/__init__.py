# -*- coding: utf-8 -*-
__version__ = "0.1.0"

from .console import StatusReporter
from .config import VmConfig, VmRecord
from .shell import ShellRunner, CommandResult
from .vm_controller import VmController

__all__ = ["StatusReporter", "VmConfig", "VmRecord", "ShellRunner", "CommandResult", "VmController"]
