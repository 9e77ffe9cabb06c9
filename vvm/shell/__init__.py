# -*- coding: utf-8 -*-
from .shell_runner import ShellRunner, CommandResult

__all__ = ["ShellRunner", "CommandResult"]
