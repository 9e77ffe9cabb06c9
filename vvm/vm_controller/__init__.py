# -*- coding: utf-8 -*-
from .vm_controller import VmController

__all__ = ["VmController"]
