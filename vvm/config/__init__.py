# -*- coding: utf-8 -*-
from .vm_config import MountConfig, VmConfig, VmRecord

__all__ = ["MountConfig", "VmConfig", "VmRecord"]
