# -*- coding: utf-8 -*-
"""
Command line entry point.

Usage:
    vvm start dev
    vvm stop dev
    vvm mount dev
    vvm unmount dev
"""
import argparse
import sys
from typing import List, Optional

from . import __version__
from .vm_controller import VmController


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="vvm",
        description="Start, stop, mount and unmount VirtualBox VMs listed in ~/vvm.config.json"
    )
    parser.add_argument("operation", help=f"one of: {', '.join(VmController.OPERATIONS)}")
    parser.add_argument("vm", nargs="?", help="VM key in vvm.config.json")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    return 0 if VmController().run(args.operation, args.vm) else 1


if __name__ == "__main__":
    sys.exit(main())
