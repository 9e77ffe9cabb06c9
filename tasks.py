# -*- coding: utf-8 -*-
"""
vvm - invoke tasks for VirtualBox VMs listed in ~/vvm.config.json.

Usage examples:
    # Start a VM headless and mount its home directory over sshfs:
    invoke start dev

    # Unmount and power off:
    invoke stop dev

    # Mount or unmount a running VM:
    invoke mount dev
    invoke unmount dev
"""
from typing import Optional

from invoke import Exit, task

from vvm import ShellRunner, VmController


@task
def start(c, name: str, config: Optional[str] = None):
    """
    Start a VM headless, then mount it when the record has mount settings.

    :param c: Context (invoke requirement)
    :param name: VM key in the config file
    :param config: Path to a config file other than ~/vvm.config.json
    """
    _run(c, "start", name, config)


@task
def stop(c, name: str, config: Optional[str] = None):
    """
    Unmount a VM when the record has mount settings, then power it off.

    :param c: Context (invoke requirement)
    :param name: VM key in the config file
    :param config: Path to a config file other than ~/vvm.config.json
    """
    _run(c, "stop", name, config)


@task
def mount(c, name: str, config: Optional[str] = None):
    """
    Mount a running VM over sshfs after its mount delay.

    :param c: Context (invoke requirement)
    :param name: VM key in the config file
    :param config: Path to a config file other than ~/vvm.config.json
    """
    _run(c, "mount", name, config)


@task
def unmount(c, name: str, config: Optional[str] = None):
    """
    Force unmount of the VM mount point.

    :param c: Context (invoke requirement)
    :param name: VM key in the config file
    :param config: Path to a config file other than ~/vvm.config.json
    """
    _run(c, "unmount", name, config)


def _run(c, operation: str, name: str, config: Optional[str]) -> None:
    controller = VmController(runner=ShellRunner(context=c), config_path=config)
    if not controller.run(operation, name):
        raise Exit(code=1)
