# -*- coding: utf-8 -*-
import time
from typing import Optional

from ..config import VmConfig, VmRecord
from ..console import StatusReporter
from ..exceptions import InvalidOperation, MissingMountConfig, VvmException
from ..shell import ShellRunner


class VmController:
    """
    Runs one of the start, stop, mount and unmount operations for a configured VM.

    Mountable VMs are mounted right after a successful start and unmounted
    before a stop. Every step is reported through the ``StatusReporter``.
    """
    OPERATIONS = ("start", "stop", "mount", "unmount")

    def __init__(
            self,
            runner: Optional[ShellRunner] = None,
            reporter: Optional[StatusReporter] = None,
            config_path: Optional[str] = None
    ):
        self.runner = runner or ShellRunner()
        self.reporter = reporter or StatusReporter()
        self.config_path = config_path

    def run(self, operation: str, vm_name: Optional[str] = None, config: Optional[VmConfig] = None) -> bool:
        """
        Validates the operation, loads the config and dispatches.

        :param operation: One of OPERATIONS
        :param vm_name: Key of the VM in the config file
        :param config: Already loaded config, read from disk when omitted
        :return: False if any error was reported
        """
        try:
            self.check_operation(operation)
            config = config or VmConfig.load(self.config_path)
            return self.dispatch(operation, config.get(vm_name))
        except VvmException as e:
            self.reporter.exception(e)
            return False

    def check_operation(self, operation: str) -> None:
        if operation not in self.OPERATIONS:
            raise InvalidOperation("Invalid operation", operation)

    def dispatch(self, operation: str, vm: VmRecord) -> bool:
        self.check_operation(operation)

        if operation == "start":
            return self.start_and_mount(vm) if vm.is_mountable else self.start(vm)

        if operation == "stop":
            return self.unmount_and_stop(vm) if vm.is_mountable else self.stop(vm)

        if not vm.is_mountable:
            raise MissingMountConfig("Missing mount config.")

        return self.mount(vm) if operation == "mount" else self.unmount(vm)

    def start_and_mount(self, vm: VmRecord) -> bool:
        return self.start(vm) and self.mount(vm)

    def unmount_and_stop(self, vm: VmRecord) -> bool:
        unmounted = self.unmount(vm)
        return self.stop(vm) and unmounted

    def start(self, vm: VmRecord) -> bool:
        result = self.runner.start(vm)
        self.reporter.output(result.stdout)
        self.reporter.output(result.stderr, style="red")

        if result.failed:
            self.reporter.error("Failed to start VM")
            return False

        self.reporter.success("Yo! VM is up and running.")
        return True

    def stop(self, vm: VmRecord) -> bool:
        self.reporter.info("Stopping VM...")
        result = self.runner.stop(vm)

        if result.failed:
            self.reporter.output(result.stderr, style="red")
            self.reporter.error("Failed to stop VM")
            return False

        # poweroff progress is written to stderr
        self.reporter.output(result.stderr)
        self.reporter.success("Bye!")
        return True

    def mount(self, vm: VmRecord) -> bool:
        mount_config = vm.mount_config()
        self.reporter.info("Mounting VM...")
        # sshd inside a freshly started VM needs time to come up
        time.sleep(mount_config.mount_delay)
        result = self.runner.mount(vm)
        self.reporter.output(result.stderr, style="red")

        if result.failed:
            self.reporter.error("Failed to mount VM")
            return False

        self.reporter.mounted(vm.mount_point_host)
        return True

    def unmount(self, vm: VmRecord) -> bool:
        self.reporter.info("Unmounting VM...")
        result = self.runner.unmount(vm)
        self.reporter.output(result.stderr, style="red")

        if result.failed:
            self.reporter.error("Failed to unmount VM")
            return False

        self.reporter.info("VM has been unmounted.")
        return True
