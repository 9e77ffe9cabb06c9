# -*- coding: utf-8 -*-
from dataclasses import dataclass
from typing import Optional

from invoke import Context

from ..config import VmRecord


@dataclass(frozen=True)
class CommandResult:
    command: str
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def failed(self) -> bool:
        # Only exit code 1 counts as a failure, other codes are reported as success.
        return self.exit_code == 1


class ShellRunner:
    """
    Runs vboxmanage, sshfs and umount command lines for a VM record.

    Commands go through an invoke ``Context`` with output hidden, so the
    caller decides how captured stdout and stderr are shown.
    """
    start_cmd = "vboxmanage startvm {name} --type headless"
    stop_cmd = "vboxmanage controlvm {name} poweroff"
    mount_cmd = "sshfs -p {ssh_port} {username}@{hostname}:{mount_point_remote} {mount_point_host}"
    unmount_cmd = "umount -f {mount_point_host}"

    def __init__(self, context: Optional[Context] = None):
        self.context = context or Context()

    def start(self, vm: VmRecord) -> CommandResult:
        return self.run(self.start_cmd.format(name=vm.name))

    def stop(self, vm: VmRecord) -> CommandResult:
        return self.run(self.stop_cmd.format(name=vm.name))

    def mount(self, vm: VmRecord) -> CommandResult:
        return self.run(self.mount_command(vm))

    def unmount(self, vm: VmRecord) -> CommandResult:
        return self.run(self.unmount_cmd.format(mount_point_host=vm.mount_point_host))

    def mount_command(self, vm: VmRecord) -> str:
        mount = vm.mount_config()
        return self.mount_cmd.format(
            ssh_port=mount.ssh_port,
            username=mount.username,
            hostname=mount.hostname,
            mount_point_remote=mount.remote_mount_point,
            mount_point_host=mount.mount_point_host
        )

    def run(self, cmd: str) -> CommandResult:
        """
        Executes a command and waits for it without a timeout.

        :param cmd: Shell command line
        :return: Exit code and captured streams
        """
        result = self.context.run(cmd, warn=True, hide=True, in_stream=False)
        return CommandResult(
            command=cmd,
            exit_code=result.exited,
            stdout=result.stdout or "",
            stderr=result.stderr or ""
        )
