# -*- coding: utf-8 -*-
import json
import os
from os.path import expanduser, isfile, join
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, confloat, conint, field_validator

from ..exceptions import ConfigNotFound, ConfigParseError, IncorrectVmConfig, VmNotConfigured


class MountConfig(BaseModel):
    """
    A Pydantic model for the sshfs parameters of a mountable VM.

    Attributes:
        username (str): Remote login used by sshfs.
        mount_point_host (str): Local directory the VM is mounted on.
        hostname (str): Remote host for sshfs (default: localhost).
        ssh_port (int): Remote ssh port (default: 22).
        mount_point_remote (str): Remote directory (default: /home/<username>/).
        mount_delay (float): Seconds to wait before mounting (default: 10).
    """
    model_config = ConfigDict(frozen=True)

    username: str
    mount_point_host: str
    hostname: str = "localhost"
    ssh_port: conint(ge=1, le=65535) = 22
    mount_point_remote: Optional[str] = None
    mount_delay: confloat(ge=0) = 10

    @property
    def remote_mount_point(self) -> str:
        if self.mount_point_remote is not None:
            return self.mount_point_remote
        return f"/home/{self.username}/"


class VmRecord(BaseModel):
    """
    A single VM entry of the vvm config file.

    Only ``name`` is checked when the record is read. Mount fields are kept
    as written and typed by ``mount_config()`` when a mount needs them.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    username: Any = None
    mount_point_host: Any = None
    hostname: Any = None
    ssh_port: Any = None
    mount_point_remote: Any = None
    mount_delay: Any = None

    @field_validator("name", mode="before")
    def name_to_str(cls, v):
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @property
    def is_mountable(self) -> bool:
        return self.username is not None and self.mount_point_host is not None

    def mount_config(self) -> MountConfig:
        """
        :raises IncorrectVmConfig: If a mount field has an invalid value
        """
        fields = {
            field: getattr(self, field) for field in MountConfig.model_fields
            if getattr(self, field) is not None
        }
        try:
            return MountConfig(**fields)
        except ValidationError as e:
            raise IncorrectVmConfig("Incorrect config", f"{self.name}: {format_errors(e)}")


def format_errors(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in error.errors()
    )


class VmConfig:
    """
    VM records loaded from ``vvm.config.json`` in the user's home directory.

    The top-level JSON object maps a short VM key (used on the command line)
    to a record, e.g.::

        {"dev": {"name": "dev-vm", "username": "alice", "mount_point_host": "/mnt/dev"}}
    """
    file_name = "vvm.config.json"

    def __init__(self, vms: Dict[str, Any], path: Optional[str] = None):
        self.vms = vms
        self.path = path

    @classmethod
    def load(cls, path: Optional[str] = None) -> "VmConfig":
        """
        Reads the config file.

        :param path: Config file path, defaults to ``<home>/vvm.config.json``
        :raises ConfigNotFound: If the file does not exist
        :raises ConfigParseError: If the file is not a JSON object
        """
        path = path or cls.default_path()
        if not isfile(path):
            raise ConfigNotFound("Could not find config file", path)

        try:
            with open(path, 'r', encoding='utf-8') as f:
                vms = json.load(f)
        except (OSError, ValueError):
            raise ConfigParseError("Failed to parse config file", path)

        if not isinstance(vms, dict):
            raise ConfigParseError("Failed to parse config file", path)

        return cls(vms, path=path)

    @classmethod
    def default_path(cls) -> str:
        return join(cls.home_dir(), cls.file_name)

    @staticmethod
    def home_dir() -> str:
        return os.environ.get("HOME") or os.environ.get("USERPROFILE") or expanduser("~")

    @property
    def names(self) -> List[str]:
        return list(self.vms)

    def get(self, vm_name: Optional[str]) -> VmRecord:
        """
        Returns the validated record for a VM key.

        :param vm_name: Key of the VM in the config file
        :raises VmNotConfigured: If there is no such key
        :raises IncorrectVmConfig: If the record has no usable ``name``
        """
        if vm_name is None or vm_name not in self.vms:
            raise VmNotConfigured("No config available for", vm_name)

        raw = self.vms[vm_name]
        if not isinstance(raw, dict):
            raise IncorrectVmConfig("Incorrect config", vm_name)

        # null values fall back to the defaults
        fields = {key: value for key, value in raw.items() if value is not None}
        if "name" not in fields:
            raise IncorrectVmConfig("Incorrect config - VM name missing")

        try:
            return VmRecord(**fields)
        except ValidationError as e:
            raise IncorrectVmConfig("Incorrect config", f"{vm_name}: {format_errors(e)}")
