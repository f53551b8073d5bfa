"""Stable public API for building tooling on top of netnaming.

This module is the supported integration surface for third-party callers.
Avoid importing from private/internal modules unless intentionally depending on
non-stable internals.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from netnaming.core.errors import (
    DeviceLoadError,
    DeviceNotFoundError,
    DeviceValidationError,
    InvalidValueError,
    NamingSchemeInvariantError,
    NetNamingError,
    PropertyNotFoundError,
    PropertyReadError,
    SysattrNotFoundError,
)
from netnaming.core.model import NamePolicy, NamingFlag, NamingScheme
from netnaming.core.policy import (
    alternative_names_policy_from_string,
    alternative_names_policy_to_string,
    name_policy_from_string,
    name_policy_to_string,
)
from netnaming.core.schemes import NamingSchemeResolver, naming_scheme, naming_scheme_from_name
from netnaming.core.service import NamingService
from netnaming.core.sysattr import SysattrFilter, sysattr_property_key
from netnaming.sources.base import BootParamReader, PropertyStore
from netnaming.sources.memory import MemoryDevice, MemoryPropertyStore
from netnaming.sources.sysfs import SysfsDevice, SysfsPropertyStore

__all__ = [
    "NetNamingError",
    "PropertyNotFoundError",
    "SysattrNotFoundError",
    "InvalidValueError",
    "PropertyReadError",
    "DeviceNotFoundError",
    "DeviceLoadError",
    "DeviceValidationError",
    "NamingSchemeInvariantError",
    "NamePolicy",
    "NamingFlag",
    "NamingScheme",
    "NamingSchemeResolver",
    "naming_scheme",
    "naming_scheme_from_name",
    "name_policy_to_string",
    "name_policy_from_string",
    "alternative_names_policy_to_string",
    "alternative_names_policy_from_string",
    "SysattrFilter",
    "sysattr_property_key",
    "BootParamReader",
    "PropertyStore",
    "MemoryDevice",
    "MemoryPropertyStore",
    "SysfsDevice",
    "SysfsPropertyStore",
    "Client",
]


class Client:
    """Public client for naming scheme and sysattr queries.

    A `Client` instance wraps scheme resolution and filtered sysattr reads
    behind a stable API intended for third-party tools. Unless a resolver is
    passed in, all clients share the process-wide naming scheme.
    """

    def __init__(self, *, resolver: NamingSchemeResolver | None = None) -> None:
        self._service = NamingService(resolver=resolver)

    def naming_scheme(self) -> NamingScheme:
        return self._service.naming_scheme()

    def list_schemes(self) -> list[NamingScheme]:
        return self._service.list_schemes()

    def find_scheme(self, name: str) -> NamingScheme | None:
        return self._service.find_scheme(name)

    def sysattr_allowed(
        self,
        sysattr: str,
        *,
        ifname: str | None = None,
        device_file: Path | None = None,
    ) -> bool:
        device, store = self._service.open_device(ifname=ifname, path=device_file)
        return self._service.sysattr_allowed(device, store, sysattr)

    def read_sysattr(
        self,
        sysattr: str,
        *,
        kind: str = "string",
        ifname: str | None = None,
        device_file: Path | None = None,
    ) -> Any:
        device, store = self._service.open_device(ifname=ifname, path=device_file)
        return self._service.read_sysattr(device, store, sysattr, kind)
