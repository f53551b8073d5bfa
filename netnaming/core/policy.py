"""String tables for interface name policies."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from netnaming.core.model import NamePolicy

NAME_POLICY_TABLE: Mapping[NamePolicy, str] = MappingProxyType({policy: policy.value for policy in NamePolicy})

# Alternative names are never derived from the kernel name or an existing name.
ALTERNATIVE_NAMES_POLICY_TABLE: Mapping[NamePolicy, str] = MappingProxyType(
    {
        NamePolicy.DATABASE: "database",
        NamePolicy.ONBOARD: "onboard",
        NamePolicy.SLOT: "slot",
        NamePolicy.PATH: "path",
        NamePolicy.MAC: "mac",
    }
)


def _from_string(table: Mapping[NamePolicy, str], name: object) -> NamePolicy | None:
    if not isinstance(name, str):
        return None
    for policy, policy_name in table.items():
        if policy_name == name:
            return policy
    return None


def name_policy_to_string(policy: NamePolicy) -> str | None:
    return NAME_POLICY_TABLE.get(policy)


def name_policy_from_string(name: str) -> NamePolicy | None:
    return _from_string(NAME_POLICY_TABLE, name)


def alternative_names_policy_to_string(policy: NamePolicy) -> str | None:
    return ALTERNATIVE_NAMES_POLICY_TABLE.get(policy)


def alternative_names_policy_from_string(name: str) -> NamePolicy | None:
    return _from_string(ALTERNATIVE_NAMES_POLICY_TABLE, name)
