"""Naming scheme registry and process-wide scheme resolution."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Mapping

from netnaming.core.errors import NamingSchemeInvariantError
from netnaming.core.model import NamingFlag, NamingScheme
from netnaming.sources.base import BootParamReader
from netnaming.sources.cmdline import ProcCmdlineReader

LOGGER = logging.getLogger(__name__)

CMDLINE_KEY = "net.naming-scheme"
ENV_VAR = "NET_NAMING_SCHEME"
LATEST_ALIAS = "latest"
DEFAULT_NET_NAMING_SCHEME = LATEST_ALIAS

NAMING_V238 = NamingFlag(0)
NAMING_V239 = NAMING_V238 | NamingFlag.SR_IOV_V | NamingFlag.NPAR_ARI
NAMING_V240 = NAMING_V239 | NamingFlag.INFINIBAND | NamingFlag.ZERO_ACPI_INDEX | NamingFlag.ALLOW_RERENAMES
NAMING_V241 = NAMING_V240 | NamingFlag.STABLE_VIRTUAL_MACS
NAMING_V243 = NAMING_V241 | NamingFlag.NETDEVSIM | NamingFlag.LABEL_NOPREFIX
NAMING_V245 = NAMING_V243 | NamingFlag.NSPAWN_LONG_HASH
NAMING_V247 = NAMING_V245 | NamingFlag.BRIDGE_NO_SLOT
NAMING_V249 = NAMING_V247 | NamingFlag.SLOT_FUNCTION_ID | NamingFlag.INDEX_16BIT | NamingFlag.REPLACE_STRICTLY
NAMING_V250 = NAMING_V249 | NamingFlag.XEN_VIF
NAMING_V251 = NAMING_V250 | NamingFlag.BRIDGE_MULTIFUNCTION_SLOT
NAMING_V252 = NAMING_V251 | NamingFlag.DEVICETREE_ALIASES | NamingFlag.USB_HOST | NamingFlag.SR_IOV_R

NAMING_RHEL_8_0 = NAMING_V239
NAMING_RHEL_8_5 = NAMING_RHEL_8_0 | NamingFlag.SLOT_FUNCTION_ID
NAMING_RHEL_8_7 = NAMING_RHEL_8_5 | NamingFlag.BRIDGE_MULTIFUNCTION_SLOT
NAMING_RHEL_9_0 = NAMING_V250 | NamingFlag.BRIDGE_MULTIFUNCTION_SLOT
NAMING_RHEL_9_2 = NAMING_RHEL_9_0 | NamingFlag.SR_IOV_R

# Order matters: the last entry is what "latest" maps to.
NAMING_SCHEMES: tuple[NamingScheme, ...] = (
    NamingScheme("v238", NAMING_V238),
    NamingScheme("v239", NAMING_V239),
    NamingScheme("v240", NAMING_V240),
    NamingScheme("v241", NAMING_V241),
    NamingScheme("v243", NAMING_V243),
    NamingScheme("v245", NAMING_V245),
    NamingScheme("v247", NAMING_V247),
    NamingScheme("v249", NAMING_V249),
    NamingScheme("v250", NAMING_V250),
    NamingScheme("v251", NAMING_V251),
    NamingScheme("v252", NAMING_V252),
    NamingScheme("rhel-8.0", NAMING_RHEL_8_0),
    NamingScheme("rhel-8.1", NAMING_RHEL_8_0),
    NamingScheme("rhel-8.2", NAMING_RHEL_8_0),
    NamingScheme("rhel-8.3", NAMING_RHEL_8_0),
    NamingScheme("rhel-8.4", NAMING_RHEL_8_0),
    NamingScheme("rhel-8.5", NAMING_RHEL_8_5),
    NamingScheme("rhel-8.6", NAMING_RHEL_8_5),
    NamingScheme("rhel-8.7", NAMING_RHEL_8_7),
    NamingScheme("rhel-8.8", NAMING_RHEL_8_7),
    NamingScheme("rhel-8.9", NAMING_RHEL_8_7),
    NamingScheme("rhel-8.10", NAMING_RHEL_8_7),
    NamingScheme("rhel-9.0", NAMING_RHEL_9_0),
    NamingScheme("rhel-9.1", NAMING_RHEL_9_0),
    NamingScheme("rhel-9.2", NAMING_RHEL_9_2),
)


def naming_scheme_from_name(
    name: str,
    schemes: tuple[NamingScheme, ...] = NAMING_SCHEMES,
) -> NamingScheme | None:
    """Look up a scheme by exact name.

    An entry literally called "latest" wins if the table has one. Otherwise
    "latest" maps to the last entry of the table, whatever that is.
    """
    for scheme in schemes:
        if scheme.name == name:
            return scheme

    if name == LATEST_ALIAS and schemes:
        return schemes[-1]

    return None


def _select_requested_name(boot_value: str | None, env_value: str | None) -> str | None:
    if env_value is None:
        return boot_value
    if env_value.startswith(":"):
        # ':' prefix lets the kernel command line take precedence.
        return boot_value if boot_value is not None else env_value[1:]
    return env_value


class NamingSchemeResolver:
    """Resolve the naming scheme once and hand out the cached entry afterwards."""

    def __init__(
        self,
        *,
        boot_params: BootParamReader | None = None,
        environ: Mapping[str, str] | None = None,
        schemes: tuple[NamingScheme, ...] = NAMING_SCHEMES,
        default_name: str = DEFAULT_NET_NAMING_SCHEME,
    ) -> None:
        self.boot_params = boot_params or ProcCmdlineReader()
        self.environ = os.environ if environ is None else environ
        self.schemes = schemes
        self.default_name = default_name
        self._cache: NamingScheme | None = None
        self._lock = threading.Lock()

    @property
    def cached(self) -> NamingScheme | None:
        return self._cache

    def resolve(self) -> NamingScheme:
        cached = self._cache
        if cached is not None:
            return cached

        with self._lock:
            if self._cache is None:
                self._cache = self._compute()
            return self._cache

    def reset(self) -> None:
        """Drop the cached scheme. Only meant for tests."""
        with self._lock:
            self._cache = None

    def _compute(self) -> NamingScheme:
        boot_value = self.boot_params.get_key(CMDLINE_KEY)
        env_value = self.environ.get(ENV_VAR)
        requested = _select_requested_name(boot_value, env_value)

        if requested:
            scheme = naming_scheme_from_name(requested, self.schemes)
            if scheme is not None:
                LOGGER.info("Using interface naming scheme '%s'.", scheme.name)
                return scheme
            LOGGER.warning("Unknown interface naming scheme '%s' requested, ignoring.", requested)

        scheme = naming_scheme_from_name(self.default_name, self.schemes)
        if scheme is None:
            raise NamingSchemeInvariantError(
                f"Default naming scheme '{self.default_name}' is not defined in the scheme table"
            )
        LOGGER.info("Using default interface naming scheme '%s'.", scheme.name)
        return scheme


if naming_scheme_from_name(DEFAULT_NET_NAMING_SCHEME) is None:  # pragma: no cover - broken table
    raise NamingSchemeInvariantError(
        f"Default naming scheme '{DEFAULT_NET_NAMING_SCHEME}' is not defined in the scheme table"
    )

_DEFAULT_RESOLVER = NamingSchemeResolver()


def default_resolver() -> NamingSchemeResolver:
    return _DEFAULT_RESOLVER


def naming_scheme() -> NamingScheme:
    """Return the naming scheme for this process, resolving it on first use."""
    return _DEFAULT_RESOLVER.resolve()
