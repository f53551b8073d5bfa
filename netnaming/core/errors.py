"""Domain-specific errors for netnaming."""


class NetNamingError(Exception):
    """Base error for netnaming."""


class PropertyNotFoundError(NetNamingError):
    """Raised when a device property or sysattr does not exist."""


class SysattrNotFoundError(PropertyNotFoundError):
    """Raised when a sysattr is missing or hidden by ID_NET_NAME_ALLOW* properties."""


class InvalidValueError(NetNamingError):
    """Raised when a value exists but cannot be parsed as the requested type."""


class PropertyReadError(NetNamingError):
    """Raised when a property store fails to read a value."""


class DeviceNotFoundError(NetNamingError):
    """Raised when a device handle cannot be opened."""


class DeviceLoadError(NetNamingError):
    """Raised when reading a device description file fails."""


class DeviceValidationError(NetNamingError):
    """Raised when a device description does not conform to schema."""


class NamingSchemeInvariantError(NetNamingError):
    """Raised when the built-in default naming scheme is missing from the table."""
