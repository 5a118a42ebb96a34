"""
sysctl access for Darwin hosts.

Provides ctypes bindings for sysctlbyname(3), used to read the raw
hardware identifier (``hw.machine``) on Apple platforms.
"""

import ctypes
import ctypes.util
from ctypes import c_char_p, c_int, c_size_t, c_void_p, POINTER
from typing import Optional

from mobilabs.core.errors import PlatformError

HW_MACHINE = "hw.machine"

_libc: Optional[ctypes.CDLL] = None


def _load_libc() -> ctypes.CDLL:
    """Load the C library and declare the sysctlbyname prototype."""
    global _libc
    if _libc is None:
        path = ctypes.util.find_library("c")
        if path is None:
            raise PlatformError("sysctlbyname", "C library not found")
        libc = ctypes.CDLL(path, use_errno=True)
        libc.sysctlbyname.argtypes = [
            c_char_p, c_void_p, POINTER(c_size_t), c_void_p, c_size_t,
        ]
        libc.sysctlbyname.restype = c_int
        _libc = libc
    return _libc


def get_system_property(name: str) -> str:
    """
    Read a string sysctl value.

    The first call asks for the value length, the second fills a buffer
    of that size.

    Args:
        name: sysctl name, e.g. "hw.machine".

    Returns:
        The decoded property value.

    Raises:
        PlatformError: If the C library or the property is unavailable.
    """
    try:
        libc = _load_libc()
        sysctlbyname = libc.sysctlbyname
    except (OSError, AttributeError) as e:
        raise PlatformError("sysctlbyname", str(e)) from e

    key = name.encode("ascii")
    length = c_size_t(0)
    if sysctlbyname(key, None, ctypes.byref(length), None, 0) != 0:
        raise PlatformError(
            "sysctlbyname", f"{name}: errno {ctypes.get_errno()}"
        )

    buffer = ctypes.create_string_buffer(length.value)
    if sysctlbyname(key, buffer, ctypes.byref(length), None, 0) != 0:
        raise PlatformError(
            "sysctlbyname", f"{name}: errno {ctypes.get_errno()}"
        )

    return buffer.value.decode("utf-8", errors="ignore")
