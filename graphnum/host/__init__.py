"""Host function dispatch for the numeric types."""

from graphnum.host.exports import HostExports, HostFunction, get_default_exports

__all__ = ["HostExports", "HostFunction", "get_default_exports"]
