"""Host adapter glue."""

from .context import StaticHostContext
from .signal_hub import HostSignal, SignalHub

__all__ = ["HostSignal", "SignalHub", "StaticHostContext"]
