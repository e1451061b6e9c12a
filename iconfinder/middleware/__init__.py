"""Icon finder middlewares"""

from enum import Enum, unique


@unique
class ScopeKey(str, Enum):
    """Keys into the ASGI scope dict"""

    METRICS_CLIENT = "iconfinder_metrics_client"
    # Raw target of an icon lookup, set by the icon endpoints for the request summary.
    ICON_TARGET = "iconfinder_icon_target"
