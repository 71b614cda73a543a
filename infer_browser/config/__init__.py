from .loader import load_global_config
from .model import GlobalConfig, NavLink

__all__ = ["GlobalConfig", "NavLink", "load_global_config"]
