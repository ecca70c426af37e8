"""tools module init"""
from sui_agent.tools.toolkit import SuiToolkit

__all__ = ["SuiToolkit"]
