"""Dashboard widgets."""

from .brightness import BrightnessPanelWidget
from .charge import ChargeGraphPanel, ChargePanelWidget
from .info import PrivacyPanel, SmbiosPanel
from .message_bar import FOOTER_HELP, HelpFooter, MessageBar
from .pd_ports import PdPortsPanel
from .thermal import ThermalGraphPanel, ThermalPanel
from .title import TitleBar

__all__ = [
    "FOOTER_HELP",
    "BrightnessPanelWidget",
    "ChargeGraphPanel",
    "ChargePanelWidget",
    "HelpFooter",
    "MessageBar",
    "PdPortsPanel",
    "PrivacyPanel",
    "SmbiosPanel",
    "ThermalGraphPanel",
    "ThermalPanel",
    "TitleBar",
]
