"""Manufacturer handlers.

Each handler owns the MPN grammar of one vendor: the regex table it registers
into the pattern registry, and the package / series / attribute extractors
that understand that vendor's ordering codes.

HANDLER_CLASSES is the dispatch order. When two vendors claim the same MPN
(onsemi second-sources LM358 / LM324 / LM2904), the earlier handler wins and
the later ones are reported as alternative manufacturers.
"""

from .base import ManufacturerHandler
from .alpha_omega import AlphaOmegaHandler
from .infineon import InfineonHandler
from .texas_instruments import TexasInstrumentsHandler
from .onsemi import OnsemiHandler
from .analog_devices import AnalogDevicesHandler
from .maxim import MaximHandler
from .bosch import BoschHandler
from .sensirion import SensirionHandler
from .microchip import MicrochipHandler
from .winbond import WinbondHandler
from .macronix import MacronixHandler
from .issi import IssiHandler
from .jst import JSTHandler
from .yageo import YageoHandler
from .murata import MurataHandler
from .nichicon import NichiconHandler
from .espressif import EspressifHandler
from .beken import BekenHandler

HANDLER_CLASSES: tuple[type[ManufacturerHandler], ...] = (
    AlphaOmegaHandler,
    InfineonHandler,
    TexasInstrumentsHandler,
    OnsemiHandler,
    AnalogDevicesHandler,
    MaximHandler,
    BoschHandler,
    SensirionHandler,
    MicrochipHandler,
    WinbondHandler,
    MacronixHandler,
    IssiHandler,
    JSTHandler,
    YageoHandler,
    MurataHandler,
    NichiconHandler,
    EspressifHandler,
    BekenHandler,
)


def default_handlers() -> list[ManufacturerHandler]:
    """Fresh instances of every handler, in dispatch order."""
    return [handler_class() for handler_class in HANDLER_CLASSES]


__all__ = [
    "ManufacturerHandler",
    "HANDLER_CLASSES",
    "default_handlers",
    "AlphaOmegaHandler",
    "InfineonHandler",
    "TexasInstrumentsHandler",
    "OnsemiHandler",
    "AnalogDevicesHandler",
    "MaximHandler",
    "BoschHandler",
    "SensirionHandler",
    "MicrochipHandler",
    "WinbondHandler",
    "MacronixHandler",
    "IssiHandler",
    "JSTHandler",
    "YageoHandler",
    "MurataHandler",
    "NichiconHandler",
    "EspressifHandler",
    "BekenHandler",
]
