from shipco.models.credential import Credential
from shipco.models.quote import Quote
from shipco.models.shipment import Shipment

__all__ = [
    "Credential",
    "Quote",
    "Shipment",
]
