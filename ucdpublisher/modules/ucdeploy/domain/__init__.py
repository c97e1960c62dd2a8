from .blocks import CreateComponentBlock, DeliveryBlock, DeliveryType, Pull, Push, VersionBlock
from .models import PropDef, PropSheetDef, VersionResult

__all__ = [
    "CreateComponentBlock",
    "DeliveryBlock",
    "DeliveryType",
    "Pull",
    "Push",
    "VersionBlock",
    "PropDef",
    "PropSheetDef",
    "VersionResult",
]
