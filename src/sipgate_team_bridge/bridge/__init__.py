from sipgate_team_bridge.bridge.adapter import Adapter, ServerError
from sipgate_team_bridge.bridge.models import (
    Config,
    Contact,
    ContactTemplate,
    ContactUpdate,
    PhoneNumber,
    PhoneNumberLabel,
)

__all__ = [
    "Adapter",
    "Config",
    "Contact",
    "ContactTemplate",
    "ContactUpdate",
    "PhoneNumber",
    "PhoneNumberLabel",
    "ServerError",
]
