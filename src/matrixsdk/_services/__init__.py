from .account_service import AccountService
from .discovery_service import DiscoveryService
from .registration_service import RegistrationService
from .rooms_service import RoomsService
from .session_service import SessionService
from .sync_service import SyncService

__all__ = [
    "AccountService",
    "DiscoveryService",
    "RegistrationService",
    "RoomsService",
    "SessionService",
    "SyncService",
]
