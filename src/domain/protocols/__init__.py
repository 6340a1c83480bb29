"""Domain protocols (ports).

Usage:
    from src.domain.protocols import EventRepository, RegistrationRepository
"""

from src.domain.protocols.admission_lock_protocol import AdmissionLockProtocol
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.registration_repository import RegistrationRepository
from src.domain.protocols.token_validation_protocol import TokenValidationProtocol

__all__ = [
    "AdmissionLockProtocol",
    "EventBusProtocol",
    "EventHandler",
    "EventRepository",
    "LoggerProtocol",
    "RegistrationRepository",
    "TokenValidationProtocol",
]
