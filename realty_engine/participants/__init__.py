"""Deal participants and their factory."""

from realty_engine.participants.factory import ParticipantFactory
from realty_engine.participants.roles import Broker, Buyer, Participant, Seller

__all__ = ["Broker", "Buyer", "Participant", "ParticipantFactory", "Seller"]
