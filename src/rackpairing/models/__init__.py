"""Data models for Rack Pairing."""

from rackpairing.models.pairing import Pairing
from rackpairing.models.participant import Participant

__all__ = ["Participant", "Pairing"]
