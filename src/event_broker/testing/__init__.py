"""Testing helpers – fakes and property-based strategies for broker users."""
from event_broker.testing.fakes import RecordingHandler

__all__ = ["RecordingHandler"]
