"""Dispatch — event args and the name → handler table."""

from event_broker.dispatch.args import EMPTY, EmptyData, EventArgs, Handler
from event_broker.dispatch.table import DispatchTable

__all__ = ["DispatchTable", "EMPTY", "EmptyData", "EventArgs", "Handler"]
