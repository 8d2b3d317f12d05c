"""Container types for microhash."""

from microhash.containers.hashset import (
    OpenAddressingSet,
    SlotState,
    TableFullError,
)

__all__ = ["OpenAddressingSet", "SlotState", "TableFullError"]
