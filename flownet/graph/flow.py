"""Weight, capacity and flow bookkeeping for edges."""

import math
from typing import Any

from .errors import InvalidArgumentError, RangeError

Number = int | float


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a meaningful weight or capacity
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def check_weight(value: Any, name: str = "weight") -> Number | None:
    """Validate an optional numeric value with no range restriction.

    Args:
        value: The value to check.
        name: Name of the value, used in the error message.

    Returns:
        The value unchanged.

    Raises:
        InvalidArgumentError: If the value is neither a number nor None.
    """
    if value is not None and not _is_number(value):
        raise InvalidArgumentError(
            f"Invalid {name} given - must be numeric or None, "
            f"got {type(value).__name__}",
            name,
        )
    return value


def check_non_negative(value: Any, name: str) -> Number | None:
    """Validate an optional numeric value that must not be negative.

    Args:
        value: The value to check.
        name: Name of the value, used in the error message.

    Returns:
        The value unchanged.

    Raises:
        InvalidArgumentError: If the value is not numeric, NaN or negative.
    """
    check_weight(value, name)
    if value is not None and math.isnan(value):
        raise InvalidArgumentError(
            f"{name.capitalize()} must be a real number, got {value}", name
        )
    if value is not None and value < 0:
        raise InvalidArgumentError(
            f"{name.capitalize()} must not be negative, got {value}", name
        )
    return value


def _check_within(capacity: Number | None, flow: Number | None) -> None:
    if capacity is not None and flow is not None and flow > capacity:
        raise RangeError(
            f"Flow of {flow} exceeds capacity of {capacity}",
            capacity=capacity,
            flow=flow,
        )


class FlowBudget:
    """Weight, capacity and flow of a single edge.

    Invariants after every call: capacity >= 0 and flow >= 0 when set, and
    flow <= capacity when both are set. Every setter validates first and
    only then assigns, so a rejected call leaves the budget untouched.
    """

    __slots__ = ("_weight", "_capacity", "_flow")

    def __init__(self):
        self._weight: Number | None = None
        self._capacity: Number | None = None
        self._flow: Number | None = None

    @property
    def weight(self) -> Number | None:
        return self._weight

    @property
    def capacity(self) -> Number | None:
        return self._capacity

    @property
    def flow(self) -> Number | None:
        return self._flow

    def set_weight(self, weight: Any) -> None:
        self._weight = check_weight(weight)

    def set_capacity(self, capacity: Any) -> None:
        """Set the capacity, or remove the bound with None.

        Raises:
            InvalidArgumentError: If capacity is not numeric or negative.
            RangeError: If the current flow exceeds the new capacity.
        """
        check_non_negative(capacity, "capacity")
        if capacity is not None and self._flow is not None and self._flow > capacity:
            raise RangeError(
                f"Current flow of {self._flow} exceeds new capacity of {capacity}",
                capacity=capacity,
                flow=self._flow,
            )
        self._capacity = capacity

    def set_flow(self, flow: Any) -> None:
        """Set the flow, or stop tracking it with None.

        Raises:
            InvalidArgumentError: If flow is not numeric or negative.
            RangeError: If the new flow exceeds the current capacity.
        """
        check_non_negative(flow, "flow")
        if flow is not None and self._capacity is not None and flow > self._capacity:
            raise RangeError(
                f"New flow of {flow} exceeds maximum capacity of {self._capacity}",
                capacity=self._capacity,
                flow=flow,
            )
        self._flow = flow

    def set_capacity_and_flow(self, capacity: Any, flow: Any) -> None:
        """Set capacity and flow together, validating the pair as a whole.

        Raises:
            InvalidArgumentError: If either value is not numeric or negative.
            RangeError: If flow exceeds capacity.
        """
        check_non_negative(capacity, "capacity")
        check_non_negative(flow, "flow")
        _check_within(capacity, flow)
        self._capacity = capacity
        self._flow = flow

    def capacity_remaining(self) -> Number | None:
        """Get capacity minus flow, or None when there is no upper bound.

        An untracked flow counts as zero.
        """
        if self._capacity is None:
            return None
        return self._capacity - (self._flow or 0)

    def is_saturated(self) -> bool:
        """Check whether all of a bounded capacity is in use."""
        remaining = self.capacity_remaining()
        return remaining is not None and remaining <= 0

    def __repr__(self) -> str:
        return (
            f"FlowBudget(weight={self._weight!r}, capacity={self._capacity!r}, "
            f"flow={self._flow!r})"
        )
