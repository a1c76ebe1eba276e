"""Interface for ID generators."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Contract for a patient ID generator.

    Generated IDs must sort in creation order; patient lists are displayed in
    that order.
    """

    @abc.abstractmethod
    def new_id(self) -> str:
        """Generate a new unique identifier."""
