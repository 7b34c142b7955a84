"""Verification artifact port.

An artifact is an opaque, scannable proof-of-order string attached to an
order when it is placed. Adapters turn a placement key into that string.
"""

from abc import ABC, abstractmethod


class VerificationArtifactGenerator(ABC):
    """Abstract verification artifact generator."""

    @abstractmethod
    def generate(self, key: str) -> str:
        """Return the artifact for ``key``. Raise on failure."""
        ...
