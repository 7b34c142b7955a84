"""Configurable fake artifact generator for development and testing."""

from storefront.order.verification.port import VerificationArtifactGenerator


class ArtifactGeneratorUnavailable(RuntimeError):
    pass


class FakeArtifactGenerator(VerificationArtifactGenerator):
    """Returns ``fake-artifact:<key>`` or raises, and records every key it was asked for."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Artifact generator unavailable"
        self.calls: list[str] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Artifact generator unavailable") -> None:
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def generate(self, key: str) -> str:
        self.calls.append(key)
        if not self.should_succeed:
            raise ArtifactGeneratorUnavailable(self.failure_reason)
        return f"fake-artifact:{key}"
