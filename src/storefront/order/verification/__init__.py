"""Verification artifact generator factory.

Provides get_generator() / set_generator() to swap implementations:
- QRCodeArtifactGenerator when ``ORDER_VERIFICATION_ARTIFACTS`` is on
- FakeArtifactGenerator for tests
- None (no artifact) otherwise
"""

from storefront.config import get_settings
from storefront.order.verification.port import VerificationArtifactGenerator
from storefront.order.verification.qrcode_adapter import QRCodeArtifactGenerator

_current_generator: VerificationArtifactGenerator | None = None


def get_generator() -> VerificationArtifactGenerator | None:
    """Return the active generator, or None when artifacts are switched off."""
    global _current_generator
    if _current_generator is None and get_settings().verification_artifacts_enabled:
        _current_generator = QRCodeArtifactGenerator()
    return _current_generator


def set_generator(generator: VerificationArtifactGenerator | None) -> None:
    """Override the active generator (useful for tests)."""
    global _current_generator
    _current_generator = generator


def reset_generator() -> None:
    """Reset to the settings-driven default."""
    global _current_generator
    _current_generator = None
