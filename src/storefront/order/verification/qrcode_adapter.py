"""QR code adapter: encodes the placement key as an SVG QR code ``data:`` URL."""

import base64

import qrcode
from qrcode.constants import ERROR_CORRECT_M
from qrcode.image.svg import SvgPathImage

from storefront.order.verification.port import VerificationArtifactGenerator

DATA_URL_PREFIX = "data:image/svg+xml;base64,"


class QRCodeArtifactGenerator(VerificationArtifactGenerator):
    def __init__(self, box_size: int = 10, border: int = 4) -> None:
        self.box_size = box_size
        self.border = border

    def generate(self, key: str) -> str:
        qr = qrcode.QRCode(
            error_correction=ERROR_CORRECT_M,
            box_size=self.box_size,
            border=self.border,
            image_factory=SvgPathImage,
        )
        qr.add_data(key)
        qr.make(fit=True)
        svg = qr.make_image().to_string()
        return DATA_URL_PREFIX + base64.b64encode(svg).decode("ascii")
