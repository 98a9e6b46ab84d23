from __future__ import annotations

import base64
import io
from decimal import Decimal

import qrcode
from qrcode.image.pil import PilImage

from app.application.ports.qr_code_port import QrCodePort
from app.domain.services.pix_code import PixConfig, generate_pix_code


QR_TARGET_WIDTH_PX = 280
QR_BORDER_MODULES = 2


class QrCodeRenderer(QrCodePort):
    def __init__(self, *, target_width_px: int = QR_TARGET_WIDTH_PX, border: int = QR_BORDER_MODULES):
        self._target_width_px = target_width_px
        self._border = border

    def render_png(self, *, content: str) -> bytes:
        qr = qrcode.QRCode(
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            border=self._border,
            image_factory=PilImage,
        )
        qr.add_data(content)
        qr.make(fit=True)
        # box_size so the rendered image lands close to the target width.
        total_modules = qr.modules_count + 2 * self._border
        qr.box_size = max(1, self._target_width_px // total_modules)

        image = qr.make_image(fill_color="black", back_color="white")
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()

    def render_data_url(self, *, content: str) -> str:
        encoded = base64.b64encode(self.render_png(content=content)).decode("ascii")
        return f"data:image/png;base64,{encoded}"


def generate_pix_qr_code(
    amount: Decimal | int | float | str,
    config: PixConfig,
    transaction_id: str | None = None,
) -> str:
    pix_code = generate_pix_code(amount, config, transaction_id=transaction_id)
    return QrCodeRenderer().render_data_url(content=pix_code)
