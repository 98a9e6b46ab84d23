from __future__ import annotations

import base64
import io
import unittest
from decimal import Decimal

from PIL import Image

from app.domain.services.pix_code import PixConfig
from app.infrastructure.clients.qr_code_renderer import QrCodeRenderer, generate_pix_qr_code


PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


class QrCodeRendererTests(unittest.TestCase):
    def test_render_png_close_to_target_width(self):
        png = QrCodeRenderer().render_png(content="00020126380014br.gov.bcb.pix")

        self.assertTrue(png.startswith(PNG_MAGIC))
        width, height = Image.open(io.BytesIO(png)).size
        self.assertEqual(width, height)
        self.assertLessEqual(width, 280)
        self.assertGreater(width, 200)

    def test_pix_qr_code_is_png_data_url(self):
        config = PixConfig(key="pix@example.com", merchant_name="MYPROFILE", merchant_city="SAO PAULO")

        data_url = generate_pix_qr_code(Decimal("19.90"), config, transaction_id="MP0000000001")

        prefix = "data:image/png;base64,"
        self.assertTrue(data_url.startswith(prefix))
        self.assertTrue(base64.b64decode(data_url[len(prefix):]).startswith(PNG_MAGIC))


if __name__ == "__main__":
    unittest.main()
