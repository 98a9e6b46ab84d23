from __future__ import annotations

import logging

from app.application.dto.billing import CreatePixPaymentInput, CreatePixPaymentOutput
from app.application.ports.auth_port import AuthPort
from app.application.ports.qr_code_port import QrCodePort
from app.domain.exceptions import UserNotFoundError
from app.domain.services.pix_code import PixConfig, generate_pix_code, generate_transaction_id
from app.domain.services.upgrade_pricing import calculate_price


logger = logging.getLogger(__name__)


class CreatePixPaymentUseCase:
    """Gera o codigo PIX copia-e-cola para a compra de um plano.

    O pagamento e conferido manualmente: nada aqui altera o plano do usuario.
    """

    def __init__(
        self,
        *,
        auth_port: AuthPort,
        qr_code_port: QrCodePort,
        pix_config: PixConfig,
    ):
        self._auth_port = auth_port
        self._qr_code_port = qr_code_port
        self._pix_config = pix_config

    def execute(self, command: CreatePixPaymentInput) -> CreatePixPaymentOutput:
        user = self._auth_port.get_user_by_id(user_id=command.user_id)
        if user is None:
            raise UserNotFoundError("User not found.")

        quote = calculate_price(command.plan_type, command.months)
        transaction_id = generate_transaction_id()
        pix_code = generate_pix_code(quote.final_price, self._pix_config, transaction_id=transaction_id)

        logger.info(
            "create_pix_payment: code_generated user_id=%s plan_type=%s months=%s amount=%s txid=%s",
            user.id,
            quote.plan_type,
            quote.months,
            quote.final_price,
            transaction_id,
        )

        return CreatePixPaymentOutput(
            plan_type=quote.plan_type,
            months=quote.months,
            original_price=quote.original_price,
            amount=quote.final_price,
            savings=quote.savings,
            discount_percent=quote.discount_percent,
            transaction_id=transaction_id,
            pix_code=pix_code,
            qr_code_data_url=self._qr_code_port.render_data_url(content=pix_code),
        )
