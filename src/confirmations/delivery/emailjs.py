"""EmailJS delivery provider.

Sends confirmations through the EmailJS REST API
(``POST /api/v1.0/email/send``) using a pre-built email template. The
template receives the flat parameters produced by
``RegistrationConfirmation.template_params()``.

Settings come from the environment:
    EMAILJS_SERVICE_ID, EMAILJS_TEMPLATE_ID, EMAILJS_PUBLIC_KEY
    EMAILJS_PRIVATE_KEY (optional, sent as accessToken)
"""

import os

import httpx
import structlog

from confirmations.delivery.port import ConfigurationStatus, DeliveryPort
from confirmations.registration.request import RegistrationConfirmation

logger = structlog.get_logger(__name__)

EMAILJS_BASE_URL = "https://api.emailjs.com"
SEND_PATH = "/api/v1.0/email/send"


class EmailJSProvider(DeliveryPort):
    """Production delivery provider backed by EmailJS."""

    def __init__(
        self,
        service_id: str | None,
        template_id: str | None,
        public_key: str | None,
        private_key: str | None = None,
        base_url: str = EMAILJS_BASE_URL,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.service_id = service_id
        self.template_id = template_id
        self.public_key = public_key
        self.private_key = private_key
        self.base_url = base_url
        self.timeout = timeout
        self._client = client

    @classmethod
    def from_env(cls) -> "EmailJSProvider":
        return cls(
            service_id=os.environ.get("EMAILJS_SERVICE_ID"),
            template_id=os.environ.get("EMAILJS_TEMPLATE_ID"),
            public_key=os.environ.get("EMAILJS_PUBLIC_KEY"),
            private_key=os.environ.get("EMAILJS_PRIVATE_KEY"),
        )

    def missing_settings(self) -> list[str]:
        settings = {
            "EMAILJS_SERVICE_ID": self.service_id,
            "EMAILJS_TEMPLATE_ID": self.template_id,
            "EMAILJS_PUBLIC_KEY": self.public_key,
        }
        return [name for name, value in settings.items() if not value]

    def configuration_status(self) -> ConfigurationStatus:
        missing = self.missing_settings()
        if missing:
            return ConfigurationStatus(
                configured=False,
                message=f"EmailJS is not configured. Missing: {', '.join(missing)}",
            )
        return ConfigurationStatus(
            configured=True,
            message="EmailJS is configured and ready to send emails.",
        )

    def _request_body(self, payload: RegistrationConfirmation) -> dict:
        body = {
            "service_id": self.service_id,
            "template_id": self.template_id,
            "user_id": self.public_key,
            "template_params": payload.template_params(),
        }
        if self.private_key:
            body["accessToken"] = self.private_key
        return body

    async def send_notification(self, payload: RegistrationConfirmation) -> bool:
        body = self._request_body(payload)

        if self._client is not None:
            response = await self._client.post(SEND_PATH, json=body)
        else:
            async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout) as client:
                response = await client.post(SEND_PATH, json=body)

        if response.status_code == 200:
            logger.info(
                "EmailJS accepted confirmation",
                confirmation_number=payload.confirmation_number,
            )
            return True

        logger.warning(
            "EmailJS rejected confirmation",
            confirmation_number=payload.confirmation_number,
            status_code=response.status_code,
            response_text=response.text,
        )
        return False
