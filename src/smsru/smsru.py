import logging
import re
from typing import Any

import requests

from smsru.config import SMSRU_API_URL, Settings, get_settings
from smsru.models.sms_model import Sms
from smsru.models.smsru import SmsRuResponse
from smsru.models.status_codes import describe, is_error

logger = logging.getLogger("smsru")

STATUS_LINE = re.compile(r"[+-]?[0-9]+")


class SmsRuError(Exception):
    pass


class NetworkError(SmsRuError):
    pass


class InternalError(SmsRuError):
    def __init__(self, message: str = "Internal Error") -> None:
        super().__init__(message)


class NoResponseError(SmsRuError):
    def __init__(self, message: str = "Something went wrong") -> None:
        super().__init__(message)


class ServiceError(SmsRuError):
    """The service answered with an error status code (200 and above)."""

    def __init__(self, code: int, description: str) -> None:
        super().__init__(f"Code: {code}; Status: {description}")
        self.code = code
        self.description = description


class SmsRu:
    def __init__(
        self,
        api_id: str,
        sender: str = "",
        base_url: str = SMSRU_API_URL,
        timeout: float | None = None,
    ):
        self._session = requests.Session()
        self._api_id = api_id
        self._timeout = timeout
        self.sender = sender
        self.base_url = base_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SmsRu":
        settings = settings or get_settings()
        if not settings.API_ID:
            raise ValueError("SMSRU_API_ID is not set")
        return cls(
            api_id=settings.API_ID,
            sender=settings.SENDER,
            base_url=settings.API_URL,
            timeout=settings.TIMEOUT,
        )

    def __enter__(self) -> "SmsRu":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def new_sms(self, to: str, text: str) -> Sms:
        return Sms(to=to, text=text, sender=self.sender)

    def get_request(self, endpoint: str, params: dict[str, str]) -> requests.Response:
        try:
            return self._session.get(
                url=self.base_url + endpoint,
                params=params,
                timeout=self._timeout,
                stream=True,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error: {e}")
            raise NetworkError(str(e)) from e

    def _read_lines(self, res: requests.Response) -> list[str]:
        try:
            return [
                line.decode("utf-8", errors="replace") for line in res.iter_lines()
            ]
        except requests.exceptions.RequestException as e:
            logger.error(f"Unable to read response body: {e}")
            raise InternalError() from e
        finally:
            res.close()

    def _make_request(
        self, endpoint: str, params: dict[str, str]
    ) -> tuple[SmsRuResponse, list[str]]:
        params["api_id"] = self._api_id
        logger.debug(
            f"GET {endpoint} with params: {sorted(k for k in params if k != 'api_id')}"
        )

        res = self.get_request(endpoint, params)
        lines = self._read_lines(res)
        if not lines:
            logger.error(f"Empty response from {endpoint}")
            raise NoResponseError()

        if STATUS_LINE.fullmatch(lines[0]):
            status = int(lines[0])
        else:
            # Non-numeric status lines count as code 0, i.e. success.
            logger.warning(f"Non-numeric status line from {endpoint}: {lines[0]!r}")
            status = 0

        if is_error(status):
            logger.warning(f"Error from server: {status} {describe(status)}")
            raise ServiceError(status, describe(status))

        return SmsRuResponse(status=describe(status)), lines

    def send_sms(self, sms: Sms) -> SmsRuResponse:
        res, lines = self._make_request("/sms/send", sms.to_params())

        # The id is always taken from line 1, also for batch sends.
        if len(lines) > 1:
            res.id = lines[1]
        else:
            logger.warning("Send response carries no message id")
            res.id = ""
        res.phone = sms.to
        return res

    def sms_status(self, id: str) -> SmsRuResponse:
        res, _ = self._make_request("/sms/status", {"id": id})
        res.id = id
        return res
