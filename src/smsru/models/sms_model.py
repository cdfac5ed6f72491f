from datetime import datetime, timezone

from pydantic import BaseModel, Field, model_validator
from typing_extensions import Annotated, Self


class Sms(BaseModel):
    to: Annotated[str, Field(strict=True)] = ""
    text: str = ""
    multi: dict[str, str] = Field(default_factory=dict)
    sender: str = ""
    time: datetime | None = None
    partner_id: int = 0
    test: bool = False
    translit: bool = False

    @model_validator(mode="after")
    def check_recipient(self) -> Self:
        if not self.to and not self.multi:
            raise ValueError("either 'to' or a non-empty 'multi' must be set")
        return self

    def to_params(self, now: datetime | None = None) -> dict[str, str]:
        """Build the query parameters of a ``/sms/send`` call.

        When ``multi`` is non-empty the message is sent in batch mode and
        ``to``/``text`` are ignored. ``time`` is only sent when it lies
        strictly in the future relative to ``now``.
        """
        params: dict[str, str] = {}

        if self.multi:
            for to, text in self.multi.items():
                params[f"multi[{to}]"] = text
        else:
            params["to"] = self.to
            params["text"] = self.text

        if self.sender:
            params["from"] = self.sender

        if self.partner_id > 0:
            params["partner_id"] = str(self.partner_id)

        if self.test:
            params["test"] = "1"

        if self.time is not None:
            if now is None:
                now = (
                    datetime.now()
                    if self.time.tzinfo is None
                    else datetime.now(timezone.utc)
                )
            if self.time > now:
                params["time"] = str(int(self.time.timestamp()))

        if self.translit:
            params["translit"] = "1"

        return params
