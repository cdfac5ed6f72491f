from typing import Any


class SmsRuResponse:
    def __init__(
        self, status: str, id: str | None = None, phone: str | None = None
    ) -> None:
        self.status = status
        self.id = id
        self.phone = phone

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "id": self.id,
            "phone": self.phone,
        }

    def __repr__(self) -> str:
        return f"<SmsRuResponse status={self.status} id={self.id} phone={self.phone}>"
