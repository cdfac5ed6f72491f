from types import MappingProxyType
from typing import Mapping

STATUS_CODES: Mapping[int, str] = MappingProxyType(
    {
        -1: "Not found",
        100: "Success",
        101: "The messege is passed to operator",
        102: "The message sent (in transit)",
        103: "The message was delivered",
        104: "Cannot be delivered: Time of life expired",
        105: "Cannot be delivered: deleted by operator",
        106: "Cannot be delivered: phone failure",
        107: "Cannot be delivered: unknown reason",
        108: "Cannot be delivered: rejected",
        130: "Cannot be delivered: Daily message limit on this number was exceeded",
        131: "Cannot be delivered: Same messages limit on this phone number in a minute was exceeded",
        132: "Cannot be delivered: Same messages limit on this phone number in a day was exceeded",
        200: "Wrong api_id",
        201: "Too low balance",
        202: "Wrong recipient",
        203: "The message has no text",
        204: "Sender name did not approve with administartion",
        205: "The message is too long (more than 8 sms)",
        206: "Daily message limit exceeded",
        207: "On this phone number (or one of them) must not send the messages, or you indicated more than 100 phone numbers",
        208: "Wrong time value",
        209: "You added this phone number (or one of them) in the stop-list",
        210: "You must use a POST, not a GET",
        211: "Method not found",
        212: "Text of message must be in UTF-8",
        220: "The service is not availiable now, try again later",
        230: "Daily message limit on this number was exceeded",
        231: "Same messages limit on this phone number in a minute was exceeded",
        232: "Same messages limit on this phone number in a day was exceeded",
        300: "Wrong token (maybe it was expired or your IP was changed)",
        301: "Wrong password, or user is not exist",
        302: "User was authorized, but account is not activate",
        901: "Wrong Url (should begin with 'http://')",
        902: "Callback is not defined",
    }
)

# Codes at or above this value are errors reported by the service.
ERROR_THRESHOLD = 200


def describe(code: int) -> str:
    return STATUS_CODES.get(code, "")


def is_error(code: int) -> bool:
    return code >= ERROR_THRESHOLD
