import re
import secrets
import time

_OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")


class InvalidIdError(ValueError):
    def __init__(self, value: str):
        super().__init__(f"'{value}' is not a valid id; expected 24 hex characters")
        self.value = value


def new_object_id() -> str:
    # 4-byte timestamp + 8 random bytes, so ids sort roughly by creation time
    return f"{int(time.time()):08x}{secrets.token_hex(8)}"


def is_valid_id(value: str) -> bool:
    return bool(_OBJECT_ID_RE.match(value or ""))


def ensure_valid_id(value: str) -> str:
    if not is_valid_id(value):
        raise InvalidIdError(value)
    return value.lower()
