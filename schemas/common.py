# schemas/common.py
from typing import Any, Union

from pydantic import AfterValidator, BaseModel

# Ids arrive as JSON numbers or strings; anything that is not a positive
# integer is answered as "not found" by the services.
RawId = Union[int, str]


class MessageOut(BaseModel):
    message: str


def reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("may not be null")
    return value


# Partial updates of required columns: omitting the field is fine, explicit null is not
NotNull = AfterValidator(reject_null)
