# pugview/models/response.py
from dataclasses import dataclass
from typing import Optional, Union

@dataclass(frozen=True)
class Payload:
    data: bytes
    mime_type: Optional[str] = None   # None when the extension is unknown

@dataclass(frozen=True)
class Failure:
    code: int                         # chromium net error, see net_errors.py

Response = Union[Payload, Failure]
