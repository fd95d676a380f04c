# pugview/host/backend.py
from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..models.response import Response

RequestHandler = Callable[[str], Response]
InterceptCallback = Callable[[Optional[Exception]], None]

class HostRuntime(ABC):
    # scheme setup() intercepts when the caller names none
    default_scheme = "file"

    @abstractmethod
    def is_ready(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def when_ready(self, callback: Callable[[], None]) -> None:
        raise NotImplementedError

    @abstractmethod
    def intercept(self, scheme: str, handle: RequestHandler, callback: InterceptCallback) -> None:
        """Install ``handle`` as the responder for ``scheme``.

        ``callback`` is called once afterwards with ``None`` on success or
        the error that prevented the install.
        """
        raise NotImplementedError
