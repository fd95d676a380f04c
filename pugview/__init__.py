# pugview/__init__.py
from .errors import TemplateError
from .interceptor import setup
from .models.response import Failure, Payload
from . import net_errors
from .resolver import RequestResolver

__version__ = "0.1.0"

__all__ = [
    "Failure",
    "Payload",
    "RequestResolver",
    "TemplateError",
    "net_errors",
    "setup",
]
