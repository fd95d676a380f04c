# pugview/interceptor.py
import logging
from typing import Any, Mapping

from .host.backend import HostRuntime
from .resolver import RequestResolver

logger = logging.getLogger(__name__)

def _intercept_callback(error: Exception | None) -> None:
    if error is None:
        logger.info("Pug interceptor registered successfully")
    else:
        logger.error("Pug interceptor failed: %s", error)

def register(host: HostRuntime, resolver: RequestResolver, scheme: str) -> None:
    host.intercept(scheme, resolver.handle, _intercept_callback)

def setup(options: Mapping[str, Any] | None = None,
          locals: Mapping[str, Any] | None = None,
          host: HostRuntime | None = None,
          scheme: str | None = None) -> RequestResolver:
    """Serve ``scheme`` requests through a template-aware resolver.

    ``scheme`` defaults to the host's ``default_scheme``. Registration
    happens right away when the host is ready, otherwise once
    the host signals readiness. Calling this twice for the same scheme is
    reported by the host as a registration failure.
    """
    if host is None:
        from .host.factory import get_host
        host = get_host()
    if scheme is None:
        scheme = host.default_scheme
    resolver = RequestResolver(options, locals)

    if host.is_ready():
        register(host, resolver, scheme)
    else:
        host.when_ready(lambda: register(host, resolver, scheme))
    return resolver
