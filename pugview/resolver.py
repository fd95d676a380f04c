# pugview/resolver.py
import logging
import mimetypes
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .compiler import TEMPLATE_EXTENSION, compile_file
from .errors import error_page, is_template_error
from .models.response import Failure, Payload, Response
from . import net_errors
from .url_paths import path_from_url

logger = logging.getLogger(__name__)

HTML_MIME_TYPE = "text/html"

def guess_mime_type(extension: str) -> str | None:
    if not extension:
        return None
    mime_type, _ = mimetypes.guess_type("file" + extension, strict=False)
    return mime_type

class RequestResolver:
    """Turns one intercepted URL into one response.

    Template files are compiled and rendered with the options and locals
    captured here; everything else is served as raw bytes. ``handle`` never
    raises.
    """

    def __init__(self, options: Mapping[str, Any] | None = None,
                 locals: Mapping[str, Any] | None = None,
                 platform: str | None = None,
                 compile_file=compile_file):
        if locals is not None and not isinstance(locals, Mapping):
            raise TypeError(f"template locals must be a mapping, got {type(locals).__name__}")
        self.options = dict(options or {})
        self.locals = dict(locals or {})
        self.platform = platform
        self._compile_file = compile_file

    def handle(self, url: str) -> Response:
        try:
            return self._resolve(url)
        except Exception as exc:
            if is_template_error(exc):
                logger.debug("Template error for %s: %s", url, exc.code)
                return Payload(error_page(exc), HTML_MIME_TYPE)
            if isinstance(exc, FileNotFoundError):
                return Failure(net_errors.FILE_NOT_FOUND)
            logger.debug("Request for %s failed", url, exc_info=True)
            return Failure(net_errors.FAILED)

    def _resolve(self, url: str) -> Response:
        path = path_from_url(url, self.platform)
        content = Path(path).read_bytes()
        ext = os.path.splitext(path)[1]

        if ext == TEMPLATE_EXTENSION:
            render = self._compile_file(path, self.options, source=content)
            return Payload(render(self.locals).encode("utf-8"), HTML_MIME_TYPE)
        return Payload(content, guess_mime_type(ext))
