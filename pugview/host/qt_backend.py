# pugview/host/qt_backend.py
from typing import Callable, Dict

from PySide6.QtCore import QBuffer, QByteArray, QCoreApplication, QIODevice
from PySide6.QtWebEngineCore import (
    QWebEngineProfile, QWebEngineUrlRequestJob,
    QWebEngineUrlScheme, QWebEngineUrlSchemeHandler,
)

from ..lifecycle import application_ready
from ..models.response import Failure
from .. import net_errors
from .backend import HostRuntime, InterceptCallback, RequestHandler

DEFAULT_MIME_TYPE = "application/octet-stream"
BUILTIN_SCHEMES = {"file", "http", "https", "qrc", "data", "about", "blob", "ftp"}

_JOB_ERRORS = {
    net_errors.FILE_NOT_FOUND: QWebEngineUrlRequestJob.Error.UrlNotFound,
    net_errors.FAILED: QWebEngineUrlRequestJob.Error.RequestFailed,
}

def register_scheme(name: str) -> None:
    # QtWebEngine only accepts custom schemes before the QApplication exists
    if name in BUILTIN_SCHEMES:
        return
    scheme = QWebEngineUrlScheme(name.encode())
    scheme.setSyntax(QWebEngineUrlScheme.Syntax.Path)
    scheme.setFlags(QWebEngineUrlScheme.Flag.LocalScheme
                    | QWebEngineUrlScheme.Flag.LocalAccessAllowed)
    QWebEngineUrlScheme.registerScheme(scheme)

class ResolverSchemeHandler(QWebEngineUrlSchemeHandler):
    def __init__(self, handle: RequestHandler, parent=None):
        super().__init__(parent)
        self._handle = handle

    def requestStarted(self, job) -> None:
        result = self._handle(job.requestUrl().toString())
        if isinstance(result, Failure):
            job.fail(_JOB_ERRORS.get(result.code, QWebEngineUrlRequestJob.Error.RequestFailed))
            return
        # parented to the job so it lives exactly as long as the request
        buffer = QBuffer(job)
        buffer.setData(QByteArray(result.data))
        buffer.open(QIODevice.OpenModeFlag.ReadOnly)
        mime_type = result.mime_type or DEFAULT_MIME_TYPE
        job.reply(QByteArray(mime_type.encode()), buffer)

class QtWebEngineHost(HostRuntime):
    # QtWebEngine refuses handlers for its internal schemes, file:// included
    default_scheme = "pug"

    def __init__(self, profile: QWebEngineProfile | None = None):
        self._profile = profile
        self._handlers: Dict[str, ResolverSchemeHandler] = {}

    @property
    def profile(self) -> QWebEngineProfile:
        if self._profile is None:
            self._profile = QWebEngineProfile.defaultProfile()
        return self._profile

    def is_ready(self) -> bool:
        return application_ready.is_set or QCoreApplication.instance() is not None

    def when_ready(self, callback: Callable[[], None]) -> None:
        application_ready.connect(callback)

    def intercept(self, scheme: str, handle: RequestHandler, callback: InterceptCallback) -> None:
        key = QByteArray(scheme.encode())
        try:
            if self.profile.urlSchemeHandler(key) is not None:
                raise RuntimeError(f"scheme '{scheme}' is already intercepted")
            handler = ResolverSchemeHandler(handle, self.profile)
            self.profile.installUrlSchemeHandler(key, handler)
            # Qt only warns when it refuses a handler
            if self.profile.urlSchemeHandler(key) is not handler:
                raise RuntimeError(f"QtWebEngine refused a handler for scheme '{scheme}'")
        except Exception as exc:
            callback(exc)
            return
        self._handlers[scheme] = handler
        callback(None)
