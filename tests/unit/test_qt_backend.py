"""Unit tests for the QtWebEngine host and scheme handler."""

from pathlib import Path

import pytest

pytest.importorskip("PySide6.QtWebEngineCore", exc_type=ImportError)

from PySide6.QtCore import QObject, QUrl  # noqa: E402
from PySide6.QtWebEngineCore import QWebEngineUrlRequestJob  # noqa: E402

from pugview.host.factory import get_host  # noqa: E402
from pugview.host import qt_backend  # noqa: E402
from pugview.host.qt_backend import QtWebEngineHost, ResolverSchemeHandler  # noqa: E402
from pugview.lifecycle import ReadySignal  # noqa: E402
from pugview.models.response import Failure, Payload  # noqa: E402
from pugview.resolver import RequestResolver  # noqa: E402


class FakeJob(QObject):
    """Stands in for QWebEngineUrlRequestJob."""

    def __init__(self, url: str) -> None:
        super().__init__()
        self._url = QUrl(url)
        self.failed = None
        self.replied = None

    def requestUrl(self) -> QUrl:
        return self._url

    def fail(self, error) -> None:
        self.failed = error

    def reply(self, mime_type, device) -> None:
        self.replied = (bytes(mime_type.data()), bytes(device.readAll().data()))


class FakeProfile(QObject):
    """Stands in for QWebEngineProfile; optionally refuses every handler."""

    def __init__(self, refuse: bool = False) -> None:
        super().__init__()
        self.refuse = refuse
        self.handlers: dict = {}

    def urlSchemeHandler(self, scheme):
        return self.handlers.get(bytes(scheme.data()))

    def installUrlSchemeHandler(self, scheme, handler) -> None:
        if not self.refuse:
            self.handlers[bytes(scheme.data())] = handler


class _NoApplication:
    @staticmethod
    def instance():
        return None


class TestResolverSchemeHandler:
    """Tests for translating resolver results into job calls."""

    def test_payload_replies(self) -> None:
        """Test payloads are delivered with their content type."""
        handler = ResolverSchemeHandler(lambda url: Payload(b"<p>x</p>", "text/html"))
        job = FakeJob("file:///tmp/a.pug")

        handler.requestStarted(job)

        assert job.replied == (b"text/html", b"<p>x</p>")
        assert job.failed is None

    def test_missing_mime_falls_back(self) -> None:
        """Test an absent content type is sent as octet-stream."""
        handler = ResolverSchemeHandler(lambda url: Payload(b"\x00", None))
        job = FakeJob("file:///tmp/blob")

        handler.requestStarted(job)

        assert job.replied == (b"application/octet-stream", b"\x00")

    def test_not_found(self) -> None:
        """Test -6 fails the job with UrlNotFound."""
        handler = ResolverSchemeHandler(lambda url: Failure(-6))
        job = FakeJob("file:///tmp/missing.pug")

        handler.requestStarted(job)

        assert job.failed == QWebEngineUrlRequestJob.Error.UrlNotFound

    def test_generic_failure(self) -> None:
        """Test -2 fails the job with RequestFailed."""
        handler = ResolverSchemeHandler(lambda url: Failure(-2))
        job = FakeJob("file:///tmp/a.js")

        handler.requestStarted(job)

        assert job.failed == QWebEngineUrlRequestJob.Error.RequestFailed

    def test_resolver_receives_request_url(self, site: Path) -> None:
        """Test the job URL is handed to the resolver."""
        handler = ResolverSchemeHandler(RequestResolver(locals={"title": "Hi"}).handle)
        job = FakeJob((site / "index.pug").as_uri())

        handler.requestStarted(job)

        mime_type, body = job.replied
        assert mime_type == b"text/html"
        assert b"<h1>Hi</h1>" in body


class TestFactory:
    """Tests for get_host."""

    def test_default_is_qt(self) -> None:
        """Test the default host is QtWebEngine."""
        assert isinstance(get_host(), QtWebEngineHost)

    def test_unknown_engine(self) -> None:
        """Test unknown engines are rejected."""
        with pytest.raises(ValueError):
            get_host("gecko")


class TestQtWebEngineHost:
    """Tests for QtWebEngineHost readiness and interception."""

    def test_default_scheme_is_custom(self) -> None:
        """Test the Qt host does not default to the internal file scheme."""
        assert QtWebEngineHost.default_scheme == "pug"

    def test_intercept_success(self) -> None:
        """Test a successful install reports no error and keeps the handler."""
        profile = FakeProfile()
        host = QtWebEngineHost(profile)
        errors = []

        host.intercept("pug", lambda url: Failure(-6), errors.append)

        assert errors == [None]
        assert isinstance(profile.handlers[b"pug"], ResolverSchemeHandler)

    def test_intercept_twice_reports_error(self) -> None:
        """Test a second install on the same scheme reports an error."""
        host = QtWebEngineHost(FakeProfile())
        errors = []

        host.intercept("pug", lambda url: Failure(-6), errors.append)
        host.intercept("pug", lambda url: Failure(-6), errors.append)

        assert errors[0] is None
        assert isinstance(errors[1], RuntimeError)
        assert "already intercepted" in str(errors[1])

    def test_refused_install_reports_error(self) -> None:
        """Test a handler Qt did not install is reported as an error."""
        host = QtWebEngineHost(FakeProfile(refuse=True))
        errors = []

        host.intercept("file", lambda url: Failure(-6), errors.append)

        assert len(errors) == 1
        assert isinstance(errors[0], RuntimeError)
        assert "refused" in str(errors[0])

    def test_ready_after_signal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test readiness follows the application-ready signal."""
        signal = ReadySignal()
        monkeypatch.setattr(qt_backend, "application_ready", signal)
        monkeypatch.setattr(qt_backend, "QCoreApplication", _NoApplication)
        host = QtWebEngineHost(FakeProfile())
        calls = []

        assert host.is_ready() is False
        host.when_ready(lambda: calls.append("ready"))
        assert calls == []

        signal.fire()

        assert host.is_ready() is True
        assert calls == ["ready"]
