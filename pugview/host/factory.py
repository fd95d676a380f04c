# pugview/host/factory.py
from .backend import HostRuntime

def get_host(engine: str | None = None) -> HostRuntime:
    if engine is None:
        engine = "qt"
    engine = engine.lower()
    # Only QtWebEngine is implemented for now
    if engine == "qt":
        from .qt_backend import QtWebEngineHost
        return QtWebEngineHost()
    raise ValueError(f"Unknown host runtime: {engine}")
