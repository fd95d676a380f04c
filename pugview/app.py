# pugview/app.py
import sys

from PySide6.QtWidgets import QApplication

from .host.qt_backend import register_scheme
from .interceptor import setup
from .lifecycle import application_ready
from .main_window import MainWindow
from .settings import load_settings
from .utils.logging import configure_root

class PugViewApp(QApplication):
    def __init__(self, argv):
        super().__init__(argv)
        self.setApplicationName("pugview")
        application_ready.fire()

def main(argv=None):
    argv = sys.argv if argv is None else argv
    settings = load_settings()
    configure_root(settings.get("log_level", "INFO"))

    scheme = settings.get("scheme", "pug")
    pug = settings.get("pug", {})
    register_scheme(scheme)
    # host is not ready yet, registration waits for PugViewApp
    setup(pug.get("options"), pug.get("locals"), scheme=scheme)

    app = PugViewApp(argv)
    win = MainWindow(start_url=argv[1] if len(argv) > 1 else None, scheme=scheme)
    win.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
