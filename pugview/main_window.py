# pugview/main_window.py
from PySide6.QtCore import QUrl
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QLineEdit, QMainWindow, QToolBar

from .url_paths import url_from_path

class MainWindow(QMainWindow):
    def __init__(self, start_url: str | None = None, scheme: str = "pug", parent=None):
        super().__init__(parent)
        self.setWindowTitle("pugview")
        self.resize(1024, 768)
        self.scheme = scheme

        self.address_bar = QLineEdit()
        self.address_bar.returnPressed.connect(self._on_submit)
        toolbar = QToolBar()
        toolbar.addWidget(self.address_bar)
        self.addToolBar(toolbar)

        self.view = QWebEngineView()
        self.view.urlChanged.connect(self._on_url_changed)
        self.view.titleChanged.connect(self.setWindowTitle)
        self.setCentralWidget(self.view)

        if start_url:
            self.navigate_to(start_url)

    def to_url(self, text: str) -> str:
        url = url_from_path(text)
        # typed paths become file:// URLs; move them onto the intercepted scheme
        if self.scheme != "file" and url.startswith("file://"):
            url = f"{self.scheme}://{url[len('file://'):]}"
        return url

    def navigate_to(self, text: str) -> None:
        self.view.setUrl(QUrl(self.to_url(text)))

    def _on_submit(self):
        self.navigate_to(self.address_bar.text())

    def _on_url_changed(self, qurl):
        self.address_bar.setText(qurl.toString())
