# pugview/errors.py
from markupsafe import escape

CODE_PREFIX = "PUG:"

class TemplateError(Exception):
    """Compiling or rendering a template file failed.

    ``code`` always starts with ``PUG:``; ``str()`` gives the location
    followed by the message, which is what the error page shows.
    """

    def __init__(self, code: str, message: str, filename: str | None = None,
                 lineno: int | None = None):
        super().__init__(message)
        if not code.startswith(CODE_PREFIX):
            code = CODE_PREFIX + code
        self.code = code
        self.message = message
        self.filename = filename
        self.lineno = lineno

    def __str__(self) -> str:
        location = self.filename or "<template>"
        if self.lineno:
            location = f"{location}:{self.lineno}"
        return f"{self.code} {location}\n\n{self.message}"

def is_template_error(exc: BaseException) -> bool:
    code = getattr(exc, "code", None)
    return isinstance(code, str) and code.startswith(CODE_PREFIX)

def error_page(exc: BaseException) -> bytes:
    # tab-size:1 keeps the caret lines of multi-line messages aligned
    return f'<pre style="tab-size:1">{escape(str(exc))}</pre>'.encode("utf-8")
