# pugview/compiler.py
import os
from pathlib import Path
from typing import Any, Callable, List, Mapping

from jinja2 import (
    BaseLoader, Environment, FileSystemLoader, StrictUndefined,
    TemplateNotFound, TemplateSyntaxError, Undefined, UndefinedError,
)
from jinja2 import TemplateError as JinjaTemplateError
from pypugjs.ext.jinja import PyPugJSExtension

from .errors import TemplateError

TEMPLATE_EXTENSION = ".pug"

RenderFunction = Callable[[Mapping[str, Any] | None], str]

# pypugjs inlines includes itself and raises a plain Exception with this text
_MISSING_INCLUDE = "Include path doesn't exist"

class _SourceLoader(BaseLoader):
    """Serves the requested template from memory, everything else from disk.

    ``searchpath`` mirrors FileSystemLoader: pypugjs resolves includes
    against ``searchpath[0]`` and falls back to the working directory
    when the loader has none.
    """

    def __init__(self, name: str, source: str, filename: str, searchpath: List[str]):
        self.name = name
        self.source = source
        self.filename = filename
        self.searchpath = searchpath
        self.fallback = FileSystemLoader(searchpath)

    def get_source(self, environment, template):
        if template == self.name:
            return self.source, self.filename, lambda: True
        return self.fallback.get_source(environment, template)

def _translate(exc: Exception, path: str, fallback_code: str) -> TemplateError:
    if isinstance(exc, TemplateSyntaxError):
        return TemplateError("SYNTAX_ERROR", exc.message or str(exc),
                             exc.filename or path, exc.lineno)
    if isinstance(exc, TemplateNotFound):
        return TemplateError("TEMPLATE_NOT_FOUND", f"Template not found: {exc.name}", path)
    if isinstance(exc, UndefinedError):
        return TemplateError("UNDEFINED", exc.message or str(exc), path)
    if isinstance(exc, JinjaTemplateError):
        return TemplateError(fallback_code, exc.message or str(exc), path)
    if _MISSING_INCLUDE in str(exc):
        return TemplateError("TEMPLATE_NOT_FOUND", str(exc), path)
    # pypugjs reports lexer/parser problems with plain exceptions
    message = f"{type(exc).__name__}: {exc}" if str(exc) else type(exc).__name__
    return TemplateError(fallback_code, message, path)

def _search_path(path: str, options: Mapping[str, Any]) -> List[str]:
    # the include root comes first: basedir when configured, else the template's directory
    template_dir = os.path.dirname(os.path.abspath(path))
    if options.get("basedir"):
        return [os.path.abspath(str(options["basedir"])), template_dir]
    return [template_dir]

def _environment(name: str, text: str, path: str, options: Mapping[str, Any]) -> Environment:
    env = Environment(
        loader=_SourceLoader(name, text, path, _search_path(path, options)),
        extensions=[PyPugJSExtension],
        autoescape=options.get("autoescape", True),
        undefined=StrictUndefined if options.get("strict") else Undefined,
    )
    env.globals.update(options.get("globals") or {})
    env.filters.update(options.get("filters") or {})
    return env

def compile_file(path: str, options: Mapping[str, Any] | None = None,
                 source: bytes | str | None = None) -> RenderFunction:
    """Compile the Pug template at ``path`` into a render function.

    ``source`` lets callers that already read the file skip a second read.
    Missing or unreadable files raise ``OSError`` untouched; every other
    compile or render failure is raised as ``TemplateError``.

    Recognized options: ``basedir``, ``autoescape``, ``strict``,
    ``globals`` and ``filters``. Other keys are ignored.
    """
    options = dict(options or {})
    if source is None:
        source = Path(path).read_bytes()
    name = os.path.basename(path)

    try:
        text = source.decode("utf-8") if isinstance(source, bytes) else source
        template = _environment(name, text, path, options).get_template(name)
    except OSError:
        raise
    except Exception as exc:
        raise _translate(exc, path, "COMPILE_ERROR") from exc

    def render(template_locals: Mapping[str, Any] | None = None) -> str:
        try:
            return template.render(dict(template_locals or {}))
        except OSError:
            raise
        except Exception as exc:
            raise _translate(exc, path, "RENDER_ERROR") from exc

    return render
