# pugview/url_paths.py
import os
import sys
import urllib.parse
from pathlib import Path

def path_from_url(url: str, platform: str | None = None) -> str:
    """Return the local filesystem path named by a file URL.

    The percent-decoded path component is used as is, except on Windows:
    there a URL without host (``file:///c:/page.pug``) decodes to
    ``/c:/page.pug`` and the leading slash is dropped.
    """
    if platform is None:
        platform = sys.platform
    parsed = urllib.parse.urlparse(url)
    path = urllib.parse.unquote(parsed.path)
    if platform == "win32" and not parsed.netloc.strip():
        path = path[1:]
    return path

def url_from_path(text: str) -> str:
    text = text.strip()
    if "://" in text:
        return text
    return Path(os.path.abspath(os.path.expanduser(text))).as_uri()
