"""URL normalization for menu comparison."""

from typing import Optional


def normalize_url(url: Optional[str]) -> str:
    """Normalize a menu link so HTML hrefs and JSON urls compare equal.

    ``#`` (and an empty or missing href) stays ``#``. Everything else becomes
    an absolute, directory-style path: ``about.html``, ``/about/index.html``
    and ``/about`` all normalize to ``/about/``, and a bare ``index.html`` to
    ``/``. The result is a fixed point, so normalizing twice changes nothing.
    """
    if not url or url == "#":
        return "#"

    if not url.startswith("/"):
        url = "/" + url

    if url.endswith("/index.html"):
        url = url[: -len("index.html")]
    elif url.endswith(".html"):
        url = url[: -len(".html")] + "/"

    if not url.endswith("/"):
        url += "/"
    return url
