"""Utility for linking one site page to another."""

import posixpath


def relative_url(from_path: str, to_path: str) -> str:
    """Compute the URL of ``to_path`` relative to the page at ``from_path``.

    Both paths are site-root relative, e.g. ``guide/getting-started.md``; a
    leading ``/`` is accepted and means the same thing.
    """
    # Anchor both at the site root so relpath never consults the working dir
    from_dir = "/" + posixpath.dirname(from_path.lstrip("/"))
    rel = posixpath.relpath("/" + to_path.lstrip("/"), from_dir)
    # ./Foo.html rather than Foo.html for same-directory and downward links
    return rel if rel.startswith("..") else f"./{rel}"
