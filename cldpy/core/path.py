"""Public identifier derivation from local paths."""
import os
from typing import Optional


def ensure_trailing_slash(dirname: str) -> str:
    """Adds a missing trailing / at the end of a directory name."""
    if not dirname.endswith('/'):
        dirname += '/'
    return dirname


def _is_within(path: str, base: str) -> bool:
    try:
        return os.path.commonpath([path, base]) == base
    except ValueError:
        # Different drives on Windows
        return False


def clean_asset_name(path: str, base_path: Optional[str] = None, prepend_path: Optional[str] = None) -> str:
    """
    Returns an asset name from a local path.

    Without a base path the name is the parent directory name and the file
    name. With a base path it is the path relative to that directory. The
    prefix is prepended, the extension is stripped once and separators are
    turned into forward slashes.

    The combination
        path=/tmp/css/default.css
        base_path=/tmp/
        prepend_path=new/
    will return
        new/css/default

    Args:
        path: Local file path
        base_path: Directory the name is relative to (empty for none)
        prepend_path: Remote prefix

    Returns:
        Public identifier
    """
    path = os.path.abspath(path.strip())
    base_path = (base_path or '').strip()
    prepend_path = (prepend_path or '').strip()

    if not base_path:
        parent, filename = os.path.split(path)
        grandparent = os.path.basename(parent)
        name = os.path.join(grandparent, filename) if grandparent else filename
    else:
        base_path = os.path.abspath(base_path)
        if _is_within(path, base_path):
            name = os.path.relpath(path, base_path)
        else:
            name = path
        name = name.lstrip(os.sep)

    name = os.path.splitext(name)[0]

    if prepend_path:
        prepend_path = ensure_trailing_slash(prepend_path.lstrip(os.sep).lstrip('/'))

    return (prepend_path + name).replace(os.sep, '/')
