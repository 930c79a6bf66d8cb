"""Path normalization for summary entries.

Istanbul writes absolute paths; changed-file lists from git are relative to
the repository root. Stripping the checkout root makes the two comparable.
"""


def normalize_path(file_path: str, base_path: str) -> str:
    """Make ``file_path`` relative to ``base_path`` with forward slashes.

    The base only matches on a path component boundary, so ``/repo`` does not
    strip ``/repository/a.js``. When the base is empty or does not match, the
    path is returned unchanged.

    Normalizing an already-normalized path again is a no-op when the base is
    absolute, since the result is then relative. A relative base is not
    idempotent when the remainder repeats it: ``("src/src/a.js", "src")``
    gives ``src/a.js``, and normalizing that again gives ``a.js``.

    Examples:
        ("/home/runner/work/app/src/a.js", "/home/runner/work/app") -> "src/a.js"
        ("C:\\work\\app\\src\\a.js", "C:\\work\\app") -> "src/a.js"
        ("src/a.js", "/home/runner/work/app") -> "src/a.js"
    """
    if not base_path:
        return file_path

    path = file_path.replace("\\", "/")
    prefix = base_path.replace("\\", "/")
    if not prefix.endswith("/"):
        prefix += "/"

    if not path.startswith(prefix):
        return file_path

    relative = path[len(prefix) :].lstrip("/")
    # A path equal to the base itself names no file
    return relative or file_path
