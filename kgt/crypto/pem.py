"""PEM envelope stripping and key file reading."""

from pathlib import Path

from kgt.core.errors import InvalidArgumentError


def strip_pem(pem: str) -> str:
    """Return the Base64 body enclosed by BEGIN/END marker lines.

    Any line containing ``BEGIN`` opens the body and any line containing
    ``END`` closes it; both marker lines are dropped. Body lines are
    trimmed and joined without separators, and lines outside a body are
    ignored. A PEM with no body lines yields an empty string.
    """
    parts: list[str] = []
    in_body = False
    for line in pem.splitlines():
        if "BEGIN" in line:
            in_body = True
            continue
        if "END" in line:
            in_body = False
            continue
        if in_body:
            parts.append(line.strip())
    return "".join(parts)


def read_pem_file(path: Path) -> str:
    """Read a PEM key file as UTF-8 text."""
    if not path.is_file():
        raise InvalidArgumentError(f"Key file not found: {path}")
    return path.read_text(encoding="utf-8")
