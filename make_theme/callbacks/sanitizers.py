"""Built-in sanitize callbacks.

Each sanitizer takes the raw value first. Sanitizers that need more context
(``choice``) take extra positional parameters, which callers inject through
the sanitize-parameters filter.
"""

import math
import re
from typing import Any, Callable

from make_theme.undefined import UNDEFINED

_KEY_DISALLOWED = re.compile(r"[^a-z0-9_\-]")
_TAGS = re.compile(r"<[^>]*>")
_WHITESPACE = re.compile(r"\s+")
_HEX_COLOR = re.compile(r"^#([A-Fa-f0-9]{3}){1,2}$")
# A dotted prefix or one followed by digits is a host (example.com:8080, localhost:80)
_URL_SCHEME = re.compile(r"^([A-Za-z][A-Za-z0-9+\-]*):(?!\d)")

ALLOWED_URL_SCHEMES = ("http", "https", "ftp", "ftps", "mailto", "tel")


def sanitize_key(value: Any) -> str:
    """Lower-case a key and strip everything except a-z, 0-9, dash and underscore."""
    return _KEY_DISALLOWED.sub("", str(value).lower())


def intval(value: Any) -> int:
    """Convert to int the lenient way: leading digits win, junk becomes 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = re.match(r"^\s*([+-]?\d+)", str(value))
    return int(match.group(1)) if match else 0


def absint(value: Any) -> int:
    """Non-negative integer."""
    return abs(intval(value))


def floatval(value: Any) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    match = re.match(r"^\s*([+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?)", str(value))
    return float(match.group(1)) if match else 0.0


def boolean(value: Any) -> bool:
    """Truthiness with the string 'false' treated as False."""
    if isinstance(value, str) and value.strip().lower() in ("false", "0", "", "no", "off"):
        return False
    return bool(value)


def text(value: Any) -> str:
    """Plain single-line text: tags removed, whitespace collapsed."""
    stripped = _TAGS.sub("", str(value))
    return _WHITESPACE.sub(" ", stripped).strip()


def _url_scheme(candidate: str) -> str:
    """The scheme prefix, or "" when the prefix is really host:port."""
    match = _URL_SCHEME.match(candidate)
    return match.group(1).lower() if match else ""


def url(value: Any) -> str:
    """URL with an allowed scheme, or an empty string."""
    candidate = str(value).strip()
    if not candidate:
        return ""
    scheme = _url_scheme(candidate)
    if scheme and scheme not in ALLOWED_URL_SCHEMES:
        return ""
    if not scheme and not candidate.startswith(("/", "#", "?")):
        candidate = f"http://{candidate}"
    return candidate.replace(" ", "%20")


def hex_color(value: Any):
    """'#abc' or '#aabbcc', empty string for empty input, undefined otherwise."""
    candidate = str(value).strip()
    if candidate == "":
        return ""
    if _HEX_COLOR.match(candidate):
        return candidate
    return UNDEFINED


def choice(value: Any, choices=(), default: Any = UNDEFINED):
    """The matching allowed choice, else the default.

    Form input arrives as strings, so "2" matches the choice 2.
    """
    for allowed in choices:
        if value == allowed or str(value) == str(allowed):
            return allowed
    return default


BUILTIN_SANITIZERS: dict[str, Callable] = {
    "sanitize_key": sanitize_key,
    "intval": intval,
    "absint": absint,
    "floatval": floatval,
    "boolean": boolean,
    "text": text,
    "url": url,
    "hex_color": hex_color,
    "choice": choice,
}
