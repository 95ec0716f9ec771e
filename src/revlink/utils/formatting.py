"""Rendering of resolved URLs for different output formats."""

import html

from revlink.core.exceptions import ConfigurationError

_LATEX_SPECIALS = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

FORMAT_ALIASES = {
    "markdown": "md",
    "text": "ascii",
}


def escape_latex(text: str) -> str:
    return "".join(_LATEX_SPECIALS.get(char, char) for char in text)


def _html(url: str, description: str) -> str:
    return f'<a href="{html.escape(url, quote=True)}">{html.escape(description)}</a>'


def _markdown(url: str, description: str) -> str:
    label = description.replace("[", r"\[").replace("]", r"\]")
    return f"[{label}]({url})"


def _latex(url: str, description: str) -> str:
    escaped_url = url.replace("%", r"\%").replace("#", r"\#")
    return f"\\href{{{escaped_url}}}{{{escape_latex(description)}}}"


def _texinfo(url: str, description: str) -> str:
    return f"@uref{{{url},{description}}}"


def _org(url: str, description: str) -> str:
    if description == url:
        return f"[[{url}]]"
    return f"[[{url}][{description}]]"


def _ascii(url: str, description: str) -> str:
    if description == url:
        return url
    return f"{description} ({url})"


FORMATTERS = {
    "html": _html,
    "md": _markdown,
    "latex": _latex,
    "texinfo": _texinfo,
    "org": _org,
    "ascii": _ascii,
}


def normalize_format(fmt: str) -> str:
    key = fmt.strip().lower()
    key = FORMAT_ALIASES.get(key, key)
    if key not in FORMATTERS:
        raise ConfigurationError(
            f"Unknown export format: {fmt}",
            details={"format": fmt, "supported": sorted(FORMATTERS)},
        )
    return key


def format_link(url: str, description: str | None, fmt: str) -> str:
    """Render ``url`` as a hyperlink in the given output format.

    The description defaults to the URL itself.
    """
    return FORMATTERS[normalize_format(fmt)](url, description or url)
