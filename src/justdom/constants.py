from __future__ import annotations

# HTML5 void elements (no closing tag)
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "basefont",
        "bgsound",
        "br",
        "col",
        "embed",
        "frame",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Elements whose text children are serialized verbatim
RAWTEXT_ELEMENTS: frozenset[str] = frozenset(
    {
        "iframe",
        "noembed",
        "noframes",
        "noscript",
        "plaintext",
        "script",
        "style",
        "xmp",
    }
)

# Short namespace prefixes stored on element nodes, keyed by namespace URI
NAMESPACE_PREFIXES: dict[str, str] = {
    "http://www.w3.org/1999/xhtml": "html",
    "http://www.w3.org/2000/svg": "svg",
    "http://www.w3.org/1998/Math/MathML": "math",
}

# Characters separating tokens in class-like attribute values
ASCII_WHITESPACE: str = " \t\n\r\f"
