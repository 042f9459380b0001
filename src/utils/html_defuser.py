"""Defuse HTML fragments before rendering them unescaped."""

import html
import logging
from decimal import Decimal
from fractions import Fraction
from typing import Any

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

_NUMBER_TYPES = (int, float, complex, Decimal, Fraction)


class HtmlDefuser:
    """Remove ``<script>`` tags and ``onXxx`` / ``javascript`` attributes.

    This is a narrow filter, not an allowlist sanitizer. Attribute values are
    matched against the lowercase literal ``javascript`` only, so
    ``title="JavaScript Guide"`` survives while ``class="nojavascript"`` does not.
    Only the contents of the parsed ``<body>`` are returned, like ``innerHTML``.
    """

    _REMOVE_TAGS = ["script"]

    def __init__(self):
        self.logger = logging.getLogger("HtmlDefuser")

    # ── helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _is_dangerous(name: str, value: Any) -> bool:
        """True for event-handler attributes or values mentioning javascript."""
        if name.startswith("on"):
            return True
        return value is not None and "javascript" in str(value)

    # ── public ───────────────────────────────────────────────────────

    def defuse(self, value: Any) -> Any:
        """Return *value* in a form that is safe to output without escaping.

        ``None`` becomes ``""``, numbers are passed through untouched so the
        caller's number formatting still applies, and any other non-string
        becomes a ``[type]`` placeholder.
        """
        if value is None:
            return ""
        if isinstance(value, bool):
            return "[bool]"
        if isinstance(value, _NUMBER_TYPES):
            return value
        if not isinstance(value, str):
            return f"[{type(value).__name__}]"

        try:
            # html5lib builds the same tree a browser would, so comments, CDATA
            # sections and processing instructions cannot hide elements
            soup = BeautifulSoup(value, "html5lib", multi_valued_attributes=None)
        except ParserRejectedMarkup as e:
            self.logger.warning(f"Parser rejected markup, returning escaped text: {e}")
            return html.escape(value)

        body = soup.body or soup

        scripts = 0
        for tag in body.find_all(self._REMOVE_TAGS):
            tag.decompose()
            scripts += 1

        attrs_removed = 0
        for tag in body.find_all(True):
            for name in list(tag.attrs):
                if self._is_dangerous(name, tag.attrs[name]):
                    del tag[name]
                    attrs_removed += 1

        if scripts or attrs_removed:
            self.logger.debug(f"Removed {scripts} script tag(s) and {attrs_removed} attribute(s)")

        return body.decode_contents()

    def defuse_many(self, values: list[Any]) -> list[Any]:
        """Defuse every value of *values*, preserving order."""
        return [self.defuse(v) for v in values]


_default = HtmlDefuser()


def defuse(value: Any) -> Any:
    """Module-level shortcut for :meth:`HtmlDefuser.defuse`."""
    return _default.defuse(value)
