from __future__ import annotations

import posixpath
import re

from ccwebcontent.core.files import normalize_logical_path

IMS_CC_FILEBASE = "$IMS-CC-FILEBASE$"

_ATTR_RE = re.compile(
    r"""(?P<prefix>\b(?:src|href)\s*=\s*)(?P<quote>["'])(?P<url>[^"']*)(?P=quote)""",
    re.IGNORECASE,
)
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")


class UrlRewriter:
    """Point relative ``src``/``href`` links in HTML bodies at the exported file base.

    Relative links are resolved against the directory of ``base_href``, the
    cartridge path of the document they appear in. Absolute URLs,
    protocol-relative and fragment-only links, values that already carry a
    ``$...$`` token, and links climbing above the package root are left
    untouched.
    """

    def __init__(self, file_base_token: str = IMS_CC_FILEBASE) -> None:
        self.file_base_token = file_base_token

    def __call__(self, html: str, base_href: str | None = None) -> str:
        return self.rewrite(html, base_href)

    def rewrite(self, html: str, base_href: str | None = None) -> str:
        base_dir = posixpath.dirname(normalize_logical_path(base_href)) if base_href else ""

        def _replace(match: re.Match[str]) -> str:
            url = match.group("url").strip()
            if not self._is_relative(url):
                return match.group(0)
            target = self._resolve(url, base_dir)
            if target is None:
                return match.group(0)
            quote = match.group("quote")
            return f"{match.group('prefix')}{quote}{self.file_base_token}/{target}{quote}"

        return _ATTR_RE.sub(_replace, html)

    @staticmethod
    def _is_relative(url: str) -> bool:
        if not url or url.startswith(("#", "//", "$")):
            return False
        return _SCHEME_RE.match(url) is None

    @staticmethod
    def _resolve(url: str, base_dir: str) -> str | None:
        split_at = min((idx for idx in (url.find("?"), url.find("#")) if idx != -1), default=len(url))
        path, suffix = url[:split_at], url[split_at:]
        if path.startswith("/"):
            # Root-relative links point at the package root, not the document directory.
            base_dir = ""
        normalized = normalize_logical_path(path)
        if not normalized:
            return None
        cleaned = posixpath.normpath(posixpath.join(base_dir, normalized))
        if cleaned in (".", "..") or cleaned.startswith("../"):
            return None
        return f"{cleaned}{suffix}"
