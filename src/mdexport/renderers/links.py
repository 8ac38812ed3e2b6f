#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/renderers/links.py
"""Link and image target rewriting.

Internal references become wikilinks. The alias goes after the target
(``[[target|alias]]``), the reverse of the reading order of a Markdown link.
Paths inside the vault become vault-relative wikilinks, and media files among
them become embeds (``![[...]]``). Everything else stays a standard Markdown
link or image.

"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import unquote

from mdexport.constants import SVG_BASE64_URI_PREFIX, SVG_DATA_URI_PREFIX
from mdexport.options.markdown import MarkdownExportOptions
from mdexport.utils.layout import b64encode_text

logger = logging.getLogger(__name__)


def wikilink(target: str, alias: Optional[str] = None, embed: bool = False) -> str:
    """Format a wikilink, with ``|alias`` when the alias differs from the target."""
    prefix = "!" if embed else ""
    if alias is None or alias == target:
        return f"{prefix}[[{target}]]"
    return f"{prefix}[[{target}|{alias}]]"


def strip_vault_root(path: str, vault_root: str) -> str:
    """Remove the vault prefix and the first doubled slash left behind."""
    return path.replace(vault_root, "", 1).replace("//", "/", 1)


def is_media_path(path: str, options: MarkdownExportOptions) -> bool:
    return any(path.endswith(ext) for ext in options.media_extensions)


def in_vault(path: str, options: MarkdownExportOptions) -> bool:
    return bool(options.vault_root) and path.startswith(options.vault_root)


def rewrite_link(href: Optional[str], text: str, options: MarkdownExportOptions) -> str:
    """Render an anchor as a wikilink, embed, link or autolink.

    Parameters
    ----------
    href : str or None
        Raw link target
    text : str
        Already-rendered link text
    options : MarkdownExportOptions
        Supplies the vault root and media extensions

    Returns
    -------
    str
        Markdown for the link

    Examples
    --------
        >>> rewrite_link("#Some%20Note", "Some Note", MarkdownExportOptions())
        '[[Some Note]]'
        >>> rewrite_link("#Target", "label", MarkdownExportOptions())
        '[[Target|label]]'
        >>> rewrite_link("https://example.com", "https://example.com", MarkdownExportOptions())
        '<https://example.com>'

    """
    if not href or href.startswith("#"):
        # no target (missing href or a bare "#") links to the page named by the text
        target = unquote((href or "").removeprefix("#")) or text
        return wikilink(target, text)

    if in_vault(href, options):
        target = unquote(strip_vault_root(href, options.vault_root))
        embed = is_media_path(href, options)
        if text and text == href:
            return wikilink(target, embed=embed)
        return f"{'!' if embed else ''}[[{target}|{text}]]"

    if text and text != href:
        return f"[{text}]({href})"
    return f"<{href}>"


def rewrite_image(src: Optional[str], caption: Optional[str], options: MarkdownExportOptions) -> str:
    """Render an image as an embed or standard image.

    Inline SVG data URIs are re-encoded as base64 so that viewers which
    reject raw ``data:image/svg+xml,`` URIs still display them.

    Parameters
    ----------
    src : str or None
        Image source
    caption : str or None
        Image title, used as embed alias or alt text
    options : MarkdownExportOptions
        Supplies the vault root

    Returns
    -------
    str
        Markdown for the image

    """
    src = src or ""
    caption = caption or ""

    if src.startswith(SVG_DATA_URI_PREFIX):
        svg = unquote(src[len(SVG_DATA_URI_PREFIX) :])
        src = SVG_BASE64_URI_PREFIX + b64encode_text(svg)
        logger.debug("Re-encoded inline SVG image (%d chars of markup)", len(svg))
    elif in_vault(src, options):
        path = strip_vault_root(src, options.vault_root)
        if caption:
            return f"![[{path}|{caption}]]"
        return f"![[{path}]]"

    return f"![{caption}]({src})"


__all__ = ["wikilink", "strip_vault_root", "is_media_path", "in_vault", "rewrite_link", "rewrite_image"]
