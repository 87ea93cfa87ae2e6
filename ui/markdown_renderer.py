# ui/markdown_renderer.py
# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from markdown import markdown


@dataclass(frozen=True)
class MarkdownTheme:
    text: str = "#E5E7EB"
    muted: str = "#9CA3AF"
    border: str = "#374151"
    panel: str = "#111827"
    accent: str = "#60A5FA"


class MarkdownRenderer:
    """
    Convert MD -> HTML with inline CSS for tkinterweb.

    tkhtml understands a limited subset of CSS, so the stylesheet sticks to
    plain selectors and literal colors.
    """

    def __init__(self, theme: Optional[MarkdownTheme] = None):
        self.theme = theme or MarkdownTheme()

    def extensions(self) -> Tuple[List[str], Dict]:
        return ["extra", "sane_lists", "tables"], {}

    def css(self) -> str:
        t = self.theme
        return f"""
        body {{
          font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
          margin: 10px;
          color: {t.text};
          background: {t.panel};
          font-size: 13px;
          line-height: 1.5;
        }}
        h2 {{ font-size: 1.15em; margin: 0.2em 0 0.6em; }}
        p {{ margin: 0.5em 0; }}
        strong {{ color: {t.accent}; }}
        table {{
          border-collapse: collapse;
          width: 100%;
          margin: 0.6em 0;
          font-size: 0.95em;
        }}
        th, td {{
          border: 1px solid {t.border};
          padding: 4px 8px;
          text-align: right;
        }}
        th {{ color: {t.muted}; font-weight: 700; }}
        """

    def to_html(self, md_text: str) -> str:
        exts, cfg = self.extensions()
        body = markdown(
            md_text or "",
            extensions=exts,
            extension_configs=cfg,
            output_format="html5",
        )
        return f"""
        <html>
          <head>
            <meta charset="utf-8"/>
            <style>{self.css()}</style>
          </head>
          <body>{body}</body>
        </html>
        """
