"""HTML rendering for browse pages.

Produces the page body consumed by the shared layout. All text that
comes from the content API is escaped here.
"""

import html
from collections.abc import Iterable

from govfront.core.types import Artefact, DetailedGuidance, Section


def escape(text: str | None) -> str:
    """Escape text for HTML, treating None as empty."""
    return html.escape(text) if text is not None else ""


class BrowseRenderer:
    """Renders browse listings as HTML fragments.

    Args:
        website_root: Absolute site root used for canonical links
                      (e.g., "https://www.example.gov")
    """

    def __init__(self, website_root: str) -> None:
        self._website_root = website_root.rstrip("/")

    @property
    def website_root(self) -> str:
        return self._website_root

    def render_index(self, sections: Iterable[Section]) -> str:
        """Render the list of top-level sections."""
        body = [
            "<h1>Browse</h1>",
            self._section_list(sections),
        ]
        return self._page("Browse", "/browse", body)

    def render_section(self, section: Section, sub_sections: Iterable[Section]) -> str:
        """Render a section with its sub-sections."""
        body = [
            f"<h1>{escape(section.title)}</h1>",
            self._description(section.description),
            self._section_list(sub_sections),
        ]
        return self._page(section.title, section.browse_path, body)

    def render_sub_section(
        self,
        section: Section,
        artefacts: Iterable[Artefact],
        detailed_guidance: Iterable[DetailedGuidance],
    ) -> str:
        """Render a sub-section with its artefacts and detailed guidance."""
        items = [
            f'<li><h3><a href="{escape(artefact.web_url)}">{escape(artefact.title)}</a></h3>'
            f"{self._description(artefact.description)}</li>"
            for artefact in artefacts
        ]
        body = [
            f"<h1>{escape(section.title)}</h1>",
            self._description(section.description),
            f'<ul class="artefacts">{"".join(items)}</ul>',
        ]

        guidance = [
            f'<li><a href="{escape(entry.web_url)}">{escape(entry.title)}</a>'
            f"<p>{escape(entry.description)}</p></li>"
            for entry in detailed_guidance
        ]
        if guidance:
            body.append(
                '<div class="detailed-guidance"><h2>Detailed guidance</h2>'
                f'<ul>{"".join(guidance)}</ul></div>'
            )

        return self._page(section.title, section.browse_path, body)

    def _section_list(self, sections: Iterable[Section]) -> str:
        items = [
            f'<li><h2><a href="{escape(section.browse_path)}">{escape(section.title)}</a></h2>'
            f"{self._description(section.description)}</li>"
            for section in sections
        ]
        return f'<ul class="sections">{"".join(items)}</ul>'

    def _description(self, description: str | None) -> str:
        if not description:
            return ""
        return f'<p class="description">{escape(description)}</p>'

    def _page(self, title: str, path: str, body: list[str]) -> str:
        canonical = escape(f"{self._website_root}{path}")
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">'
            f"<head><title>{escape(title)}</title>"
            f'<link rel="canonical" href="{canonical}"></head>'
            f'<body><main id="content">{"".join(body)}</main></body>'
            "</html>"
        )
