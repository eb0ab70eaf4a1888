"""
LUMEN runtime host.

Processes an HTML page that embeds LUMEN source in
``<script type="text/lumen">`` blocks, the way the browser runtime does:

- every block is compiled on its own, so one broken block does not stop
  the others from rendering
- compiled CSS is appended to a single ``<style id="lumen-styles">`` sink
- compiled HTML goes at the end of the first container found from:
    1. the element named by the block's ``target`` attribute
    2. the element with id ``lumen-root``
    3. a new ``<div class="lumen-mount">`` placed right after the block

All ids, classes and attribute names above come from RuntimeConfig.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import lxml.html
from lxml.html import HtmlElement

from .core.errors import LumenError
from .core.ids import IdGenerator
from .core.manifest import LumenConfig, RuntimeConfig
from .core.pipeline import compile_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceBlock:
    """One embedded LUMEN source unit."""

    element: HtmlElement
    source: str
    target: str | None


@dataclass(frozen=True)
class UnitFailure:
    index: int
    message: str


@dataclass
class RenderReport:
    """
    Result of processing one page.

    Attributes:
        html: The page with styles injected and markup mounted
        mounted: Number of source units that compiled and were mounted
        failures: Units that failed to compile, in document order
    """

    html: str
    mounted: int = 0
    failures: list[UnitFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def find_sources(document: HtmlElement, config: RuntimeConfig | None = None) -> list[SourceBlock]:
    """Return the page's LUMEN blocks in document order."""
    config = config or RuntimeConfig()
    blocks = []
    for element in document.xpath("//script[@type=$t]", t=config.script_type):
        blocks.append(
            SourceBlock(
                element=element,
                source=element.text or "",
                target=element.get(config.target_attribute) or None,
            )
        )
    return blocks


def _head(document: HtmlElement) -> HtmlElement:
    head = document.find("head")
    if head is None:
        head = lxml.html.Element("head")
        document.insert(0, head)
    return head


def inject_css(document: HtmlElement, css: str, config: RuntimeConfig | None = None) -> HtmlElement:
    """
    Append ``css`` to the shared style sink, creating it if needed.

    Returns:
        The style element
    """
    config = config or RuntimeConfig()
    style = document.get_element_by_id(config.style_id, None)
    if style is None:
        style = lxml.html.Element("style", id=config.style_id)
        _head(document).append(style)
    style.text = (style.text or "") + "\n" + css
    return style


def _append_fragments(container: HtmlElement, html: str) -> None:
    """Insert ``html`` after the container's existing content."""
    for fragment in lxml.html.fragments_fromstring(html):
        if isinstance(fragment, str):
            if len(container):
                last = container[-1]
                last.tail = (last.tail or "") + fragment
            else:
                container.text = (container.text or "") + fragment
        else:
            container.append(fragment)


def mount_html(
    document: HtmlElement,
    html: str,
    target_id: str | None,
    script: HtmlElement,
    config: RuntimeConfig | None = None,
) -> HtmlElement:
    """
    Put compiled markup into the container chosen by priority.

    Returns:
        The container the markup was appended to
    """
    config = config or RuntimeConfig()
    container = None

    if target_id:
        container = document.get_element_by_id(target_id, None)
        if container is None:
            logger.debug("No element with id %r, falling back", target_id)

    if container is None:
        container = document.get_element_by_id(config.root_id, None)

    if container is None:
        container = lxml.html.Element("div")
        container.set("class", config.mount_class)
        script.addnext(container)

    if html:
        _append_fragments(container, html)
    return container


def process_document(html_text: str, config: LumenConfig | None = None) -> RenderReport:
    """
    Compile every LUMEN block in a page and mount the output.

    Args:
        html_text: The page
        config: Settings; defaults when omitted

    Returns:
        RenderReport with the rewritten page
    """
    config = config or LumenConfig()
    document = lxml.html.document_fromstring(html_text)
    doctype = document.getroottree().docinfo.doctype

    ids = IdGenerator(prefix=config.compile.id_prefix)
    report = RenderReport(html="")

    for index, block in enumerate(find_sources(document, config.runtime)):
        try:
            output = compile_source(block.source, ids=ids)
        except LumenError as e:
            logger.error("LUMEN block %d failed: %s", index, e)
            logger.debug("Source of failing block %d:\n%s", index, block.source)
            report.failures.append(UnitFailure(index=index, message=str(e)))
            continue
        except Exception as e:
            logger.exception("LUMEN block %d failed with an internal error", index)
            report.failures.append(
                UnitFailure(index=index, message=f"Internal error: {type(e).__name__}: {e}")
            )
            continue

        inject_css(document, output.css, config.runtime)
        mount_html(document, output.html, block.target, block.element, config.runtime)
        report.mounted += 1

    report.html = lxml.html.tostring(document, encoding="unicode", doctype=doctype or None)
    return report
