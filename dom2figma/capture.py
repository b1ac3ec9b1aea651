"""
Snapshot capture from a live page with Playwright.

The page is loaded in headless Chromium, the requested element is located and
its whole subtree (geometry, computed styles, labels, classes, text runs) is
serialized in a single ``evaluate`` call. The converter then works on the
frozen snapshot without touching the browser again.
"""

import asyncio
import logging
from pathlib import Path
from typing import Dict, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from .errors import CaptureError
from .snapshot import STYLE_PROPS, ElementSnapshot

logger = logging.getLogger(__name__)

DEFAULT_VIEWPORT = {"width": 1440, "height": 900}
DEFAULT_SELECTOR = "body"
DEFAULT_WAIT_MS = 500

SNAPSHOT_SCRIPT = """(root, props) => {
    const snap = (el) => {
        const computed = window.getComputedStyle(el);
        const rect = el.getBoundingClientRect();
        const style = {};
        props.forEach(p => { style[p] = computed[p]; });
        const nodes = el.childNodes;
        const text = nodes.length === 1 && nodes[0].nodeType === Node.TEXT_NODE
            ? (el.innerText !== undefined ? el.innerText : nodes[0].textContent)
            : null;
        const tag = el.tagName.toLowerCase();
        return {
            tag: tag,
            rect: { x: rect.x, y: rect.y, width: rect.width, height: rect.height },
            style: style,
            aria_label: el.getAttribute('aria-label'),
            classes: Array.from(el.classList || []),
            text: text,
            children: tag === 'svg' ? [] : Array.from(el.children).map(snap),
        };
    };
    return snap(root);
}"""


def parse_viewport(raw: Optional[str]) -> Dict[str, int]:
    """Parse ``WIDTHxHEIGHT``; anything malformed falls back to the default."""
    if not raw or "x" not in raw.lower():
        return dict(DEFAULT_VIEWPORT)
    width_str, height_str = raw.lower().split("x", 1)
    try:
        width, height = int(width_str), int(height_str)
    except ValueError:
        return dict(DEFAULT_VIEWPORT)
    if width <= 0 or height <= 0:
        return dict(DEFAULT_VIEWPORT)
    return {"width": width, "height": height}


def resolve_target(target: str) -> str:
    """Local HTML files become file:// URLs; anything else is used as is."""
    if "://" in target or target.startswith(("about:", "data:")):
        return target
    path = Path(target)
    if path.exists():
        return path.resolve().as_uri()
    return target


async def capture_snapshot(
    target: str,
    selector: str = DEFAULT_SELECTOR,
    viewport: Optional[Dict[str, int]] = None,
    wait_ms: int = DEFAULT_WAIT_MS,
) -> ElementSnapshot:
    url = resolve_target(target)
    stage = "launch"

    async with async_playwright() as p:
        try:
            browser = await p.chromium.launch(headless=True)
        except PlaywrightError as exc:
            raise CaptureError(stage, str(exc), target=url) from exc
        context = None
        try:
            stage = "context"
            context = await browser.new_context(
                viewport=viewport or DEFAULT_VIEWPORT,
                device_scale_factor=1,
            )
            page = await context.new_page()

            stage = "goto"
            await page.goto(url, wait_until="domcontentloaded", timeout=60000)
            try:
                stage = "wait_networkidle"
                await page.wait_for_load_state("networkidle", timeout=15000)
            except PlaywrightError:
                logger.debug("Network did not settle for %s, continuing", url)
            if wait_ms > 0:
                stage = "post_wait"
                await page.wait_for_timeout(wait_ms)

            stage = "wait_selector"
            element = await page.wait_for_selector(selector, state="attached", timeout=15000)
            if element is None:
                raise CaptureError(stage, f"no element matches {selector!r}", target=url)

            stage = "snapshot"
            data = await element.evaluate(SNAPSHOT_SCRIPT, STYLE_PROPS)
        except PlaywrightError as exc:
            raise CaptureError(stage, str(exc), target=url) from exc
        finally:
            if context is not None:
                await context.close()
            await browser.close()

    logger.debug("Captured <%s> from %s", data.get("tag"), url)
    return ElementSnapshot.from_dict(data)


def capture_snapshot_sync(
    target: str,
    selector: str = DEFAULT_SELECTOR,
    viewport: Optional[Dict[str, int]] = None,
    wait_ms: int = DEFAULT_WAIT_MS,
) -> ElementSnapshot:
    return asyncio.run(capture_snapshot(target, selector=selector, viewport=viewport, wait_ms=wait_ms))
