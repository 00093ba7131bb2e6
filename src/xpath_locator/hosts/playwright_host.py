"""
Playwright Document Host

Runs locator resolution against a live page through Playwright's sync API.
Browsing contexts are Playwright Frame objects, matched nodes are
ElementHandles, and evaluation uses the page's own document.evaluate().

Usage:
    >>> with sync_playwright() as p:
    ...     page = p.chromium.launch().new_page()
    ...     host = PlaywrightHost(page)
    ...     matches = FrameAwareResolver(host).resolve(xpath, page.main_frame)
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Union

from playwright.sync_api import ElementHandle, Error, Frame, JSHandle, Page

from ..errors import XPathEvaluationError
from ..resolver.host import XPathHost
from ..resolver.models import ANY_TYPE, NamespaceResolver

logger = logging.getLogger(__name__)

HAS_EVALUATOR_JS = "() => typeof document.evaluate === 'function'"

# Third-party XPath libraries (e.g. wicked-good-xpath) expose install(window)
INSTALL_JS = """
() => {
    const install = window.install || (window.wgxpath && window.wgxpath.install);
    if (typeof install === 'function') {
        install(window);
    }
}
"""

EVALUATE_JS = """
([expression, namespaces, resultType]) => {
    const resolver = (prefix) => namespaces[prefix] || null;
    const result = document.evaluate(expression, document, resolver, resultType, null);
    switch (result.resultType) {
        case XPathResult.NUMBER_TYPE: return [result.numberValue];
        case XPathResult.STRING_TYPE: return [result.stringValue];
        case XPathResult.BOOLEAN_TYPE: return [result.booleanValue];
    }
    const nodes = [];
    let node;
    while ((node = result.iterateNext())) {
        nodes.push(node);
    }
    return nodes;
}
"""

IS_FRAME_JS = """
(node) => ['FRAME', 'IFRAME'].includes(String(node.nodeName).toUpperCase())
"""

SNAPSHOT_GLOBAL_JS = "(name) => [name in window, window[name]]"

RESTORE_GLOBAL_JS = """
([name, saved]) => {
    if (saved[0]) {
        window[name] = saved[1];
    } else {
        delete window[name];
    }
}
"""


class PlaywrightHost(XPathHost):
    """
    XPathHost for a Playwright page.

    Ambient globals live on the main frame's window and are kept as JS
    handles, so functions and other non-serializable values survive a
    save and restore.
    """

    def __init__(self, page: Page, install_script: Optional[Union[str, Path]] = None):
        """
        Initialize host.

        Args:
            page: Playwright Page instance
            install_script: Optional script file defining install(window),
                injected into documents lacking document.evaluate()
        """
        super().__init__()
        self.page = page
        self.install_script = install_script

    def has_evaluator(self, context: Frame) -> bool:
        return bool(context.evaluate(HAS_EVALUATOR_JS))

    def install(self, context: Frame) -> None:
        if self.install_script is not None:
            context.add_script_tag(path=str(self.install_script))
        context.evaluate(INSTALL_JS)

    def evaluate(
        self,
        expression: str,
        context: Frame,
        namespace_resolver: NamespaceResolver,
        result_type: int = ANY_TYPE,
    ) -> Iterable[Any]:
        try:
            array = context.evaluate_handle(
                EVALUATE_JS, [expression, dict(namespace_resolver.namespaces), result_type]
            )
        except Error as e:
            raise XPathEvaluationError(f"Cannot evaluate XPath: {e.message}", expression) from e

        properties = array.get_properties()
        array.dispose()
        items = [properties[key] for key in sorted(properties, key=_index_key) if key.isdigit()]
        return _unwrap(items)

    def is_frame_element(self, node: Any) -> bool:
        if not isinstance(node, ElementHandle):
            return False
        return bool(node.evaluate(IS_FRAME_JS))

    def get_frame_content_window(self, node: Any) -> Optional[Frame]:
        if not isinstance(node, ElementHandle):
            return None
        return node.content_frame()

    def snapshot_global(self, name: str) -> JSHandle:
        return self.page.main_frame.evaluate_handle(SNAPSHOT_GLOBAL_JS, name)

    def restore_global(self, name: str, token: JSHandle) -> None:
        self.page.main_frame.evaluate(RESTORE_GLOBAL_JS, [name, token])
        token.dispose()


def _index_key(key: str) -> int:
    return int(key) if key.isdigit() else -1


def _unwrap(items: list[JSHandle]) -> Iterator[Any]:
    """Yield element handles as-is and scalar results as Python values."""
    for item in items:
        element = item.as_element()
        if element is not None:
            yield element
        else:
            value = item.json_value()
            item.dispose()
            yield value
