"""Find schema.org JSON-LD blocks in a page and locate the Recipe among them.

Pages come from sites we do not control and are often not well formed, so
blocks are found with a plain pattern scan over the markup rather than an
HTML parser.
"""
import json
import logging
from typing import Any, Iterable, Iterator, Optional

from constants import GRAPH_KEY, JSON_LD_SCRIPT_RE, RECIPE_TYPE, TYPE_KEY

logger = logging.getLogger(__name__)


def find_json_ld_blocks(html: str) -> Iterator[str]:
    """Yield the inner text of each JSON-LD script tag, in document order."""
    for match in JSON_LD_SCRIPT_RE.finditer(html or ""):
        yield match.group(1)


def parse_json_ld_block(block: str) -> Optional[Any]:
    try:
        return json.loads(block, strict=False)
    except (ValueError, RecursionError) as e:
        # RecursionError: nesting deeper than the decoder can follow
        logger.info("Skipping invalid JSON block: %s", e)
        return None


def is_recipe_node(node: Any) -> bool:
    """True for nodes typed "Recipe" or ["Thing", "Recipe"]."""
    if not isinstance(node, dict):
        return False
    node_type = node.get(TYPE_KEY)
    if not node_type:
        return False
    return node_type == RECIPE_TYPE or (isinstance(node_type, list) and RECIPE_TYPE in node_type)


def _first_recipe(nodes: list) -> Optional[dict]:
    return next((n for n in nodes if is_recipe_node(n)), None)


def find_recipe_node(document: Any) -> Optional[dict]:
    if isinstance(document, list):
        return _first_recipe(document)
    if is_recipe_node(document):
        return document
    if isinstance(document, dict) and isinstance(document.get(GRAPH_KEY), list):
        return _first_recipe(document[GRAPH_KEY])
    return None


def locate_recipe(documents: Iterable[Any]) -> Optional[dict]:
    """Return the first Recipe found across documents; later documents are not read."""
    for document in documents:
        recipe = find_recipe_node(document)
        if recipe is not None:
            return recipe
    return None
