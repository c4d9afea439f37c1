import itertools
import logging
from typing import Any, Callable, Iterator, Optional

import requests

from config import config
from constants import (
    ACCEPT_HTML,
    MSG_BLOCKED,
    MSG_FETCH_FAILED,
    MSG_FETCH_FAILED_STATUS,
    MSG_NO_STRUCTURED_DATA,
    MSG_NOT_FOUND,
    MSG_RECIPE_NOT_FOUND,
    UNTITLED_RECIPE,
)
from recipe_models import (
    CanonicalRecipe,
    ExtractionErrorKind,
    ExtractionFailure,
    ExtractionResult,
    FetchedPage,
)
from recipe_parser import (
    normalize_text,
    parse_duration_minutes,
    parse_image,
    parse_ingredients,
    parse_instructions,
    parse_servings,
)
from structured_data import find_json_ld_blocks, locate_recipe, parse_json_ld_block

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, float, str], FetchedPage]


def fetch_page(url: str, timeout: float, user_agent: str) -> FetchedPage:
    """Single GET of the page. Transport errors propagate as requests.RequestException."""
    headers = {"User-Agent": user_agent, "Accept": ACCEPT_HTML}
    resp = requests.get(url, headers=headers, timeout=timeout)
    return FetchedPage(url=url, status_code=resp.status_code, text=_response_text(resp))


def _response_text(resp: requests.Response) -> str:
    if "charset" in resp.headers.get("Content-Type", "").lower():
        return resp.text
    # requests assumes ISO-8859-1 for text/* without a charset
    try:
        return resp.content.decode("utf-8")
    except UnicodeDecodeError:
        resp.encoding = resp.apparent_encoding
        return resp.text


def failure_for_status(status_code: int) -> ExtractionFailure:
    if status_code == 404:
        return ExtractionFailure(ExtractionErrorKind.NOT_FOUND, MSG_NOT_FOUND, status_code=status_code)
    if status_code == 403:
        return ExtractionFailure(ExtractionErrorKind.BLOCKED, MSG_BLOCKED, status_code=status_code)
    return ExtractionFailure(
        ExtractionErrorKind.FETCH_FAILED,
        MSG_FETCH_FAILED_STATUS.format(status=status_code),
        status_code=status_code,
    )


def build_canonical_recipe(node: dict, source_url: str) -> CanonicalRecipe:
    return CanonicalRecipe(
        title=normalize_text(node.get("name"), UNTITLED_RECIPE),
        description=normalize_text(node.get("description"), ""),
        source_url=source_url,
        image_url=parse_image(node.get("image")),
        prep_time=parse_duration_minutes(node.get("prepTime")),
        cook_time=parse_duration_minutes(node.get("cookTime")),
        servings=parse_servings(node.get("recipeYield")),
        ingredients=parse_ingredients(node.get("recipeIngredient") or []),
        instructions=parse_instructions(node.get("recipeInstructions") or []),
    )


class RecipeExtractor:
    """Imports a recipe from a page that embeds schema.org JSON-LD.

    Holds no per-call state, so one instance can serve concurrent imports.
    """

    def __init__(
        self,
        fetch: Optional[Fetcher] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
    ):
        self.fetch = fetch or fetch_page
        self.timeout = timeout if timeout is not None else config.FETCH_TIMEOUT
        self.user_agent = user_agent or config.USER_AGENT

    def extract(self, url: str) -> ExtractionResult:
        try:
            page = self.fetch(url, self.timeout, self.user_agent)
        except requests.RequestException as e:
            logger.warning("Request for %s failed: %s", url, e)
            return self._failed(ExtractionFailure(ExtractionErrorKind.FETCH_FAILED, MSG_FETCH_FAILED, cause=e))

        if not page.ok:
            logger.warning("Request for %s returned HTTP %d", url, page.status_code)
            return self._failed(failure_for_status(page.status_code))

        return self.extract_from_html(url, page.text)

    def extract_from_html(self, url: str, html: str) -> ExtractionResult:
        blocks = find_json_ld_blocks(html)
        first = next(blocks, None)
        if first is None:
            return self._failed(ExtractionFailure(ExtractionErrorKind.NO_STRUCTURED_DATA, MSG_NO_STRUCTURED_DATA))

        count = 0

        def documents() -> Iterator[Any]:
            nonlocal count
            for block in itertools.chain([first], blocks):
                count += 1
                yield parse_json_ld_block(block)

        node = locate_recipe(documents())
        if node is None:
            logger.info("Checked %d JSON-LD block(s), none describe a Recipe", count)
            return self._failed(ExtractionFailure(ExtractionErrorKind.RECIPE_NOT_FOUND, MSG_RECIPE_NOT_FOUND))

        logger.info("Found Recipe in JSON-LD block %d of %s", count, url)
        return ExtractionResult(recipe=build_canonical_recipe(node, url))

    def _failed(self, failure: ExtractionFailure) -> ExtractionResult:
        logger.debug("Extraction failed (%s): %s", failure.kind.value, failure.reason)
        return ExtractionResult(failure=failure)


def extract_recipe_from_url(url: str) -> ExtractionResult:
    return RecipeExtractor().extract(url)
