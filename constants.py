import re
from typing import Pattern

# Matches type="...", type='...' and type=... (no quotes); content may span lines.
JSON_LD_SCRIPT_RE: Pattern[str] = re.compile(
    r"<script[^>]*type\s*=\s*[\"']?application/ld\+json[\"']?[^>]*>(.*?)</script>",
    re.I | re.S,
)

DURATION_RE: Pattern[str] = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?")

DIGITS_RE: Pattern[str] = re.compile(r"\d+")

TYPE_KEY = "@type"
GRAPH_KEY = "@graph"
RECIPE_TYPE = "Recipe"

UNTITLED_RECIPE = "Untitled Recipe"

SECTION_HEADER_TEMPLATE = "**{}**"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0.0.0 Safari/537.36"
)

ACCEPT_HTML = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"

MSG_NOT_FOUND = "Recipe page not found. Please check the URL."
MSG_BLOCKED = "This site blocked our request. Try entering the recipe manually."
MSG_FETCH_FAILED = "Could not access the recipe page."
MSG_FETCH_FAILED_STATUS = "Could not access the recipe page (Error {status})."
MSG_NO_STRUCTURED_DATA = (
    "This site doesn't support automatic import yet. Support for more sites coming soon! "
    "Try a different recipe site or enter the recipe manually."
)
MSG_RECIPE_NOT_FOUND = (
    "Could not find recipe data on this page. The page may not contain a recipe, "
    "or uses an unsupported format. Support for more formats coming soon!"
)
FAILURE_PREFIX = "Failed to extract recipe: "
