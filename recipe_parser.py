from typing import Any, List, Optional

from constants import DIGITS_RE, DURATION_RE, SECTION_HEADER_TEMPLATE


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def normalize_text(value: Any, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    return default


def parse_duration_minutes(duration: Any) -> Optional[int]:
    """Convert an ISO 8601 duration such as "PT1H30M" to minutes."""
    if not duration or not isinstance(duration, str):
        return None

    match = DURATION_RE.search(duration)
    if not match:
        return None

    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    return hours * 60 + minutes


def parse_servings(recipe_yield: Any) -> Optional[int]:
    """Pull a serving count out of a number, a string like "Serves 4-6", or a list of either."""
    if not recipe_yield:
        return None

    if _is_number(recipe_yield):
        return recipe_yield

    if isinstance(recipe_yield, list):
        recipe_yield = recipe_yield[0]
        if _is_number(recipe_yield):
            return recipe_yield or None

    if isinstance(recipe_yield, str):
        match = DIGITS_RE.search(recipe_yield)
        return int(match.group(0)) if match else None

    return None


def parse_ingredients(ingredients: Any) -> List[str]:
    if not isinstance(ingredients, list):
        return []
    return [i for i in ingredients if isinstance(i, str) and i.strip()]


def _section_lines(section: dict) -> List[Any]:
    lines: List[Any] = []
    if section.get("name"):
        lines.append(SECTION_HEADER_TEMPLATE.format(section["name"]))
    for item in section["itemListElement"]:
        if isinstance(item, str):
            lines.append(item)
        elif isinstance(item, dict) and item.get("text"):
            lines.append(item["text"])
    return lines


def parse_instructions(instructions: Any) -> List[str]:
    """Flatten recipeInstructions into a list of lines.

    Handles a newline separated string, plain string steps, HowToStep
    objects and HowToSection groups. A section's name becomes a bold
    header line ahead of its steps.
    """
    if isinstance(instructions, str):
        return [s.strip() for s in instructions.split("\n") if s.strip()]
    if not isinstance(instructions, list):
        return []

    flattened: List[Any] = []
    for step in instructions:
        if isinstance(step, str):
            flattened.append(step)
        elif isinstance(step, dict):
            if isinstance(step.get("itemListElement"), list):
                flattened.extend(_section_lines(step))
            else:
                flattened.append(step.get("text") or step.get("name") or "")

    # text/name values are not guaranteed to be strings
    return [s for s in flattened if isinstance(s, str) and s.strip()]


def parse_image(image: Any) -> Optional[str]:
    """Resolve a schema.org image (URL string, ImageObject or list of either) to one URL."""
    if not image:
        return None

    if isinstance(image, str):
        return image

    if isinstance(image, dict):
        url = image.get("url")
        return url if isinstance(url, str) and url else None

    if isinstance(image, list):
        return parse_image(image[0])

    return None
