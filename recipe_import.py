import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from config import config
from recipe_extractor import RecipeExtractor
from recipe_models import CanonicalRecipe


def _is_section_header(line: str) -> bool:
    return len(line) > 4 and line.startswith("**") and line.endswith("**")


def render_markdown(recipe: CanonicalRecipe) -> str:
    md = [f"# {recipe.title}", ""]
    md.append(f"_Source: {recipe.source_url}_")
    md.append("")
    if recipe.description:
        md.append(recipe.description)
        md.append("")
    if recipe.image_url:
        md.append(f"![{recipe.title}]({recipe.image_url})")
        md.append("")

    facts = []
    if recipe.prep_time is not None:
        facts.append(f"- Prep: {recipe.prep_time} min")
    if recipe.cook_time is not None:
        facts.append(f"- Cook: {recipe.cook_time} min")
    if recipe.servings is not None:
        facts.append(f"- Servings: {recipe.servings}")
    if facts:
        md.extend(facts)
        md.append("")

    if recipe.ingredients:
        md.append("## Ingredients")
        for ing in recipe.ingredients:
            md.append(f"- {ing.strip()}")
        md.append("")
    if recipe.instructions:
        md.append("## Instructions")
        n = 0
        for line in recipe.instructions:
            if _is_section_header(line):
                # numbering restarts under each section
                n = 0
                md.append("")
                md.append(line)
                md.append("")
                continue
            n += 1
            md.append(f"{n}. {line.strip()}")
        md.append("")
    return "\n".join(md).strip() + "\n"


def render_json(recipe: CanonicalRecipe) -> str:
    return json.dumps(recipe.to_dict(), indent=2, ensure_ascii=False) + "\n"


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Import a recipe from a web page that publishes schema.org JSON-LD.")
    ap.add_argument("url", help="Recipe page URL")
    ap.add_argument("--format", choices=["json", "markdown"], default="json", help="Output format")
    ap.add_argument("--out", help="Write the recipe to this file instead of stdout")
    args = ap.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    result = RecipeExtractor().extract(args.url)
    if not result.ok:
        print(result.failure.message, file=sys.stderr)
        return 1

    text = render_markdown(result.recipe) if args.format == "markdown" else render_json(result.recipe)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        print("Written:", out_path)
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
