from recipe_parser import (
    normalize_text,
    parse_duration_minutes,
    parse_image,
    parse_ingredients,
    parse_instructions,
    parse_servings,
)


def test_parse_duration_minutes_hours_and_minutes():
    assert parse_duration_minutes("PT1H30M") == 90
    assert parse_duration_minutes("PT45M") == 45
    assert parse_duration_minutes("PT2H") == 120


def test_parse_duration_minutes_rejects_missing_or_unmatched_input():
    assert parse_duration_minutes("") is None
    assert parse_duration_minutes(None) is None
    assert parse_duration_minutes("garbage") is None
    assert parse_duration_minutes("1H30M") is None
    assert parse_duration_minutes(30) is None


def test_parse_servings_number_and_strings():
    assert parse_servings(4) == 4
    assert parse_servings("24 cookies") == 24
    assert parse_servings("Serves 4-6") == 4
    assert parse_servings("a few") is None


def test_parse_servings_uses_first_list_element():
    assert parse_servings(["24", "24 cookies"]) == 24
    assert parse_servings([6]) == 6
    assert parse_servings([]) is None


def test_parse_servings_other_shapes_are_none():
    assert parse_servings({}) is None
    assert parse_servings("") is None
    assert parse_servings(None) is None
    assert parse_servings({"value": 4}) is None
    assert parse_servings(True) is None


def test_parse_ingredients_drops_blank_and_non_string_entries():
    ingredients = ["2 cups flour", "  ", "", None, 3, "1 egg "]
    assert parse_ingredients(ingredients) == ["2 cups flour", "1 egg "]


def test_parse_ingredients_requires_a_list():
    assert parse_ingredients("2 cups flour") == []
    assert parse_ingredients(None) == []


def test_parse_instructions_plain_strings_and_steps():
    assert parse_instructions(["Mix", "Bake"]) == ["Mix", "Bake"]
    assert parse_instructions([{"@type": "HowToStep", "text": "Mix"}]) == ["Mix"]


def test_parse_instructions_step_falls_back_to_name():
    steps = [{"@type": "HowToStep", "name": "Preheat"}, {"@type": "HowToStep"}]
    assert parse_instructions(steps) == ["Preheat"]


def test_parse_instructions_sections_get_bold_headers():
    section = {"@type": "HowToSection", "name": "Dough", "itemListElement": ["Mix", "Chill"]}
    assert parse_instructions([section]) == ["**Dough**", "Mix", "Chill"]


def test_parse_instructions_section_without_name_and_nested_steps():
    instructions = [
        {
            "@type": "HowToSection",
            "itemListElement": [
                {"@type": "HowToStep", "text": "Whisk eggs"},
                {"@type": "HowToStep"},
                "Fold in flour",
            ],
        },
        "Bake",
    ]
    assert parse_instructions(instructions) == ["Whisk eggs", "Fold in flour", "Bake"]


def test_parse_instructions_splits_string_on_newlines():
    assert parse_instructions("Mix\n\nBake") == ["Mix", "Bake"]
    assert parse_instructions("  Mix  \n   \nBake\n") == ["Mix", "Bake"]


def test_parse_instructions_drops_blank_and_non_string_lines():
    instructions = ["   ", {"text": ["not", "a", "string"]}, {"text": "  "}, None, "Serve"]
    assert parse_instructions(instructions) == ["Serve"]
    assert parse_instructions({"text": "Mix"}) == []


def test_parse_image_shapes():
    assert parse_image("http://x/i.jpg") == "http://x/i.jpg"
    assert parse_image({"@type": "ImageObject", "url": "http://x/i.jpg"}) == "http://x/i.jpg"
    assert parse_image(["http://a", "http://b"]) == "http://a"
    assert parse_image([{"url": "http://a"}, "http://b"]) == "http://a"


def test_parse_image_unresolvable_is_none():
    assert parse_image([]) is None
    assert parse_image(None) is None
    assert parse_image({"width": 640}) is None
    assert parse_image(42) is None


def test_normalize_text_defaults():
    assert normalize_text("Banana Bread", "Untitled Recipe") == "Banana Bread"
    assert normalize_text("", "Untitled Recipe") == "Untitled Recipe"
    assert normalize_text(None, "") == ""
    assert normalize_text(["Banana Bread"], "Untitled Recipe") == "Untitled Recipe"
