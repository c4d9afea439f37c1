from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from constants import FAILURE_PREFIX


@dataclass
class CanonicalRecipe:
    """Structured representation of a recipe imported from a web page."""

    title: str
    source_url: str
    description: str = ""
    image_url: Optional[str] = None
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    servings: Optional[int] = None
    ingredients: List[str] = field(default_factory=list)
    instructions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return the record keyed the way the recipe API expects it."""
        return {
            "title": self.title,
            "description": self.description,
            "sourceUrl": self.source_url,
            "imageUrl": self.image_url,
            "prepTime": self.prep_time,
            "cookTime": self.cook_time,
            "servings": self.servings,
            "ingredients": list(self.ingredients),
            "instructions": list(self.instructions),
        }


@dataclass
class FetchedPage:
    url: str
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class ExtractionErrorKind(Enum):
    NOT_FOUND = "not_found"
    BLOCKED = "blocked"
    FETCH_FAILED = "fetch_failed"
    NO_STRUCTURED_DATA = "no_structured_data"
    RECIPE_NOT_FOUND = "recipe_not_found"


@dataclass
class ExtractionFailure:
    """Classified reason an import did not produce a recipe."""

    kind: ExtractionErrorKind
    reason: str
    status_code: Optional[int] = None
    cause: Optional[BaseException] = None

    @property
    def message(self) -> str:
        return FAILURE_PREFIX + self.reason


class RecipeExtractionError(Exception):
    def __init__(self, failure: ExtractionFailure):
        super().__init__(failure.message)
        self.failure = failure

    @property
    def kind(self) -> ExtractionErrorKind:
        return self.failure.kind


@dataclass
class ExtractionResult:
    """Outcome of one import: exactly one of recipe or failure is set."""

    recipe: Optional[CanonicalRecipe] = None
    failure: Optional[ExtractionFailure] = None

    def __post_init__(self):
        if (self.recipe is None) == (self.failure is None):
            raise ValueError("ExtractionResult needs exactly one of recipe or failure")

    @property
    def ok(self) -> bool:
        return self.recipe is not None

    def unwrap(self) -> CanonicalRecipe:
        if self.failure is not None:
            raise RecipeExtractionError(self.failure) from self.failure.cause
        return self.recipe
