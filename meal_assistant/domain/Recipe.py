"""Recipe domain entity: title, servings, ingredients, tag ids, favorite flag."""
from typing import List, Optional

from meal_assistant.domain.Ingredient import Ingredient


class Recipe:
    def __init__(self, id: str = "", title: str = "", ingredients: Optional[List[Ingredient]] = None,
                 tags: Optional[List[str]] = None, servings: int = 1, is_favorite: bool = False):
        self.id = id
        self.title = title
        self.ingredients = ingredients[:] if ingredients else []
        self.tags = tags[:] if tags else []
        self.servings = servings
        self.is_favorite = bool(is_favorite)

    def __str__(self) -> str:
        fav = " *" if self.is_favorite else ""
        return f"{self.title}{fav} - {self.servings} servings - Tags: {', '.join(self.tags)}"

    __repr__ = __str__

    @property
    def required_ingredients(self) -> List[Ingredient]:
        return [ing for ing in self.ingredients if not ing.is_optional]

    def has_any_tag(self, tag_ids) -> bool:
        wanted = set(tag_ids)
        return any(tag in wanted for tag in self.tags)

    def matching_tags(self, tag_ids) -> List[str]:
        """Recipe tags that appear in tag_ids, in recipe order."""
        wanted = set(tag_ids)
        return [tag for tag in self.tags if tag in wanted]

    @staticmethod
    def from_dict(data):
        d = dict(data)
        try:
            servings = int(d.get("servings", 1))
        except (TypeError, ValueError):
            servings = 1
        return Recipe(
            id=str(d.get("id", "")),
            title=d.get("title", d.get("name", "")),
            ingredients=[Ingredient.from_dict(ing) for ing in d.get("ingredients", [])],
            tags=list(d.get("tags", [])),
            servings=servings,
            is_favorite=d.get("is_favorite", d.get("isFavorite", False)),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "tags": self.tags,
            "servings": self.servings,
            "is_favorite": self.is_favorite,
        }
