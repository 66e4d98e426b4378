"""
Category hierarchy module
Flattens the two-level category tree into list rows
"""

from typing import Any, Dict, Iterable, List, Set, Union

from pricing_admin.models.category import Category, CategoryDisplay, CategoryStatus

ROOT_LABEL = "Root"
NO_CHILDREN_LABEL = "None"


def _as_category(item: Union[Category, Dict[str, Any]]) -> Category:
    return item if isinstance(item, Category) else Category.model_validate(item)


def root_ids(categories: Iterable[Category]) -> Set[int]:
    """Ids of categories without a parent"""
    return {category.id for category in categories if category.parent_category_id is None}


def level1_categories(categories: List[Category]) -> List[Category]:
    """Categories whose parent is a root, in input order"""
    roots = root_ids(categories)
    return [
        category
        for category in categories
        if category.parent_category_id is not None and category.parent_category_id in roots
    ]


def flatten_categories(categories: Iterable[Union[Category, Dict[str, Any]]]) -> List[CategoryDisplay]:
    """
    Build category list rows.

    Only level-1 categories (parent is a root) become rows. Roots appear as the
    parent name and grandchildren as the joined sub-category names.

    Args:
        categories: flat category list with parent references

    Returns:
        One CategoryDisplay per level-1 category
    """
    categories = [_as_category(item) for item in categories]
    by_id: Dict[int, Category] = {}
    children: Dict[int, List[str]] = {}
    for category in categories:
        by_id.setdefault(category.id, category)
        if category.parent_category_id is not None:
            children.setdefault(category.parent_category_id, []).append(category.name)

    rows = []
    for category in level1_categories(categories):
        parent = by_id.get(category.parent_category_id)
        names = children.get(category.id, [])

        rows.append(
            CategoryDisplay(
                id=category.id,
                parent_category=parent.name if parent else ROOT_LABEL,
                category=category.name,
                sub_category=", ".join(names) if names else NO_CHILDREN_LABEL,
                status=CategoryStatus.from_enabled(category.enabled),
            )
        )

    return rows
