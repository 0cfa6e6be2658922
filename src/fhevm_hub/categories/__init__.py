"""Learning-category pages for the example hub."""

CATEGORY_FILE = "CATEGORY.md"
INDEX_FILE = "README.md"
CATEGORIES_INDEX_FILE = "CATEGORIES.md"
