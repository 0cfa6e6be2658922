"""Static example and category catalogs.

Both catalogs live in YAML files next to this module and are loaded
once, at import of ``fhevm_hub.catalog.query``. The loaded tables are
read-only mappings in declaration order.
"""

EXAMPLES_FILE = "examples.yaml"
CATEGORIES_FILE = "categories.yaml"
