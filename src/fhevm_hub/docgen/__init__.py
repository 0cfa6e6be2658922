"""Markdown documentation from source annotations.

Contracts are scanned for ``/** ... */`` blocks that sit directly
before a ``contract`` or ``function`` declaration and carry a
``@title`` tag. Test files are scanned line by line for comment blocks
whose next line declares a test case, ``it("...")``.

Records are grouped by ``@chapter`` into one markdown file each, and
by ``@category`` into sections inside that file. Both tags default to
``general``.
"""

DEFAULT_GROUP = "general"
API_REFERENCE_FILE = "api-reference.md"
