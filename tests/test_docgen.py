"""Tests for the docgen module."""

from pathlib import Path

import pytest

from fhevm_hub.docgen.generator import (
    chapter_filename,
    function_names,
    generate_api_reference,
    generate_markdown_tree,
)
from fhevm_hub.docgen.parser import (
    DocRecord,
    extract_contract_docs,
    extract_from_contract_text,
    extract_from_test_text,
    extract_test_docs,
)
from fhevm_hub.docgen.pipeline import generate_documentation

FIXTURES = Path(__file__).parent / "fixtures"


# ── Contract extraction ──────────────────────────────────────────────


class TestContractExtraction:
    def test_contract_and_function_records(self):
        records = extract_contract_docs(FIXTURES / "contracts" / "Inventory.sol")
        assert records == [
            DocRecord(
                title="Encrypted Inventory",
                category="advanced",
                chapter="Inventory Management",
                description="Tracks encrypted stock levels per item",
            ),
            DocRecord(
                title="Add stock",
                category="stock",
                chapter="Inventory Management",
                description="Adds an encrypted amount to an item's stock",
            ),
        ]

    def test_title_is_mandatory(self):
        text = "/**\n * @category basic\n * @notice Something\n */\ncontract A {}\n"
        assert extract_from_contract_text(text) == []

    def test_defaults(self):
        text = "/**\n * @title Bare\n */\nfunction f() external {}\n"
        assert extract_from_contract_text(text) == [DocRecord(title="Bare")]
        record = extract_from_contract_text(text)[0]
        assert record.category == "general"
        assert record.chapter == "general"
        assert record.description == ""

    def test_requires_declaration_after_comment(self):
        text = "/**\n * @title Storage\n */\nuint256 private x;\n"
        assert extract_from_contract_text(text) == []

    def test_requires_newline_after_opener(self):
        text = "/** @title Inline */\ncontract A {}\n"
        assert extract_from_contract_text(text) == []

    def test_lazy_body_swallows_undeclared_comment(self):
        text = (
            "/**\n * @notice Storage slot\n */\nuint256 x;\n\n"
            "/**\n * @title Setter\n */\nfunction set() external {}\n"
        )
        records = extract_from_contract_text(text)
        assert len(records) == 1
        assert records[0].title == "Setter"
        assert records[0].description == "Storage slot"


# ── Test-file extraction ─────────────────────────────────────────────


class TestTestExtraction:
    def test_fixture_records(self):
        records = extract_test_docs(FIXTURES / "test" / "Inventory.test.ts")
        assert [r.title for r in records] == [
            "should set the deployer as owner",
            "should initialize item and order counters",
            "should prevent non-owner from authorizing managers",
        ]
        assert records[1].description == "Counters start at one"
        assert records[2].category == "access-control"
        assert records[2].chapter == "Access Control"

    def test_title_verbatim(self):
        text = (
            "/**\n"
            " * @category edge\n"
            " * @description Punctuation survives\n"
            " */\n"
            'it("handles  spaces, commas & (parens)!", async () => {});\n'
        )
        records = extract_from_test_text(text)
        assert len(records) == 1
        assert records[0].title == "handles  spaces, commas & (parens)!"
        assert records[0].category == "edge"
        assert records[0].chapter == "general"

    def test_block_not_followed_by_test_is_discarded(self):
        text = '/**\n * @category basic\n */\ndescribe("Suite", function () {\n'
        assert extract_from_test_text(text) == []

    def test_blank_line_breaks_adjacency(self):
        text = '/**\n * @category basic\n */\n\nit("late", () => {});\n'
        assert extract_from_test_text(text) == []

    def test_single_quoted_title_ignored(self):
        text = "/**\n * @category basic\n */\nit('single', () => {});\n"
        assert extract_from_test_text(text) == []

    def test_one_line_block(self):
        text = '/** one-liner */\nit("one liner", () => {});\n'
        assert extract_from_test_text(text) == [DocRecord(title="one liner")]

    def test_unterminated_block(self):
        text = '/**\n * @category basic\nit("never closed", () => {});\n'
        assert extract_from_test_text(text) == []

    def test_untagged_block_still_yields_record(self):
        text = '/**\n * plain comment\n */\nit("plain", () => {});\n'
        assert extract_from_test_text(text) == [DocRecord(title="plain")]


# ── Markdown rendering ───────────────────────────────────────────────


class TestMarkdownTree:
    def test_empty_writes_nothing(self, tmp_path):
        assert generate_markdown_tree([], tmp_path) == []
        assert list(tmp_path.iterdir()) == []

    def test_same_chapter_two_categories(self, tmp_path):
        records = [
            DocRecord(title="One", category="alpha", chapter="Basics", description="First"),
            DocRecord(title="Two", category="beta", chapter="Basics"),
        ]
        written = generate_markdown_tree(records, tmp_path)
        assert [p.name for p in written] == ["basics.md"]
        text = (tmp_path / "basics.md").read_text()
        assert text == (
            "# Basics Examples\n\n"
            "## alpha\n\n"
            "### One\n\nFirst\n\n---\n\n"
            "## beta\n\n"
            "### Two\n\n---\n\n"
        )

    def test_one_file_per_chapter(self, tmp_path):
        records = [
            DocRecord(title="A", chapter="Access Control"),
            DocRecord(title="B"),
            DocRecord(title="C", chapter="Access Control"),
        ]
        written = generate_markdown_tree(records, tmp_path)
        assert sorted(p.name for p in tmp_path.iterdir()) == ["access-control.md", "general.md"]
        assert len(written) == 2
        text = (tmp_path / "access-control.md").read_text()
        assert text.index("### A") < text.index("### C")

    def test_chapters_normalizing_alike_overwrite(self, tmp_path):
        records = [
            DocRecord(title="A", chapter="Access Control"),
            DocRecord(title="B", chapter="access   control"),
        ]
        written = generate_markdown_tree(records, tmp_path)
        assert [p.name for p in written] == ["access-control.md", "access-control.md"]
        assert [p.name for p in tmp_path.iterdir()] == ["access-control.md"]
        text = (tmp_path / "access-control.md").read_text()
        assert "### B" in text
        assert "### A" not in text

    def test_callback_labels(self, tmp_path):
        seen = []

        def record(label, path):
            seen.append((label, path.name))

        generate_markdown_tree([DocRecord(title="A")], tmp_path, on_write=record)
        generate_api_reference("contract C {}", tmp_path, on_write=record)
        assert seen == [("Chapter", "general.md"), ("API reference", "api-reference.md")]

    @pytest.mark.parametrize("chapter,expected", [
        ("general", "general.md"),
        ("Access Control", "access-control.md"),
        ("Multi   Space\tTab", "multi-space-tab.md"),
    ])
    def test_chapter_filename(self, chapter, expected):
        assert chapter_filename(chapter) == expected


class TestApiReference:
    def test_fixture_contract(self, tmp_path):
        source = (FIXTURES / "contracts" / "Inventory.sol").read_text()
        path = generate_api_reference(source, tmp_path)
        assert path.name == "api-reference.md"
        assert path.read_text() == (
            "# API Reference\n\n"
            "## Inventory\n\n"
            "### Functions\n\n"
            "- `addStock()`\n"
            "- `getStock()`\n\n"
        )

    def test_defaults_without_contract_or_functions(self, tmp_path):
        path = generate_api_reference("library Nothing {}", tmp_path)
        assert path.read_text() == "# API Reference\n\n## Contract\n\n"

    def test_function_names_distinct(self):
        source = "function a(uint x) {}\nfunction b() {}\nfunction a(bool y) {}\n"
        assert function_names(source) == ["a", "b"]


# ── Full run ─────────────────────────────────────────────────────────


class TestGenerateDocumentation:
    def test_fixture_project(self, project):
        written = []
        result = generate_documentation(project, on_write=lambda label, path: written.append(path))

        docs = project / "docs"
        assert result["docs_dir"] == docs
        assert sorted(p.name for p in docs.iterdir()) == [
            "access-control.md",
            "api-reference.md",
            "general.md",
            "inventory-management.md",
        ]
        assert written == result["files"]
        assert written[0].name == "api-reference.md"
        # Test records come before contract records
        assert [r.title for r in result["records"]][-2:] == ["Encrypted Inventory", "Add stock"]

        inventory = (docs / "inventory-management.md").read_text()
        assert "## advanced" in inventory and "## stock" in inventory

    def test_missing_source_dirs(self, tmp_path):
        result = generate_documentation(tmp_path)
        assert (tmp_path / "docs").is_dir()
        assert result["files"] == []
        assert list((tmp_path / "docs").iterdir()) == []

    def test_contracts_without_annotations(self, tmp_path):
        (tmp_path / "contracts").mkdir()
        (tmp_path / "contracts" / "Plain.sol").write_text("contract Plain {\n}\n")
        result = generate_documentation(tmp_path)
        assert [p.name for p in result["files"]] == ["api-reference.md"]

    def test_defaults_to_env_root(self, project, monkeypatch):
        monkeypatch.setenv("FHEVM_HUB_ROOT", str(project))
        result = generate_documentation()
        assert result["docs_dir"] == project / "docs"
        assert (project / "docs" / "general.md").is_file()

    def test_unreadable_file_aborts(self, project):
        (project / "contracts" / "Broken.sol").write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(UnicodeDecodeError):
            generate_documentation(project)
