"""Tests for export resolution, import handling and unit synthesis."""

import pytest

from testdoc_mcp.core.extractor import DocExample
from testdoc_mcp.core.synthesizer import (
    ASSERTION_HELPERS,
    MODULE_ALIAS,
    build_prelude,
    find_export_names,
    get_export_names,
    imported_names,
    resolve_relative_imports,
    split_imports,
    synthesize,
    wrap_body,
)


def example(code: str, origin_file: str = "/proj/src/utils.ts") -> DocExample:
    return DocExample(origin_file=origin_file, line=7, name="sum", code=code)


# =============================================================================
# Export Resolver
# =============================================================================

class TestFindExportNames:
    """Tests for regex-based export discovery."""

    SOURCE = """
export function add() {}
export const PI = 3.14;
export async function load() {}
export class Stack {}
export interface Shape {}
export type Id = string;
export enum Color { Red }
export const enum Mode { On }
const a = 1, b = 2;
export { a, b as bee, add };
export * from "./other.js";
export * as ns from "./ns.js";
export default function main() {}
export { default as thing } from "./thing.js";
export { type T };
"""

    def test_declaration_and_batch_forms(self):
        """Both forms are found, deduplicated, in order of first occurrence."""
        assert find_export_names(self.SOURCE) == [
            "add", "PI", "load", "Stack", "Shape", "Id", "Color", "Mode", "a", "b",
        ]

    @pytest.mark.parametrize("declaration", [
        "export function* gen() {}",
        "export function *gen() {}",
        "export async function*gen() {}",
    ])
    def test_generator_spellings(self, declaration):
        """Generators are found whichever side of the asterisk has the space."""
        assert find_export_names(declaration) == ["gen"]

    def test_alias_uses_original_name(self):
        """For 'x as y' the pre-alias name is exported."""
        names = find_export_names("export { inner as outer };")

        assert names == ["inner"]

    def test_wildcards_excluded(self):
        """Wildcard re-exports contribute no names."""
        assert find_export_names('export * from "./x.js";') == []

    def test_no_exports(self):
        """Files without exports yield an empty list."""
        assert find_export_names("function local() {}") == []

    def test_get_export_names_from_file(self, math_module):
        """Names are read from the file on disk."""
        assert get_export_names(math_module) == ["add", "multiply"]

    def test_unreadable_file_yields_empty(self, tmp_path):
        """A missing origin file degrades to no exports."""
        assert get_export_names(tmp_path / "gone.ts") == []


# =============================================================================
# Imports
# =============================================================================

class TestSplitImports:
    """Tests for separating and resolving import statements."""

    def test_relative_import_resolved(self):
        """./ specifiers become absolute paths under the origin directory."""
        imports, rest = split_imports('import { x } from "./math.js";\nuse(x);', "/proj/src/utils.ts")

        assert imports == ['import { x } from "/proj/src/math.js";']
        assert rest == ["use(x);"]

    def test_parent_relative_import_resolved(self):
        """../ specifiers are normalized."""
        imports, _ = split_imports("import y from '../lib/y.js';", "/proj/src/utils.ts")

        assert imports == ["import y from '/proj/lib/y.js';"]

    def test_package_import_untouched(self):
        """Package-style specifiers are left to the project's own resolution."""
        line = 'import { add } from "example-lib";'

        imports, _ = split_imports(line, "/proj/src/utils.ts")

        assert imports == [line]

    def test_side_effect_import_resolved(self):
        """Bare import "./x" statements are resolved too."""
        imports, _ = split_imports('import "./setup.js";', "/proj/src/utils.ts")

        assert imports == ['import "/proj/src/setup.js";']

    def test_order_preserved_in_both_groups(self):
        """Imports and body lines keep their relative order."""
        code = 'import a from "a";\nfirst();\nimport b from "b";\nsecond();'

        imports, rest = split_imports(code, "/proj/src/utils.ts")

        assert imports == ['import a from "a";', 'import b from "b";']
        assert rest == ["first();", "second();"]

    def test_multiline_import_kept_together(self):
        """A brace list spanning lines is one statement."""
        code = 'import {\n  a,\n  b,\n} from "../lib/index.js";\na();'

        imports, rest = split_imports(code, "/proj/src/utils.ts")

        assert imports == ['import {\n  a,\n  b,\n} from "/proj/lib/index.js";']
        assert rest == ["a();"]

    @pytest.mark.parametrize("line", [
        'const m = await import("./x.js");',
        'import("./x.js").then(run);',
        "importantThing();",
        "console.log(import.meta.url);",
    ])
    def test_not_import_statements(self, line):
        """Dynamic imports and lookalike identifiers stay in the body."""
        imports, rest = split_imports(line, "/proj/src/utils.ts")

        assert imports == []
        assert rest == [line]

    def test_resolve_relative_imports_only_touches_relative(self):
        """Only ./ and ../ specifiers are rewritten."""
        statement = 'import { a } from "pkg/sub";'

        assert resolve_relative_imports(statement, "/proj") == statement


class TestImportedNames:
    """Tests for names bound by an import statement."""

    @pytest.mark.parametrize("statement, names", [
        ('import { a, b as c } from "x";', {"a", "c"}),
        ('import D, { e } from "x";', {"D", "e"}),
        ('import * as ns from "x";', {"ns"}),
        ('import type { T } from "x";', {"T"}),
        ('import Default from "x";', {"Default"}),
        ('import "./side.js";', set()),
        ('import {\n  a,\n  b,\n} from "x";', {"a", "b"}),
    ])
    def test_bound_names(self, statement, names):
        assert imported_names(statement) == names


# =============================================================================
# Unit Synthesizer
# =============================================================================

class TestSynthesize:
    """Tests for the generated program text."""

    def test_relative_import_made_absolute(self):
        """The synthesized unit never contains the relative specifier."""
        program = synthesize(
            example('import { x } from "./math.js";\nassertEqual(x, 1);'),
            export_names=[],
        )

        assert '"/proj/src/math.js"' in program
        assert "./math.js" not in program

    def test_section_order(self):
        """namespace import, user imports, exports, helpers, body, trailer."""
        program = synthesize(
            example('import { z } from "pkg";\nassertEqual(add(1, 2), 3);'),
            export_names=["add"],
        )

        positions = [
            program.index(f"import * as {MODULE_ALIAS} from"),
            program.index('import { z } from "pkg";'),
            program.index(f"const {{ add }} = {MODULE_ALIAS};"),
            program.index("function assert("),
            program.index("function assertEqual("),
            program.index("async function __runExample() {"),
            program.index("  assertEqual(add(1, 2), 3);"),
            program.index("__runExample().catch("),
        ]
        assert positions == sorted(positions)

    def test_namespace_import_points_at_origin(self):
        """The origin module is imported by absolute path."""
        program = synthesize(example("run();"), export_names=[])

        assert f'import * as {MODULE_ALIAS} from "/proj/src/utils.ts";' in program

    def test_exports_destructured(self):
        """Every export becomes an ambient identifier."""
        program = synthesize(example("add(1, 2);"), export_names=["add", "multiply"])

        assert f"const {{ add, multiply }} = {MODULE_ALIAS};" in program

    def test_explicitly_imported_names_not_redeclared(self):
        """Names the example imports itself are left out of the destructuring."""
        program = synthesize(
            example('import { add } from "./math.js";\nadd(1, 2);'),
            export_names=["add", "multiply"],
        )

        assert f"const {{ multiply }} = {MODULE_ALIAS};" in program
        assert "const { add" not in program

    def test_no_destructuring_without_exports(self):
        """No exports, no destructuring statement."""
        program = synthesize(example("run();"), export_names=[])

        assert f"= {MODULE_ALIAS};" not in program

    def test_exports_resolved_from_disk(self, math_module):
        """Without explicit names the origin file is scanned."""
        program = synthesize(example("add(1, 2);", origin_file=str(math_module)))

        assert f"const {{ add, multiply }} = {MODULE_ALIAS};" in program

    def test_missing_origin_still_synthesizes(self, tmp_path):
        """An unreadable origin file only drops the destructuring."""
        program = synthesize(example("run();", origin_file=str(tmp_path / "gone.ts")))

        assert "async function __runExample()" in program
        assert f"= {MODULE_ALIAS};" not in program

    def test_assertion_helpers_injected(self):
        """assert and assertEqual are defined in every unit."""
        program = synthesize(example("run();"), export_names=[])

        assert ASSERTION_HELPERS in program
        assert "actual !== expected" in program
        assert "Expected ${JSON.stringify(expected)}, got ${JSON.stringify(actual)}" in program

    def test_failure_trailer(self):
        """Escaping errors are printed and exit the process non-zero."""
        program = synthesize(example("run();"), export_names=[])

        assert "console.error(err);" in program
        assert "process.exit(1);" in program

    def test_deterministic(self):
        """The same example always yields the same text."""
        ex = example("run();")

        assert synthesize(ex, export_names=["a"]) == synthesize(ex, export_names=["a"])


class TestPreludeAndBody:
    """Tests for the independent text transforms."""

    def test_prelude_header(self):
        """The header names the example and its location."""
        prelude = build_prelude(example("x();"), [], [])

        assert prelude.startswith("// Auto-generated test for: sum\n// From: /proj/src/utils.ts:7")

    def test_wrap_body_indents_and_keeps_blank_lines(self):
        """Body lines are indented inside the async runner."""
        wrapped = wrap_body(["a();", "", "  b();"])

        assert wrapped.startswith("async function __runExample() {\n  a();\n\n    b();\n}\n")

    def test_wrap_body_empty(self):
        """An example consisting only of imports still yields a valid runner."""
        assert wrap_body([]).startswith("async function __runExample() {\n}")
