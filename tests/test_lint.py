# Schema 检查测试
"""
测试 SDL 规范性检查
"""

import pytest

from biograph.knowledge.schema import (
    LintReport,
    lint_registry,
    lint_sdl,
    load_registry,
    render_sdl,
)


def codes(sdl: str) -> set[str]:
    return lint_sdl(sdl).codes()


class TestDefaultSchema:
    """内置类型定义检查测试"""

    def test_no_errors(self, registry):
        report = lint_registry(registry)

        assert report.ok
        assert report.errors == []

    def test_single_untyped_reference(self, registry):
        warnings = lint_registry(registry).warnings

        assert [(w.code, w.type_name, w.field_name) for w in warnings] == [
            ("untyped-reference", "GeneSymbol", "mentionedInFragments"),
        ]

    def test_with_directive_prelude(self, registry):
        assert lint_sdl(render_sdl(registry, include_directives=True)).ok

    def test_partial_registry_is_not_closed(self):
        report = lint_registry(load_registry(["Biomedical"]))

        assert not report.ok
        assert "sdl" in report.codes()


class TestRelationFields:
    """字段上的 @relation 测试"""

    def test_valid(self):
        sdl = """
        type A { id: ID @id  bs: [B] @relation(name: "HAS_B", direction: OUT) }
        type B { id: ID @id  as: [A] @relation(name: "HAS_B", direction: IN) }
        """
        assert lint_sdl(sdl).issues == []

    @pytest.mark.parametrize("name", ['""', '"HAS-B"', '"1B"'])
    def test_invalid_name(self, name):
        sdl = f"""
        type A {{ bs: [B] @relation(name: {name}, direction: OUT) }}
        type B {{ id: ID }}
        """
        assert "relation-name" in codes(sdl)

    def test_missing_name(self):
        sdl = """
        type A { bs: [B] @relation(direction: OUT) }
        type B { id: ID }
        """
        assert "relation-name" in codes(sdl)

    def test_lowercase_name_warns(self):
        report = lint_sdl("""
        type A { bs: [B] @relation(name: "hasB", direction: OUT) }
        type B { id: ID }
        """)

        assert report.ok
        assert report.codes() == {"relation-name-style"}

    def test_missing_direction(self):
        sdl = """
        type A { bs: [B] @relation(name: "HAS_B") }
        type B { id: ID }
        """
        assert "relation-direction" in codes(sdl)

    def test_scalar_target(self):
        sdl = 'type A { names: [String] @relation(name: "NAMED", direction: OUT) }'
        assert "relation-target" in codes(sdl)

    def test_conflicting_inverse_directions(self):
        report = lint_sdl("""
        type A { bs: [B] @relation(name: "LINKS", direction: OUT) }
        type B { as: [A] @relation(name: "LINKS", direction: OUT) }
        """)

        assert [i.code for i in report.errors] == ["relation-conflict"]
        assert report.errors[0].type_name == "A"

    def test_self_relation(self):
        sdl = """
        type A {
          parents: [A] @relation(name: "CHILD_OF", direction: OUT)
          children: [A] @relation(name: "CHILD_OF", direction: IN)
        }
        """
        assert lint_sdl(sdl).ok

    def test_self_relation_same_direction(self):
        report = lint_sdl("""
        type A {
          parents: [A] @relation(name: "CHILD_OF", direction: OUT)
          ancestors: [A] @relation(name: "CHILD_OF", direction: OUT)
        }
        """)

        assert [(i.code, i.field_name) for i in report.errors] == [("relation-conflict", "ancestors")]


class TestRelationshipTypes:
    """类型上的 @relation 测试"""

    def test_valid(self):
        sdl = """
        type Gene { id: ID @id }
        type Maps @relation(name: "MAPS", from: "symbol", to: "gene") {
          symbol: Gene
          source: String
          gene: Gene
        }
        """
        assert lint_sdl(sdl).issues == []

    def test_missing_to(self):
        sdl = """
        type Gene { id: ID }
        type Maps @relation(name: "MAPS", from: "symbol") { symbol: Gene  gene: Gene }
        """
        assert "relationship-endpoint" in codes(sdl)

    def test_endpoint_names_missing_field(self):
        sdl = """
        type Gene { id: ID }
        type Maps @relation(name: "MAPS", from: "symbol", to: "target") { symbol: Gene  gene: Gene }
        """
        report = lint_sdl(sdl)

        assert [(i.code, i.field_name) for i in report.errors] == [("relationship-endpoint", "target")]

    def test_endpoint_must_be_single_node(self):
        sdl = """
        type Gene { id: ID }
        type Maps @relation(name: "MAPS", from: "symbol", to: "genes") { symbol: Gene  genes: [Gene] }
        """
        assert "relationship-endpoint" in codes(sdl)

    def test_direction_ignored(self):
        sdl = """
        type Gene { id: ID }
        type Maps @relation(name: "MAPS", direction: OUT, from: "a", to: "b") { a: Gene  b: Gene }
        """
        report = lint_sdl(sdl)

        assert report.ok
        assert "relationship-direction" in report.codes()


class TestIds:
    """@id 字段测试"""

    def test_duplicate_id(self):
        assert "id-duplicate" in codes("type A { a: ID @id  b: String @id }")

    def test_list_id(self):
        assert "id-type" in codes("type A { ids: [ID] @id }")

    def test_object_id(self):
        sdl = """
        type A { b: B @id }
        type B { id: ID }
        """
        assert "id-type" in codes(sdl)


class TestDocumentChecks:
    """解析与 graphql-core 校验测试"""

    def test_syntax_error(self):
        report = lint_sdl("type A {")

        assert [i.code for i in report.issues] == ["syntax"]
        assert not report.ok

    def test_duplicate_type(self):
        assert "sdl" in codes("type A { x: Int } type A { y: Int }")

    def test_unknown_directive(self):
        assert "sdl" in codes("type A { x: Int @primary }")

    def test_unknown_type(self):
        found = codes("type A { b: Missing }")

        assert "unknown-type" in found
        assert "sdl" in found

    def test_untyped_reference_warns(self):
        report = lint_sdl("type A { b: B } type B { id: ID }")

        assert report.ok
        assert report.codes() == {"untyped-reference"}


class TestLintReport:
    """检查结果访问测试"""

    def test_empty_report_is_ok(self):
        report = LintReport()

        assert report.ok
        assert report.errors == [] and report.warnings == []

    def test_add(self):
        report = LintReport()
        report.add("warning", "untyped-reference", "A.b has no @relation", "A", "b")
        report.add("error", "id-type", "bad id", "A")

        assert [i.code for i in report.warnings] == ["untyped-reference"]
        assert [i.code for i in report.errors] == ["id-type"]
        assert not report.ok

    def test_serializes(self):
        report = lint_sdl("type A { b: B } type B { id: ID }")
        data = report.model_dump()

        assert data["issues"][0]["severity"] == "warning"
        assert data["issues"][0]["field_name"] == "b"
