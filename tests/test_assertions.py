# Schema 约束测试
"""
测试由字段指令生成的约束与索引
"""

from biograph.knowledge.models import GraphNode, SchemaModule, id_field, indexed_field, unique_field
from biograph.knowledge.schema import SchemaRegistry, schema_assertions


class Compound(GraphNode):
    """Test node covering every directive."""
    inchikey: str = id_field()
    name: str = unique_field()
    formula: str = indexed_field()
    mass: float = 0.0


class TestSchemaAssertions:
    """按指令生成 Cypher 语句测试"""

    def test_statements_per_directive(self):
        statements = schema_assertions(SchemaRegistry([SchemaModule("Chemistry", [Compound])]))

        assert statements == [
            "CREATE CONSTRAINT IF NOT EXISTS FOR (n:`Compound`) REQUIRE n.`inchikey` IS UNIQUE",
            "CREATE CONSTRAINT IF NOT EXISTS FOR (n:`Compound`) REQUIRE n.`name` IS UNIQUE",
            "CREATE INDEX IF NOT EXISTS FOR (n:`Compound`) ON (n.`formula`)",
        ]

    def test_default_schema(self, registry):
        statements = schema_assertions(registry)

        assert (
            "CREATE CONSTRAINT IF NOT EXISTS FOR (n:`ClinicalTrial`) REQUIRE n.`NCTId` IS UNIQUE"
            in statements
        )
        assert "CREATE INDEX IF NOT EXISTS FOR (n:`GeneSymbol`) ON (n.`sid`)" in statements
        assert "CREATE INDEX IF NOT EXISTS FOR (n:`GeneSymbol`) ON (n.`taxid`)" in statements

    def test_one_statement_per_marked_property(self, registry):
        marked = sum(
            1
            for node_type in registry.node_types()
            for prop in node_type.properties()
            if prop.directive or prop.name in node_type.storage_indexes
        )
        assert len(schema_assertions(registry)) == marked

    def test_storage_indexes(self):
        class Symbol(GraphNode):
            storage_indexes = ("sid", "taxid")

            sid: str
            taxid: str
            status: str = ""

        statements = schema_assertions(SchemaRegistry([SchemaModule("Genes", [Symbol])]))

        assert statements == [
            "CREATE INDEX IF NOT EXISTS FOR (n:`Symbol`) ON (n.`sid`)",
            "CREATE INDEX IF NOT EXISTS FOR (n:`Symbol`) ON (n.`taxid`)",
        ]

    def test_unkeyed_and_relationship_types_skipped(self, registry):
        statements = schema_assertions(registry)

        assert not any("(n:`Design`)" in s for s in statements)
        assert not any("(n:`Synonym`)" in s for s in statements)
