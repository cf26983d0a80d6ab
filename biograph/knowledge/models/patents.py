# Patents 类型定义
"""
专利各段落及其中提及的基因符号

每种段落是独立的标签，因此下面的 ``MENTIONS`` 关系类型以 ``from`` 类型区分。
"""

from typing import Optional

from .base import (
    Endpoint,
    GraphNode,
    GraphRelationship,
    SchemaModule,
    id_field,
)


class PatentTitle(GraphNode):
    text: str = id_field()
    lang: Optional[str] = None


class PatentAbstract(GraphNode):
    text: str = id_field()
    lang: Optional[str] = None


class PatentDescription(GraphNode):
    text: str = id_field()
    lang: Optional[str] = None


class PatentClaim(GraphNode):
    text: str = id_field()
    lang: Optional[str] = None
    num: Optional[int] = None


class PatentTitleMentionsGeneSymbol(GraphRelationship):
    """A patent title mentioning a gene symbol."""
    relation_name = "MENTIONS"

    patentTitle = Endpoint("PatentTitle", "from")
    count: Optional[int] = None
    geneSymbol = Endpoint("GeneSymbol", "to")


class PatentAbstractMentionsGeneSymbol(GraphRelationship):
    """A patent abstract mentioning a gene symbol."""
    relation_name = "MENTIONS"

    patentAbstract = Endpoint("PatentAbstract", "from")
    count: Optional[int] = None
    geneSymbol = Endpoint("GeneSymbol", "to")


class PatentDescriptionMentionsGeneSymbol(GraphRelationship):
    """A patent description mentioning a gene symbol."""
    relation_name = "MENTIONS"

    patentDescription = Endpoint("PatentDescription", "from")
    count: Optional[int] = None
    geneSymbol = Endpoint("GeneSymbol", "to")


class PatentClaimMentionsGeneSymbol(GraphRelationship):
    """A patent claim mentioning a gene symbol."""
    relation_name = "MENTIONS"

    patentClaim = Endpoint("PatentClaim", "from")
    count: Optional[int] = None
    geneSymbol = Endpoint("GeneSymbol", "to")


type_defs = SchemaModule(
    "Patents",
    [
        PatentTitle,
        PatentAbstract,
        PatentDescription,
        PatentClaim,
        PatentTitleMentionsGeneSymbol,
        PatentAbstractMentionsGeneSymbol,
        PatentDescriptionMentionsGeneSymbol,
        PatentClaimMentionsGeneSymbol,
    ],
    description="Patent sections and their gene mentions",
)
