# Literature 类型定义
"""
科学论文、论文文本片段及其中提及的基因符号
"""

from typing import Optional

from .base import (
    Direction,
    Endpoint,
    GraphNode,
    GraphRelationship,
    Relation,
    SchemaModule,
    graph_field,
    id_field,
    indexed_field,
)


class Citation(GraphNode):
    """A bibliographic reference in NLM's MEDLINE, as cited by clinical trials."""
    citation: str = id_field(description="The formatted reference.")
    pmid: Optional[str] = indexed_field(None, description="PubMed identifier, if known")

    referenceType = Relation("ReferenceType", "IS_REFERENCE_TYPE", Direction.OUT)
    trials = Relation("ClinicalTrial", "REFERS_TO", Direction.IN)


class Fragment(GraphNode):
    """A sentence-sized piece of a paper's abstract or body text, used for text mining."""
    fragment_id: str = id_field()
    text: str
    sequence: Optional[int] = graph_field(None, description="Position of the fragment within its section")
    kind: Optional[str] = graph_field(None, description="'Abstract' or 'BodyText'")


class FromBodyTextMentions(GraphRelationship):
    """A body text fragment mentioning a gene symbol."""
    relation_name = "BODY_TEXT_MENTIONS"

    fragment = Endpoint("Fragment", "from")
    count: Optional[int] = None
    geneSymbol = Endpoint("GeneSymbol", "to")


class FromAbstractMentions(GraphRelationship):
    """An abstract fragment mentioning a gene symbol."""
    relation_name = "ABSTRACT_MENTIONS"

    fragment = Endpoint("Fragment", "from")
    count: Optional[int] = None
    geneSymbol = Endpoint("GeneSymbol", "to")


type_defs = SchemaModule(
    "Literature",
    [Citation, Fragment, FromBodyTextMentions, FromAbstractMentions],
    description="Papers, text fragments and their gene mentions",
)
