# Biomedical 类型定义
"""
基因与基因符号

GeneSymbol 节点通过带同义词来源的关系类型连接到其同义词，
并连接到提及它的文本片段和专利段落。
"""

from typing import Optional

from .base import (
    Direction,
    Endpoint,
    GraphNode,
    GraphRelationship,
    Reference,
    Relation,
    SchemaModule,
    graph_field,
    id_field,
    indexed_field,
)


class GeneSymbol(GraphNode):
    """
    GeneSymbol nodes represent common short names for genes (such as ACE2, FOXA2). There are official gene symbols that
    are linked to synonyms with a 'SYNONYM' relationship. Gene symbols are reused for other species. In most cases the same
    gene symbol in another species identifies a gene that is similar but this is not consistent. Hence, only the combination
    of a gene symbol and an identifier for the species is a unique key. The :GeneSymbol nodes have a '.taxid' property
    that identifies the species.

    Note that there are default formats for different species. Human gene symbols are all uppercase (ACE2) while
    mouse gene symbols start with a capital letter (Ace2).

    The gene symbols are linked to coresponding :Gene nodes with a 'MAPS' relationship.
    """
    storage_indexes = ("sid", "taxid")

    sid: str = graph_field(description="The gene symbol.")
    status: Optional[str] = None
    taxid: str = graph_field(description="The NCBI Taxonomy ID")

    synonyms = Reference("Synonym")
    synonymsSpecialCharOmitted = Reference("SynonymSpecialCharOmitted")
    synonymsLengthOmitted = Reference("SynonymLengthOmitted")
    synonymsWordOmitted = Reference("SynonymWordOmitted")
    mentionedInFragments = Reference("Fragment")

    # 论文
    mentionedInBodyTextFragments = Reference("FromBodyTextMentions")
    mentionedInAbstractFragments = Reference("FromAbstractMentions")

    # 专利
    mentionedInPatentDescriptions = Reference("PatentDescriptionMentionsGeneSymbol")
    mentionedInPatentTitles = Reference("PatentTitleMentionsGeneSymbol")
    mentionedInPatentAbstracts = Reference("PatentAbstractMentionsGeneSymbol")
    mentionedInPatentClaims = Reference("PatentClaimMentionsGeneSymbol")


class Synonym(GraphRelationship):
    """An official gene symbol and one of its synonyms."""
    relation_name = "SYNONYM"

    synonymOf = Endpoint("GeneSymbol", "from")
    source: str = graph_field(description="The database the synonym was taken from.")
    synonym = Endpoint("GeneSymbol", "to")


class SynonymSpecialCharOmitted(GraphRelationship):
    """A synonym spelled without special characters (e.g. hyphens), kept for text matching."""
    relation_name = "SYNONYM_SPECIAL_CHAR_OMITTED"

    synonymOf = Endpoint("GeneSymbol", "from")
    source: str
    synonym = Endpoint("GeneSymbol", "to")


class SynonymLengthOmitted(GraphRelationship):
    """A synonym too short to be matched reliably in free text."""
    relation_name = "SYNONYM_LENGTH_OMITTED"

    synonymOf = Endpoint("GeneSymbol", "from")
    source: str
    synonym = Endpoint("GeneSymbol", "to")


class SynonymWordOmitted(GraphRelationship):
    """A synonym that is also a common English word and is skipped in text matching."""
    relation_name = "SYNONYM_WORD_OMITTED"

    synonymOf = Endpoint("GeneSymbol", "from")
    source: str
    synonym = Endpoint("GeneSymbol", "to")


class Gene(GraphNode):
    """A gene record (NCBI Gene) that gene symbols map to."""
    sid: str = id_field(description="NCBI Gene ID, e.g. 59272 for human ACE2")
    taxid: str = indexed_field(description="The NCBI Taxonomy ID")
    name: Optional[str] = None

    symbols = Relation(
        "GeneSymbol",
        "MAPS",
        Direction.IN,
        description="Gene symbols mapping to this gene. Usually one official symbol per gene.",
    )


type_defs = SchemaModule(
    "Biomedical",
    [GeneSymbol, Synonym, SynonymSpecialCharOmitted, SynonymLengthOmitted, SynonymWordOmitted, Gene],
    description="Genes and gene symbols",
)
