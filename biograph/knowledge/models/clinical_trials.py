# ClinicalTrials 类型定义
"""
ClinicalTrials.gov 登记的临床研究及其关联实体。
研究的大部分属性建模为共享节点 (Phase、Status、Sponsor 等)，
便于在图谱中按这些属性归组试验。

基数关系写在字段描述中，此处不做校验。
"""

from typing import Optional

from .base import (
    Direction,
    GraphNode,
    Relation,
    SchemaModule,
    graph_field,
    id_field,
)

OUT = Direction.OUT
IN = Direction.IN


class ClinicalTrial(GraphNode):
    """Information about privately and publicly funded clinical studies conducted around the world."""
    NCTId: str = id_field(
        graphql_type="ID",
        description="ClinicalTrials.gov identifier of the study.\ne.g. NCT04338360",
    )
    data_source: str = graph_field(
        description="The source of the information. Hardcoded to 'clinicaltrials.gov' for all nodes.",
    )
    url: str = graph_field(
        description=(
            "URL to the study in clinicalTrials.gov ('https://clinicaltrials.gov/ct2/show/' + Id), "
            "where Id is the NCTId, e.g. https://www.clinicaltrials.gov/ct2/show/nct00855166"
        ),
    )

    refersTo = Relation("Citation", "REFERS_TO", OUT, description=(
        "A bibliographic reference in NLM's MEDLINE.\n"
        'A "1 to many" relationship in the magnitude of 1-200, e.g. one ClinicalTrial can have one or more '
        "Citations. (note: A Citation can be referred to in many ClinicalTrials)"
    ))
    refersToUrl = Relation("Link", "REFERS_TO_URL", OUT, description=(
        "A web site directly relevant to the protocol, if applicable.\n"
        "Does not include sites whose primary goal is to advertise or sell commercial products or services.\n"
        "Can include links to educational, research, government, and other non-profit web pages.\n"
        "All links are subject to review by ClinicalTrials.gov\n\n"
        "If exists, then a 1 to 1 relationship between the ClinicalTrial and Link"
    ))
    useReferenceAs = Relation("ReferenceType", "USE_REFERENCE_AS", OUT, description=(
        "The relationship between a ClinicalTrial and a type of Reference. A ClinicalTrial can use a "
        "Reference as either background, result or derived.\n"
        'A "1 to 1" relationship'
    ))
    conductedAt = Relation("Facility", "CONDUCTED_AT", OUT, description=(
        "A ClinicalTrial is conducted at a Facility. This can e.g. be a hospital or clinic.\n"
        'A "1 to many" relationship in the magnitude of 1-900, e.g. one ClinicalTrial can be conducted '
        "at one or more facilities."
    ))
    investigates = Relation("Intervention", "INVESTIGATES_INTERVENTION", OUT, description=(
        "A ClinicalTrial has a purpose of investigating an intervention (e.g. medication, surgery)\n"
        'A "1 to many" relationship in the magnitude of 1-30, e.g. one ClinicalTrial can investigate '
        "one or more Interventions."
    ))
    type = Relation("StudyType", "IS_TYPE", OUT, description=(
        "A ClinicalTrial can be of a certain type: Interventional, Observational or Expanded Access.\n"
        "A 1:1 relationship."
    ))
    isSponsoredBy = Relation("Sponsor", "IS_SPONSORED_BY", OUT, description=(
        "A ClinicalTrial is sponsored (i.e. paid) by someone.\n"
        "A 1:1 relationship."
    ))
    isSupportedBy = Relation("Collaborator", "IS_SUPPORTED_BY", OUT, description=(
        "A ClinicalTrial can be supported by a collaborator.\n"
        "A 1:many relationship, in the magnitude of 1-100, e.g. one ClinicalTrial can be supported by "
        "one or more collaborators."
    ))
    isFdaRegulatedDevice = Relation("Response", "IS_FDA_REGULATED_DEVICE", OUT, description=(
        "This relationship indicates if the ClinicalTrial studies a U.S. FDA-regulated Device Product "
        "(Optional for Observational Studies)\n"
        "Indication that a clinical study is studying a device product subject to section 510(k), 515, "
        "or 520(m) of the Federal Food, Drug, and Cosmetic Act. Select Yes/No.\n"
        "This is a 1:1 relationship."
    ))
    isUnapprovedDevice = Relation("Response", "IS_UNAPPROVED_DEVICE", OUT, description=(
        "This relationship indicates if the ClinicalTrial investigates a device product Not Approved or "
        'Cleared by U.S. FDA (formerly "Delayed Posting")\n'
        "Indication that at least one device product studied in the clinical study has not been "
        "previously approved or cleared by the U.S. Food and Drug Administration (FDA) for one or more "
        "uses. Select one.\n"
        "  Yes: At least one studied FDA-regulated device product has not been previously approved or "
        "cleared by FDA\n"
        "  No: All studied FDA-regulated device products have been previously approved or cleared by FDA.\n\n"
        "This is a 1:1 relationship."
    ))
    isFdaRegulatedDrug = Relation("Response", "IS_FDA_REGULATED_DRUG", OUT, description=(
        "This relationship indicates if the ClinicalTrial studies a U.S. FDA-regulated Drug Product "
        "(Optional for Observational Studies)\n"
        "Indication that a clinical study is studying a drug product (including a biological product) "
        "subject to section 505 of the Federal Food, Drug, and Cosmetic Act or to section 351 of the "
        "Public Health Service Act. Select Yes/No.\n"
        "This is a 1:1 relationship."
    ))
    expandedAccess = Relation("Response", "HAS_EXPANDED_ACCESS", OUT, description=(
        "Availability of Expanded Access.\n"
        "Whether there is expanded access to the investigational product for patients who do not "
        "qualify for enrollment in a clinical trial.\n"
        "Expanded Access for investigational drug products (including biological products) includes all "
        "expanded access types under section 561 of the Federal Food, Drug, and Cosmetic Act:\n"
        "  (1) for individual participants, including emergency use;\n"
        "  (2) for intermediate-size participant populations; and\n"
        "  (3) under a treatment IND or treatment protocol.\n\n"
        "Relationship can be one of the below:\n"
        "  Yes: Investigational product is available through expanded access\n"
        "  No: Investigational product is not available through expanded access\n"
        "  Unknown: If the responsible party is not the sponsor of the clinical trial and manufacturer "
        "of the investigational product.\n\n"
        "This is a 1:1 relationship."
    ))
    isStudying = Relation("Condition", "IS_STUDYING", OUT, description=(
        "A ClinicalTrial is studying / investigating a Condition\n"
        'A "1 to many" relationship in the magnitude of 1-40, e.g. one ClinicalTrial can be studying '
        "one or more conditions."
    ))
    isPhase = Relation("Phase", "IS_PHASE", OUT, description=(
        "A ClinicalTrial of StudyType: Interventional can be categorised as one or more phases "
        "(typically only one).\n"
        'A "1 to many" relationship in the magnitude of 1-2, e.g a ClinicalTrial can be Phase 1 and '
        "Phase 2 (two relationships)."
    ))
    purpose = Relation("Purpose", "HAS_PURPOSE", OUT, description=(
        "A Clinical Trial has a primary purpose for the investigation.\n"
        "This is a 1:1 relationship."
    ))
    identifications = Relation("StudyIdentification", "HAS_IDENTIFICATION", OUT, description=(
        "A ClinicalTrial can have an additional identification assigned by the sponsor.\n"
        "This is a 1:1 relationship."
    ))
    status = Relation("Status", "HAS_STATUS", OUT, description=(
        "A ClinicalTrial can have different recruitment status depending on progress of the study.\n"
        "This is a 1:1 relationship."
    ))
    stopped = Relation("StopReason", "WAS_STOPPED", OUT, description=(
        "A ClinicalTrial can be prematurely stopped.\n"
        "If the ClinicalTrial was stopped this is a 1:1 relationship."
    ))
    started = Relation("Start", "STARTED_AT", OUT, description="A ClinicalTrial has a start date.")
    completed = Relation("Completed", "COMPLETED_AT", OUT, description=(
        "The (estimated or actual) completion dates of the ClinicalTrial. A 1:1 relationship."
    ))
    conductedBy = Relation("Investigator", "IS_CONDUCTED_BY", OUT, description=(
        "The investigators conducting the ClinicalTrial. A 1:many relationship, usually 1-3."
    ))
    description = Relation("Description", "HAS_DESCRIPTION", OUT, description=(
        "The brief summary and detailed description of the ClinicalTrial. A 1:1 relationship."
    ))
    studyDesign = Relation("Design", "HAS_STUDY_DESIGN", OUT, description=(
        "Design of the study (allocation, masking, intervention model). A 1:many relationship, one "
        "per design aspect."
    ))
    observationPeriod = Relation("ObservationPeriod", "HAS_OBSERVATION_PERIOD", OUT, description=(
        "Time perspective of an observational study. A 1:1 relationship."
    ))
    primaryOutcome = Relation("Outcome", "HAS_PRIMARY_OUTCOME", OUT, description=(
        "Primary outcome measures. A 1:many relationship, usually 1-5."
    ))
    secondaryOutcome = Relation("Outcome", "HAS_SECONDARY_OUTCOME", OUT, description=(
        "Secondary outcome measures. A 1:many relationship, from none to several dozen."
    ))
    otherOutcome = Relation("Outcome", "HAS_OTHER_OUTCOME", OUT, description=(
        "Other pre-specified outcome measures. A 1:many relationship, often none."
    ))
    studyPopulation = Relation("StudyPopulation", "HAS_STUDY_POPULATION", OUT, description=(
        "The population the participants are drawn from. A 1:1 relationship."
    ))
    inclusionCriteria = Relation("InclusionCriteria", "HAS_INCLUSION_CRITERIA", OUT, description=(
        "Criteria a participant must meet. A 1:many relationship, usually 1-20."
    ))
    exclusionCriteria = Relation("ExclusionCriteria", "HAS_EXCLUSION_CRITERIA", OUT, description=(
        "Criteria that exclude a participant. A 1:many relationship, usually 1-30."
    ))
    contactPerson = Relation("Contact", "HAS_CONTACT_PERSON", OUT, description=(
        "Central contact persons of the study. A 1:many relationship, usually 1-2."
    ))
    # 关系名与库中数据一致，含拼写
    retainedBioSamples = Relation("BioSpecimen", "HAS_SMAPLES_RETAINED_IN_BIOREPOSITORY", OUT, description=(
        "Biospecimens retained in a biorepository. A 1:1 relationship, if any."
    ))
    studyArms = Relation("Arm", "HAS_STUDY_ARMS", OUT, description=(
        "Arms or groups of the study. A 1:many relationship, usually 1-4."
    ))


class Link(GraphNode):
    """A web site referenced by a clinical trial."""
    url: str = id_field(description="The URL, e.g. https://www.who.int/")

    trials = Relation("ClinicalTrial", "REFERS_TO_URL", IN)


class ReferenceType(GraphNode):
    """How a reference is used by a study: background, result or derived."""
    name: str = id_field(description="One of 'background', 'result' or 'derived'.")

    citations = Relation("Citation", "IS_REFERENCE_TYPE", IN)
    trials = Relation("ClinicalTrial", "USE_REFERENCE_AS", IN)


class Facility(GraphNode):
    """A site where clinical trials are conducted, e.g. a hospital or clinic."""
    name: str = id_field(description="Full name of the facility.")

    trials = Relation("ClinicalTrial", "CONDUCTED_AT", IN)
    city = Relation("City", "LOCATED_IN", OUT, many=False, description="The city the facility is located in.")


class Intervention(GraphNode):
    """A process or action that is the focus of a clinical study."""
    name: str = id_field(description="Name of the intervention, e.g. Hydroxychloroquine")
    description: str = graph_field(description="Details of the intervention.")
    type: str = graph_field(description="e.g. Drug, Device, Biological, Procedure, Behavioral")

    trials = Relation("ClinicalTrial", "INVESTIGATES_INTERVENTION", IN)


class StudyType(GraphNode):
    """The Type of the ClinicalTrial"""
    type: str = id_field(description=(
        "Interventional (clinical trial): Participants are assigned prospectively to an intervention or "
        "interventions according to a protocol to evaluate the effect of the intervention(s) on biomedical "
        "or other health related outcomes.\n"
        "Observational: Studies in human beings in which biomedical and/or health outcomes are assessed in "
        "pre-defined groups of individuals. Participants in the study may receive diagnostic, therapeutic, "
        "or other interventions, but the investigator does not assign specific interventions to the study "
        "participants. This includes when participants receive interventions as part of routine medical "
        "care, and a researcher studies the effect of the intervention.\n"
        "Expanded Access: An investigational drug product (including biological product) available through "
        "expanded access for patients who do not qualify for enrollment in a clinical trial. Expanded Access "
        "includes all expanded access types under section 561 of the Federal Food, Drug, and Cosmetic Act: "
        "(1) for individual patients, including emergency use; (2) for intermediate-size patient "
        "populations; and (3) under a treatment IND or treatment protocol."
    ))

    trials = Relation("ClinicalTrial", "IS_TYPE", IN)


class Sponsor(GraphNode):
    """The name of the entity or the individual who is the sponsor of the clinical study."""
    name: str = id_field(description=(
        "Limit: 160 characters.\n"
        "When a clinical study is conducted under an investigational new drug application (IND) or "
        "investigational device exemption (IDE), the IND or IDE holder is considered the sponsor.\n"
        "When a clinical study is not conducted under an IND or IDE, the single person or entity who "
        "initiates the study, by preparing and/or planning the study, and who has authority and control "
        "over the study, is considered the sponsor."
    ))

    trials = Relation("ClinicalTrial", "IS_SPONSORED_BY", IN)


class Collaborator(GraphNode):
    """Other organizations (if any) providing support"""
    name: str = id_field(description=(
        "Support may include funding, design, implementation, data analysis or reporting.\n"
        "The responsible party is responsible for confirming all collaborators before listing them.\n"
        "Limit: 160 characters."
    ))

    trials = Relation("ClinicalTrial", "IS_SUPPORTED_BY", IN)


class Response(GraphNode):
    """A Yes/No/Unknown answer shared by the FDA regulation and expanded access questions."""
    YN: str = id_field(description="'Yes', 'No' or 'Unknown'")

    isFdaRegulatedDevice = Relation("ClinicalTrial", "IS_FDA_REGULATED_DEVICE", IN)
    isUnapprovedDevice = Relation("ClinicalTrial", "IS_UNAPPROVED_DEVICE", IN)
    isFdaRegulatedDrug = Relation("ClinicalTrial", "IS_FDA_REGULATED_DRUG", IN)
    expandedAccess = Relation("ClinicalTrial", "HAS_EXPANDED_ACCESS", IN)


class Condition(GraphNode):
    """Primary Disease or Condition Being Studied in the Trial, or the Focus of the Study"""
    disease: str = id_field(description=(
        "The name(s) of the disease(s) or condition(s) studied in the clinical study, or the focus of the "
        "clinical study.\n"
        "Use, if available, appropriate descriptors from NLM's Medical Subject Headings (MeSH)-controlled "
        "vocabulary thesaurus or terms from another vocabulary, such as the Systematized Nomenclature of "
        "Medicine-Clinical Terms (SNOMED CT), that has been mapped to MeSH within the Unified Medical "
        "Language System (UMLS) Metathesaurus."
    ))

    keywords = Relation("Keyword", "HAS_KEYWORD", OUT, description=(
        "Keywords\n"
        "Words or phrases that best describe the protocol.\n"
        "Keywords help users find studies in the database. Use NLM's Medical Subject Heading "
        "(MeSH)-controlled vocabulary terms where appropriate. Be as specific and precise as possible.\n"
        "Avoid acronyms and abbreviations.\n"
        'A "1 to many" relationship, e.g. one Condition can have one or more keywords.'
    ))
    trials = Relation("ClinicalTrial", "IS_STUDYING", IN)


class Keyword(GraphNode):
    """A word or phrase describing the protocol."""
    name: str = id_field()

    conditions = Relation("Condition", "HAS_KEYWORD", IN)


class Phase(GraphNode):
    """The phase of the ClinicalTrial - only applicable for ClinicalTrial of StudyType: Interventional"""
    phase: str = id_field(description=(
        "For a clinical trial of a drug product (including a biological product), the numerical phase of "
        "such clinical trial, consistent with terminology in 21 CFR 312.21 and in 21 CFR 312.85 for phase 4 "
        "studies. Select only one.\n"
        "  N/A: Trials without phases (for example, studies of devices or behavioral interventions).\n"
        '  Early Phase 1 (Formerly listed as "Phase 0"): Exploratory trials, involving very limited human '
        "exposure, with no therapeutic or diagnostic intent (e.g., screening studies, microdose studies).\n"
        "  Phase 1: Includes initial studies to determine the metabolism and pharmacologic actions of drugs "
        "in humans, the side effects associated with increasing doses, and to gain early evidence of "
        "effectiveness; may include healthy participants and/or patients.\n"
        "  Phase 2: Includes controlled clinical studies conducted to evaluate the effectiveness of the drug "
        "for a particular indication or indications in participants with the disease or condition under "
        "study and to determine the common short-term side effects and risks.\n"
        "  Phase 3: Includes trials conducted after preliminary evidence suggesting effectiveness of the "
        "drug has been obtained, and are intended to gather additional information to evaluate the overall "
        "benefit-risk relationship of the drug.\n"
        "  Phase 4: Studies of FDA-approved drugs to delineate additional information including the drug's "
        "risks, benefits, and optimal use."
    ))

    trials = Relation("ClinicalTrial", "IS_PHASE", IN)


class Purpose(GraphNode):
    """Primary Purpose of the ClinicalTrial"""
    name: str = id_field(description=(
        "The main objective of the intervention(s) being evaluated by the clinical trial.\n"
        "Can be one of the below:\n"
        "  Treatment: One or more interventions are being evaluated for treating a disease, syndrome, or "
        "condition.\n"
        "  Prevention: One or more interventions are being assessed for preventing the development of a "
        "specific disease or health condition.\n"
        "  Diagnostic: One or more interventions are being evaluated for identifying a disease or health "
        "condition.\n"
        "  Supportive Care: One or more interventions are evaluated for maximizing comfort, minimizing side "
        "effects, or mitigating against a decline in the participant's health or function.\n"
        "  Screening: One or more interventions are assessed or examined for identifying a condition, or "
        "risk factors for a condition, in people who are not yet known to have the condition or risk "
        "factor.\n"
        "  Health Services Research: One or more interventions for evaluating the delivery, processes, "
        "management, organization, or financing of healthcare.\n"
        "  Basic Science: One or more interventions for examining the basic mechanism of action (for "
        "example, physiology or biomechanics of an intervention).\n"
        "  Device Feasibility: An intervention of a device product is being evaluated in a small clinical "
        "trial (generally fewer than 10 participants) to determine the feasibility of the product; or a "
        "clinical trial to test a prototype device for feasibility and not health outcomes.\n"
        "  Other: None of the other options applies."
    ))

    trials = Relation("ClinicalTrial", "HAS_PURPOSE", IN)


class StudyIdentification(GraphNode):
    """Unique Protocol Identification Number"""
    studyId: str = id_field(description=(
        "Any unique identifier assigned to the protocol by the sponsor.\n"
        "Limit: 30 characters."
    ))
    acronym: str = graph_field(description="Acronym or initials used to identify the study.")

    trials = Relation("ClinicalTrial", "HAS_IDENTIFICATION", IN)
    title = Relation("Title", "HAS_TITLE", OUT)


class Title(GraphNode):
    """Brief and official titles of a study."""
    briefTitle: str = id_field(description="A short title in language intended for the lay public.")
    officialTitle: str = graph_field(description="The title of the protocol as given by the sponsor.")

    identifications = Relation("StudyIdentification", "HAS_TITLE", IN)


class Status(GraphNode):
    """Overall Recruitment Status"""
    status: str = id_field(description=(
        "The recruitment status for the clinical study as a whole, based upon the status of the individual "
        "sites.\n"
        "If at least one facility in a multi-site clinical study has an Individual Site Status of "
        '"Recruiting," then the Overall Recruitment Status for the study must be "Recruiting."\n'
        "Can be one of the below:\n"
        "  Not yet recruiting: Participants are not yet being recruited\n"
        "  Recruiting: Participants are currently being recruited, whether or not any participants have "
        "yet been enrolled\n"
        "  Enrolling by invitation: Participants are being (or will be) selected from a predetermined "
        "population\n"
        "  Active, not recruiting: Study is continuing, meaning participants are receiving an intervention "
        "or being examined, but new participants are not currently being recruited or enrolled\n"
        "  Completed: The study has concluded normally; participants are no longer receiving an "
        "intervention or being examined (that is, last participant's last visit has occurred)\n"
        "  Suspended: Study halted prematurely but potentially will resume\n"
        "  Terminated: Study halted prematurely and will not resume; participants are no longer being "
        "examined or receiving intervention\n"
        "  Withdrawn: Study halted prematurely, prior to enrollment of first participant"
    ))

    stopReason = Relation("StopReason", "HAS_REASON", OUT)
    trials = Relation("ClinicalTrial", "HAS_STATUS", IN)


class StopReason(GraphNode):
    """Why Study Stopped"""
    reason: str = id_field(description=(
        "A brief explanation of the reason(s) why such clinical study was stopped (for a clinical study "
        'that is "Suspended," "Terminated," or "Withdrawn" prior to its planned completion as anticipated '
        "by the protocol).\n"
        "Limit: 250 characters."
    ))

    trials = Relation("ClinicalTrial", "WAS_STOPPED", IN)
    status = Relation("Status", "HAS_REASON", IN)


class Start(GraphNode):
    """Study Start Date"""
    # 以字符串存储，非 Cypher Date
    date: str = id_field(description=(
        "The estimated date on which the clinical study will be open for recruitment of participants, or "
        "the actual date on which the first participant was enrolled."
    ))

    trials = Relation("ClinicalTrial", "STARTED_AT", IN)


class Completed(GraphNode):
    """Date(s) for when the ClinicalTrial Completed"""
    completionDate: str = id_field(description=(
        "The date the final participant was examined or received an intervention for purposes of final "
        "collection of data for the primary and secondary outcome measures and adverse events (for "
        "example, last participant's last visit), whether the clinical study concluded according to the "
        "pre-specified protocol or was terminated."
    ))
    primaryCompletionDate: str = graph_field(description=(
        "The date that the final participant was examined or received an intervention for the purposes "
        "of final collection of data for the primary outcome, whether the clinical study concluded "
        "according to the pre-specified protocol or was terminated."
    ))

    trials = Relation("ClinicalTrial", "COMPLETED_AT", IN)


class Investigator(GraphNode):
    """A person conducting a clinical study."""
    name: str = id_field()
    affiliation: str

    trials = Relation("ClinicalTrial", "IS_CONDUCTED_BY", IN)
    # 关系名与库中数据一致，含拼写
    responsibilities = Relation("Responsible", "IS_RESPOSIBLE", IN)


class Responsible(GraphNode):
    """An indication of whether the responsible party is the sponsor, the sponsor-investigator, or a principal investigator designated by the sponsor to be the responsible party."""
    type: str = id_field(description=(
        "One can be selected of the below:\n"
        "  Sponsor: The entity (for example, corporation or agency) that initiates the study\n"
        "  Principal Investigator: The individual designated as responsible party by the sponsor\n"
        "  Sponsor-Investigator: The individual who both initiates and conducts the study"
    ))

    investigator = Relation("Investigator", "IS_RESPOSIBLE", OUT)


class Description(GraphNode):
    """Brief summary and detailed description of a study."""
    detailed: str = id_field()
    summary: str

    trials = Relation("ClinicalTrial", "HAS_DESCRIPTION", IN)


class Design(GraphNode):
    """One aspect of a study design, e.g. allocation or masking."""
    # 无可唯一标识 Design 的属性
    model: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None

    trials = Relation("ClinicalTrial", "HAS_STUDY_DESIGN", IN)
    arms = Relation("Arm", "BELONGS_TO_MODEL", IN)


class ObservationPeriod(GraphNode):
    """Time perspective of an observational study."""
    time: str = id_field(description="e.g. Prospective, Retrospective, Cross-Sectional")

    trials = Relation("ClinicalTrial", "HAS_OBSERVATION_PERIOD", IN)


class Outcome(GraphNode):
    """A pre-specified outcome measure of a study."""
    name: str = id_field()
    description: Optional[str] = None
    time: str = graph_field(description="Time frame of the measurement.")
    type: str = graph_field(description="primary, secondary or other")

    primaryOutcomes = Relation("ClinicalTrial", "HAS_PRIMARY_OUTCOME", IN)
    secondaryOutcomes = Relation("ClinicalTrial", "HAS_SECONDARY_OUTCOME", IN)
    otherOutcomes = Relation("ClinicalTrial", "HAS_OTHER_OUTCOME", IN)


class StudyPopulation(GraphNode):
    """The population participants of an observational study are drawn from."""
    name: str = id_field()
    sampling: str = graph_field(description="Probability or non-probability sample")

    genders = Relation("Gender", "INCLUDES_GENDER", OUT)
    ageRanges = Relation("AgeRange", "INCLUDES_AGE_RANGE", OUT)
    trials = Relation("ClinicalTrial", "HAS_STUDY_POPULATION", IN)


class Gender(GraphNode):
    """Sex of the participants eligible for a study."""
    name: str = id_field(description="All, Female or Male")
    description: str

    populations = Relation("StudyPopulation", "INCLUDES_GENDER", IN)


class AgeRange(GraphNode):
    """Minimum and maximum age of eligible participants."""
    maxAge: str = id_field()
    minAge: str

    populations = Relation("StudyPopulation", "INCLUDES_AGE_RANGE", IN)


class InclusionCriteria(GraphNode):
    """Criteria a participant must meet to be eligible."""
    criteria: str = id_field()

    trials = Relation("ClinicalTrial", "HAS_INCLUSION_CRITERIA", IN)


class ExclusionCriteria(GraphNode):
    """Criteria that prevent a participant from being eligible."""
    criteria: str = id_field()

    trials = Relation("ClinicalTrial", "HAS_EXCLUSION_CRITERIA", IN)


class Contact(GraphNode):
    """Central contact person of a study."""
    email: str = id_field()
    name: str

    trials = Relation("ClinicalTrial", "HAS_CONTACT_PERSON", IN)


class BioSpecimen(GraphNode):
    """Biospecimens retained by a study."""
    # 属性名与库中数据一致
    retension: str = id_field(description="e.g. Samples With DNA, Samples Without DNA, None Retained")
    description: str

    trials = Relation("ClinicalTrial", "HAS_SMAPLES_RETAINED_IN_BIOREPOSITORY", IN)


class Arm(GraphNode):
    """An arm or group of participants in a study."""
    name: str = id_field()
    description: Optional[str] = None

    model = Relation("Design", "BELONGS_TO_MODEL", OUT)
    trials = Relation("ClinicalTrial", "HAS_STUDY_ARMS", IN)


class City(GraphNode):
    """A city where facilities are located."""
    name: str = id_field()

    facilities = Relation("Facility", "LOCATED_IN", IN)


type_defs = SchemaModule(
    "ClinicalTrials",
    [
        ClinicalTrial,
        Link,
        ReferenceType,
        Facility,
        Intervention,
        StudyType,
        Sponsor,
        Collaborator,
        Response,
        Condition,
        Keyword,
        Phase,
        Purpose,
        StudyIdentification,
        Title,
        Status,
        StopReason,
        Start,
        Completed,
        Investigator,
        Responsible,
        Description,
        Design,
        ObservationPeriod,
        Outcome,
        StudyPopulation,
        Gender,
        AgeRange,
        InclusionCriteria,
        ExclusionCriteria,
        Contact,
        BioSpecimen,
        Arm,
        City,
    ],
    description="Clinical studies from ClinicalTrials.gov",
)
