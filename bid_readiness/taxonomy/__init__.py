from .classifier import CategoryClassifier, KeywordClassifier
from .loader import (
    DEFAULT_PERSONA_KEYWORDS,
    DEFAULT_SECTION_KEYWORDS,
    DEFAULT_TAXONOMY_PATH,
    SECTION_LABELS,
    Taxonomy,
    default_taxonomy,
    get_short_section_label,
    load_taxonomy,
)
from .personas import (
    DEFAULT_SECTION_PERSONAS,
    EVALUATOR_PERSONA_TYPES,
    PERSONA_LABELS,
    SectionPersonas,
    create_default_persona_settings,
    get_persona_for_section,
    get_persona_label,
)

__all__ = [
    "CategoryClassifier",
    "DEFAULT_PERSONA_KEYWORDS",
    "DEFAULT_SECTION_KEYWORDS",
    "DEFAULT_SECTION_PERSONAS",
    "DEFAULT_TAXONOMY_PATH",
    "EVALUATOR_PERSONA_TYPES",
    "KeywordClassifier",
    "PERSONA_LABELS",
    "SECTION_LABELS",
    "SectionPersonas",
    "Taxonomy",
    "create_default_persona_settings",
    "default_taxonomy",
    "get_persona_for_section",
    "get_persona_label",
    "get_short_section_label",
    "load_taxonomy",
]
