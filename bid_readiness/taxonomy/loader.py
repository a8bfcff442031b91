"""Keyword taxonomies for criterion -> section and criterion -> persona mapping."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from bid_readiness.config import load_settings

from .classifier import CategoryClassifier, KeywordClassifier
from .personas import EVALUATOR_PERSONA_TYPES

logger = logging.getLogger(__name__)

DEFAULT_TAXONOMY_PATH = Path(__file__).resolve().parents[2] / "config" / "taxonomy.yaml"

FALLBACK_SECTION = "approach"
PERSONA_TIE_BREAK = ("technical", "procurement", "executive")

SECTION_LABELS = {
    "agency_overview": "Overview",
    "approach": "Approach",
    "team": "Team",
    "work_samples": "Work",
    "plan_timeline": "Plan",
    "pricing": "Pricing",
    "references": "Refs",
}

DEFAULT_SECTION_KEYWORDS: dict[str, list[str]] = {
    "agency_overview": [
        "experience", "qualifications", "capability", "background", "history",
        "company", "agency", "firm", "organization", "size", "stability",
        "credentials", "certifications",
    ],
    "approach": [
        "methodology", "approach", "process", "strategy", "innovation",
        "technical", "solution", "design", "execution", "quality",
    ],
    "team": [
        "team", "personnel", "staff", "expertise", "qualifications",
        "resources", "people", "roles", "skills", "talent",
    ],
    "work_samples": [
        "experience", "past performance", "track record", "similar projects",
        "portfolio", "case studies", "examples", "results", "outcomes",
    ],
    "plan_timeline": [
        "timeline", "schedule", "milestones", "deliverables", "project management",
        "phasing", "plan", "execution", "implementation",
    ],
    "pricing": [
        "cost", "price", "value", "budget", "investment", "fees",
        "rate", "compensation", "financial",
    ],
    "references": [
        "references", "reputation", "client satisfaction", "testimonials",
        "feedback", "endorsements",
    ],
}

DEFAULT_PERSONA_KEYWORDS: dict[str, list[str]] = {
    "procurement": [
        "price", "cost", "pricing", "budget", "fee", "rate", "contract", "terms",
        "conditions", "references", "past performance", "insurance", "compliance",
        "risk", "payment", "financial", "legal",
    ],
    "technical": [
        "technical", "approach", "methodology", "team", "expertise", "experience",
        "implementation", "process", "quality", "solution", "architecture", "design",
        "staff", "personnel", "timeline", "project management",
    ],
    "executive": [
        "strategic", "strategy", "value", "roi", "business", "outcomes", "partnership",
        "vision", "innovation", "competitive", "differentiation", "leadership",
        "growth", "transformation",
    ],
}


@dataclass(frozen=True)
class Taxonomy:
    """Classifiers used by the coverage analyzer.

    ``sections`` maps criterion text to the proposal sections expected to
    address it; ``personas`` infers which evaluator persona scores it.
    """

    sections: CategoryClassifier
    personas: CategoryClassifier
    fallback_section: str = FALLBACK_SECTION

    def suggested_sections(self, text: str) -> list[str]:
        return self.sections.matches(text) or [self.fallback_section]

    def expected_persona(self, text: str) -> str | None:
        return self.personas.classify(text)


def default_taxonomy() -> Taxonomy:
    return _build_taxonomy(DEFAULT_SECTION_KEYWORDS, DEFAULT_PERSONA_KEYWORDS)


def load_taxonomy(config_path: str | Path | None = None) -> Taxonomy:
    """Load keyword tables from YAML with safe fallback to the built-in tables."""
    selected_path = _resolve_taxonomy_path(config_path)
    raw = _load_taxonomy_file(selected_path)

    section_table = _parse_keyword_table(raw.get("section_keywords"), "section_keywords")
    if section_table is None:
        logger.warning("Invalid section_keywords at %s, use defaults", selected_path)
        section_table = DEFAULT_SECTION_KEYWORDS

    persona_table = _parse_keyword_table(raw.get("persona_keywords"), "persona_keywords")
    if persona_table is None or not set(persona_table) <= set(EVALUATOR_PERSONA_TYPES):
        logger.warning("Invalid persona_keywords at %s, use defaults", selected_path)
        persona_table = DEFAULT_PERSONA_KEYWORDS

    return _build_taxonomy(section_table, persona_table)


def get_short_section_label(section_key: str) -> str:
    return SECTION_LABELS.get(section_key, section_key)


def _build_taxonomy(
    section_table: dict[str, list[str]], persona_table: dict[str, list[str]]
) -> Taxonomy:
    return Taxonomy(
        sections=KeywordClassifier(section_table),
        personas=KeywordClassifier(persona_table, tie_break=PERSONA_TIE_BREAK),
    )


def _resolve_taxonomy_path(config_path: str | Path | None) -> Path:
    if config_path is not None:
        return Path(config_path)
    env_path = load_settings().get("BID_READINESS_TAXONOMY_PATH")
    if env_path:
        return Path(env_path)
    return DEFAULT_TAXONOMY_PATH


def _default_payload() -> dict[str, Any]:
    return {
        "section_keywords": DEFAULT_SECTION_KEYWORDS,
        "persona_keywords": DEFAULT_PERSONA_KEYWORDS,
    }


def _load_taxonomy_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        logger.warning("Taxonomy file missing at %s, use defaults", path)
        return _default_payload()
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        logger.error("Invalid YAML in taxonomy %s: %s", path, exc)
        return _default_payload()

    if not isinstance(payload, dict):
        return _default_payload()
    return payload


def _parse_keyword_table(payload: Any, name: str) -> dict[str, list[str]] | None:
    if not isinstance(payload, dict) or not payload:
        return None
    table: dict[str, list[str]] = {}
    for category, keywords in payload.items():
        if not isinstance(keywords, list) or not all(
            isinstance(item, str) and item.strip() for item in keywords
        ):
            logger.warning("Skip %s category '%s': invalid keywords", name, category)
            continue
        table[str(category)] = [item.strip() for item in keywords]
    return table or None
