from __future__ import annotations

import logging
import textwrap

from bid_readiness.taxonomy import (
    DEFAULT_TAXONOMY_PATH,
    DEFAULT_SECTION_KEYWORDS,
    get_short_section_label,
    load_taxonomy,
)


def test_bundled_taxonomy_matches_builtin_tables():
    assert DEFAULT_TAXONOMY_PATH.exists()

    taxonomy = load_taxonomy()

    assert taxonomy.sections.categories == list(DEFAULT_SECTION_KEYWORDS)
    assert taxonomy.expected_persona("Pricing and Cost") == "procurement"


def test_load_taxonomy_from_yaml(tmp_path):
    config_path = tmp_path / "taxonomy.yaml"
    config_path.write_text(
        textwrap.dedent(
            """
            section_keywords:
              security: [encryption, access control]
              approach: [method]
            persona_keywords:
              technical: [encryption]
              executive: [vision]
            """
        ).strip(),
        encoding="utf-8",
    )

    taxonomy = load_taxonomy(config_path)

    assert taxonomy.suggested_sections("Encryption at rest") == ["security"]
    assert taxonomy.suggested_sections("Pricing") == ["approach"]
    assert taxonomy.expected_persona("Long-term vision") == "executive"


def test_load_taxonomy_reads_environment_path(tmp_path, monkeypatch):
    config_path = tmp_path / "env_taxonomy.yaml"
    config_path.write_text(
        "section_keywords:\n  pricing: [widgets]\npersona_keywords:\n  procurement: [widgets]\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("BID_READINESS_TAXONOMY_PATH", str(config_path))

    taxonomy = load_taxonomy()

    assert taxonomy.suggested_sections("Widgets") == ["pricing"]


def test_load_taxonomy_missing_file_uses_defaults(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        taxonomy = load_taxonomy(tmp_path / "missing.yaml")

    assert "Taxonomy file missing" in caplog.text
    assert taxonomy.expected_persona("Technical Approach") == "technical"


def test_load_taxonomy_invalid_yaml_uses_defaults(tmp_path, caplog):
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("section_keywords: [unclosed", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        taxonomy = load_taxonomy(config_path)

    assert "Invalid YAML" in caplog.text
    assert taxonomy.suggested_sections("Pricing and cost") == ["pricing"]


def test_load_taxonomy_rejects_unknown_personas(tmp_path, caplog):
    config_path = tmp_path / "personas.yaml"
    config_path.write_text(
        "persona_keywords:\n  legal: [contract]\n",
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING):
        taxonomy = load_taxonomy(config_path)

    assert "Invalid persona_keywords" in caplog.text
    assert "Invalid section_keywords" in caplog.text
    assert taxonomy.expected_persona("Contract terms") == "procurement"


def test_load_taxonomy_skips_categories_with_bad_keywords(tmp_path, caplog):
    config_path = tmp_path / "partial.yaml"
    config_path.write_text(
        "section_keywords:\n  pricing: [cost]\n  team: staff\n",
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING):
        taxonomy = load_taxonomy(config_path)

    assert "team" in caplog.text
    assert taxonomy.sections.categories == ["pricing"]


def test_short_section_labels():
    assert get_short_section_label("agency_overview") == "Overview"
    assert get_short_section_label("references") == "Refs"
    assert get_short_section_label("custom_section") == "custom_section"
