"""Tests for notes/AI tactic detection and the merge."""

import pytest

from src.schemas.campaign_schema import MERGED_TACTICS, NOTES_TACTICS, AIAnalysis
from src.selection.rule_base import load_rule_base
from src.selection.tactic_detection import (
    detect_ai_flags,
    detect_notes_tactics,
    merge_tactics,
)


@pytest.fixture
def families():
    return load_rule_base().keyword_families


def _on(tactics: dict[str, bool]) -> list[str]:
    return [t for t, on in tactics.items() if on]


class TestNotesDetection:
    def test_empty_notes(self, families):
        detected = detect_notes_tactics("", families)
        assert list(detected) == list(NOTES_TACTICS)
        assert _on(detected) == []

    def test_case_insensitive(self, families):
        assert _on(detect_notes_tactics("Launch a DOOH flight", families)) == ["dooh"]

    @pytest.mark.parametrize("notes,tactic", [
        ("digital out-of-home screens", "dooh"),
        ("add a heat map", "dooh"),
        ("podcast sponsorship", "audio"),
        ("companion banner units", "audio"),
        ("target by zip code", "location"),
        ("top DMA list", "location"),
        ("competitive conquesting", "tv"),
        ("facebook and instagram", "social"),
        ("contextual placements", "programmatic"),
        ("amazon storefront", "commerce"),
        ("experian segments", "experian"),
        ("consumer link audiences", "experian"),
        ("YouTube pre-roll", "youtube"),
        ("homeowners near the store", "b2b"),
        ("adults 25+ only", "b2b"),
    ])
    def test_keyword_families(self, families, notes, tactic):
        assert detect_notes_tactics(notes, families)[tactic] is True

    def test_ctv_hits_tv_and_youtube(self, families):
        assert _on(detect_notes_tactics("CTV buy", families)) == ["tv", "youtube"]

    def test_substring_matches_inside_words(self, families):
        # Literal containment: known false positives are accepted behavior
        assert detect_notes_tactics("geology club", families)["location"] is True
        assert detect_notes_tactics("bottle design", families)["tv"] is True
        assert detect_notes_tactics("metadata review", families)["social"] is True
        assert detect_notes_tactics("shoal of fish", families)["b2b"] is True


class TestAIFlags:
    def test_passthrough(self):
        ai = detect_ai_flags({"DOOH": "true", "hasMeta": "true", "footfall": "false"})
        assert ai.dooh is True
        assert ai.hasMeta is True
        assert ai.footfall is False


class TestMerge:
    def _notes(self, **on) -> dict[str, bool]:
        notes = {t: False for t in NOTES_TACTICS}
        notes.update(on)
        return notes

    def test_merge_order(self):
        merged = merge_tactics(self._notes(), AIAnalysis())
        assert tuple(merged) == MERGED_TACTICS
        assert _on(merged) == []

    def test_ai_never_suppresses_notes(self):
        merged = merge_tactics(self._notes(dooh=True, programmatic=True), AIAnalysis())
        assert merged["dooh"] is True
        assert merged["programmatic"] is True

    def test_ai_adds_detection(self):
        merged = merge_tactics(self._notes(), AIAnalysis(audio=True, tv=True))
        assert _on(merged) == ["audio", "tv"]

    @pytest.mark.parametrize("flag", ["paid_social", "hasMeta", "hasTiktok", "hasX"])
    def test_social_sources(self, flag):
        assert merge_tactics(self._notes(), AIAnalysis(**{flag: True}))["social"] is True

    @pytest.mark.parametrize("flag", ["hasLinkedin", "hasPinterest", "hasReddit", "hasSnapchat"])
    def test_other_platforms_do_not_set_social(self, flag):
        assert merge_tactics(self._notes(), AIAnalysis(**{flag: True}))["social"] is False

    @pytest.mark.parametrize("flag", [
        "amazon", "albertsons", "kroger", "walmart", "instacart", "cvs", "dollar_general", "home_depot",
    ])
    def test_retail_media_sources(self, flag):
        assert merge_tactics(self._notes(), AIAnalysis(**{flag: True}))["retail_media"] is True

    @pytest.mark.parametrize("flag", ["roundel", "kinective", "macys", "meijer", "shipt", "walgreens"])
    def test_unmapped_retailers(self, flag):
        merged = merge_tactics(self._notes(), AIAnalysis(**{flag: True}))
        assert _on(merged) == []

    def test_location_sources(self):
        assert merge_tactics(self._notes(location=True), AIAnalysis())["location"] is True
        assert merge_tactics(self._notes(), AIAnalysis(footfall=True))["location"] is True
        assert merge_tactics(self._notes(), AIAnalysis(geo_targeting=True))["location"] is True

    def test_ai_only_tactics(self):
        merged = merge_tactics(
            self._notes(),
            AIAnalysis(healthcare=True, gaming=True, entertainment=True, competitor_density=True),
        )
        assert _on(merged) == ["healthcare", "gaming", "entertainment", "competitor"]

    def test_dco_feeds_creative_optimization(self):
        merged = merge_tactics(self._notes(), AIAnalysis(dco=True))
        assert _on(merged) == ["dco", "creative_optimization"]

    def test_basket_analysis_feeds_measurement_and_analytics(self):
        merged = merge_tactics(self._notes(), AIAnalysis(basket_analysis=True))
        assert _on(merged) == ["measurement", "advanced_analytics"]

    def test_programmatic_has_no_ai_signal(self):
        every_flag = AIAnalysis(**{name: True for name in AIAnalysis.model_fields})
        assert merge_tactics(self._notes(), every_flag)["programmatic"] is False
