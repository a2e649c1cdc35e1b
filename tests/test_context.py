"""Tests for the industry context builder and search-term generator."""

import pytest

from src.schemas.campaign_schema import MERGED_TACTICS, IndustryContext
from src.selection.context_builder import build_industry_context
from src.selection.search_terms import generate_search_terms


def _tactics(*on: str) -> dict[str, bool]:
    return {t: t in on for t in MERGED_TACTICS}


def _context(**overrides) -> IndustryContext:
    data = dict(
        industry="Retail",
        sub_industry="E-commerce",
        brand_type="Consumer",
        campaign_type="B2C",
        complexity_tier="Standard",
        client_tier="Starter",
    )
    data.update(overrides)
    return IndustryContext(**data)


class TestIndustryContext:
    def test_default(self):
        ctx = build_industry_context("", "", _tactics(), "")
        assert ctx.model_dump() == {
            "industry": "Consumer Goods",
            "sub_industry": "General",
            "brand_type": "Consumer",
            "campaign_type": "B2C",
            "complexity_tier": "Standard",
            "client_tier": "Starter",
        }

    @pytest.mark.parametrize("brand,notes,on,expected", [
        ("", "", ("healthcare",), ("Healthcare", "Pharmaceutical")),
        ("", "", ("gaming",), ("Gaming", "Digital Entertainment")),
        ("", "", ("entertainment",), ("Entertainment", "Media & Entertainment")),
        ("First National Bank", "", (), ("Financial Services", "Banking")),
        ("", "Financial literacy push", (), ("Financial Services", "Banking")),
        ("AutoNation", "", (), ("Automotive", "Vehicle Manufacturers")),
        ("", "automotive dealers", (), ("Automotive", "Vehicle Manufacturers")),
        ("", "", ("retail_media",), ("Retail", "E-commerce")),
        ("", "", ("commerce",), ("Retail", "E-commerce")),
        ("", "craft spirits launch", (), ("Consumer Goods", "Spirits & Beverages")),
    ])
    def test_industry_chain(self, brand, notes, on, expected):
        ctx = build_industry_context(brand, notes, _tactics(*on), "")
        assert (ctx.industry, ctx.sub_industry) == expected

    def test_first_match_wins(self):
        ctx = build_industry_context("Big Bank", "", _tactics("gaming", "healthcare"), "")
        assert ctx.industry == "Healthcare"

        ctx = build_industry_context("Big Bank", "", _tactics("commerce"), "")
        assert ctx.industry == "Financial Services"

        ctx = build_industry_context("", "spirits and beverage", _tactics("commerce"), "")
        assert ctx.industry == "Retail"

    def test_brand_substring_match(self):
        # "car" inside an unrelated brand name still classifies as automotive
        ctx = build_industry_context("Oscar Mayer", "", _tactics(), "")
        assert ctx.industry == "Automotive"

    def test_b2b(self):
        ctx = build_industry_context("", "", _tactics("b2b"), "")
        assert ctx.brand_type == "Enterprise"
        assert ctx.campaign_type == "B2B"

    def test_enterprise_brand(self):
        ctx = build_industry_context("Acme Enterprise Solutions", "", _tactics(), "")
        assert ctx.brand_type == "Enterprise"
        assert ctx.campaign_type == "B2C"

    def test_complexity_tier_threshold(self):
        six = _tactics(*MERGED_TACTICS[:6])
        seven = _tactics(*MERGED_TACTICS[:7])
        assert build_industry_context("", "", six, "").complexity_tier == "Standard"
        assert build_industry_context("", "", seven, "").complexity_tier == "Complex"

    def test_client_tier(self):
        assert build_industry_context("", "", _tactics(), "$1,250,000").client_tier == "Enterprise"


class TestSearchTerms:
    def test_base_terms(self):
        terms = generate_search_terms(_tactics(), _context())
        assert terms == [
            "Retail E-commerce campaign case study results KPI",
            "Retail marketing best practices benchmarks",
        ]

    def test_priority_order(self):
        terms = generate_search_terms(_tactics("commerce", "tv", "dooh", "audio"), _context())
        assert terms[2:] == [
            "dooh Retail campaign performance metrics ROI",
            "tv Retail campaign performance metrics ROI",
            "commerce Retail campaign performance metrics ROI",
        ]

    def test_complex_and_enterprise(self):
        terms = generate_search_terms(
            _tactics(), _context(complexity_tier="Complex", client_tier="Enterprise"),
        )
        assert terms[2:] == [
            "Retail omnichannel campaign attribution measurement",
            "multi-channel campaign optimization strategies",
            "Retail enterprise client success stories premium campaigns",
        ]

    def test_hard_slice_at_six(self):
        terms = generate_search_terms(
            _tactics("dooh", "retail_media", "tv", "social", "commerce"),
            _context(complexity_tier="Complex", client_tier="Enterprise"),
        )
        assert len(terms) == 6
        # Later generated terms are dropped, not re-prioritized
        assert terms[2:] == [
            "dooh Retail campaign performance metrics ROI",
            "retail_media Retail campaign performance metrics ROI",
            "tv Retail campaign performance metrics ROI",
            "social Retail campaign performance metrics ROI",
        ]
