"""Search queries for the downstream knowledge-search step."""

from collections.abc import Mapping

from src.schemas.campaign_schema import IndustryContext

MAX_SEARCH_TERMS = 6

# Tactics that earn their own query, in query order
PRIORITY_TACTICS = ("dooh", "retail_media", "tv", "social", "commerce")


def generate_search_terms(tactics: Mapping[str, bool], context: IndustryContext) -> list[str]:
    """Build up to six queries from the industry context and detected tactics.

    Queries are generated in a fixed order (industry base terms, priority
    tactics, complexity terms, enterprise term) and the list is then cut at
    six. Later queries are dropped first, whatever they are.
    """
    industry = context.industry
    terms = [
        f"{industry} {context.sub_industry} campaign case study results KPI",
        f"{industry} marketing best practices benchmarks",
    ]

    for tactic in PRIORITY_TACTICS:
        if tactics.get(tactic):
            terms.append(f"{tactic} {industry} campaign performance metrics ROI")

    if context.complexity_tier == "Complex":
        terms.append(f"{industry} omnichannel campaign attribution measurement")
        terms.append("multi-channel campaign optimization strategies")

    if context.client_tier == "Enterprise":
        terms.append(f"{industry} enterprise client success stories premium campaigns")

    return terms[:MAX_SEARCH_TERMS]
