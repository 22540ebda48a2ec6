import re
from typing import Dict, Final

from internal.model.constant import DIGEST_DAILY, DIGEST_WEEKLY

PERIOD_HOURS: Final[Dict[str, int]] = {
    DIGEST_DAILY: 24,
    DIGEST_WEEKLY: 7 * 24,
}

PERIOD_LABELS: Final[Dict[str, str]] = {
    DIGEST_DAILY: "Day",
    DIGEST_WEEKLY: "Week",
}

# Trailing ```json ... ``` block carrying summary and key_insights
METADATA_BLOCK_PATTERN: Final[re.Pattern] = re.compile(r"```json\s*([\s\S]*?)```\s*$")

DIGEST_SYSTEM_PROMPT: Final[str] = """You are a strategic communications analyst creating executive briefings on AI industry social sentiment. Write in a clear, engaging style that respects the reader's time while delivering genuine insights.

Your tone should be:
- Confident but not hyperbolic
- Data-informed but narrative-driven
- Strategic but accessible
- Direct about both opportunities and risks"""

DIGEST_USER_PROMPT: Final[str] = """Generate a {digest_type} digest report based on the following social intelligence data from {period_start} to {period_end}.

Total posts analyzed: {post_count}

THEMES:
{themes}

SENTIMENT:
{sentiment}

COMPETITOR ANALYSIS:
{competitors}

COMMUNITIES:
{communities}

ALERTS:
{alerts}

ENTERPRISE SIGNALS:
{enterprise}

Create a report with:
1. Executive Summary (3-4 sentences, the absolute must-know)
2. Key Themes This {period_label} (narrative format, not bullet points)
3. Sentiment & Brand Health (what's driving perception)
4. Competitive Landscape (how we stack up)
5. Enterprise Opportunities (actionable insights)
6. Risks & Watch Items (what could become problems)
7. Recommended Actions (specific next steps)

Format in Markdown. Be specific and cite data points. End with a JSON block containing:
```json
{{
  "summary": "One paragraph TL;DR",
  "key_insights": ["Insight 1", "Insight 2", "Insight 3", "Insight 4", "Insight 5"]
}}
```"""
