import re
from typing import Final

DEFAULT_CONTENT_CHAR_BUDGET: Final[int] = 2000

# Optional ``` fence, with any language tag, around the payload
JSON_FENCE_PATTERN: Final[re.Pattern] = re.compile(r"```[\w+-]*[ \t]*\n?([\s\S]*?)```")

POSTS_PLACEHOLDER: Final[str] = "{POSTS_JSON}"

ANALYSIS_SYSTEM_PROMPT: Final[str] = """You are a social intelligence analyst specializing in AI/ML industry discourse. Your job is to analyze batches of social media posts and extract actionable insights for an AI company tracking its market position.

You have deep expertise in:
- Identifying emerging themes and trends in tech discussions
- Detecting sentiment nuances (not just positive/negative, but WHY)
- Recognizing different audience segments (enterprise decision-makers, developers, hobbyists, researchers)
- Spotting competitive dynamics and market positioning
- Understanding the difference between noise and signal

Your analysis should be precise, data-driven, and actionable. Avoid generic observations."""

ANALYSIS_USER_PROMPT: Final[str] = """Analyze the following batch of social media posts about AI assistants and LLMs.

<posts>
{POSTS_JSON}
</posts>

Provide your analysis in the following JSON structure:

{
  "summary": "2-3 sentence executive summary of what's happening in this batch",

  "themes": [
    {
      "name": "Short theme name",
      "description": "What this theme is about",
      "frequency": <number of posts touching this theme>,
      "sentiment": <-1 to 1>,
      "audience_type": "enterprise|developer|hobbyist|researcher|general",
      "is_emerging": <true if this seems new/growing>,
      "example_post_ids": ["id1", "id2"],
      "why_it_matters": "Business relevance"
    }
  ],

  "sentiment_breakdown": {
    "overall": <-1 to 1>,
    "positive_count": <number>,
    "neutral_count": <number>,
    "negative_count": <number>,
    "key_drivers": ["What's driving positive sentiment", "What's driving negative sentiment"]
  },

  "competitor_analysis": [
    {
      "competitor": "claude|chatgpt|gemini|llama|mistral|other",
      "mention_count": <number>,
      "sentiment": <-1 to 1>,
      "key_narratives": ["What people are saying about this competitor"],
      "comparison_posts": ["post_ids where direct comparisons happen"]
    }
  ],

  "communities_identified": [
    {
      "name": "Community/segment name",
      "description": "Who they are",
      "primary_platform": "reddit|hackernews|bluesky",
      "audience_type": "enterprise|developer|hobbyist|researcher",
      "size_indicator": "small|medium|large",
      "sentiment_toward_claude": <-1 to 1>,
      "key_concerns": ["What they care about"],
      "opportunities": ["How to better serve them"],
      "gathering_places": ["Specific places where this community discusses: subreddit names (e.g. r/LocalLLaMA), Bluesky hashtags, HN keywords, etc."]
    }
  ],

  "alerts": [
    {
      "type": "sentiment_spike|emerging_theme|viral_post|competitor_news|pr_risk",
      "severity": "low|medium|high|critical",
      "title": "Alert title",
      "description": "What happened and why it matters",
      "recommended_action": "What to do about it",
      "related_post_ids": ["id1"]
    }
  ],

  "enterprise_signals": {
    "count": <posts that seem enterprise-relevant>,
    "topics": ["What enterprise folks are discussing"],
    "pain_points": ["Problems they're trying to solve"],
    "evaluation_criteria": ["What they care about when choosing AI tools"]
  }
}

Be specific and cite post IDs where relevant. If you don't have enough data for a section, say so rather than making things up."""
