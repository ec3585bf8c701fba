"""Static keyword-association tables used by search and specialization filters.

Three tables, all read-only for the life of the process:

* ``TERM_EXPANSIONS`` maps short seed words to related phrases. A search
  query picks up every seed that occurs inside it.
* ``SPECIALIZATION_KEYWORDS`` maps the lowercase basic specialization
  options ("seo", "social", ...) to phrases looked for in free text.
* ``ENHANCED_SPECIALIZATION_KEYWORDS`` maps the full enhanced option
  phrases to longer phrases looked for in free text.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


def _freeze(table: dict[str, tuple[str, ...]]) -> Mapping[str, frozenset[str]]:
    return MappingProxyType({key: frozenset(values) for key, values in table.items()})


TERM_EXPANSIONS: Mapping[str, frozenset[str]] = _freeze({
    "seo": ("search engine optimization", "organic search", "keyword research", "link building", "sem"),
    "sem": ("search engine marketing", "google ads", "paid search", "ppc", "seo"),
    "ppc": ("pay per click", "paid search", "google ads", "bing ads", "paid media"),
    "social": ("social media", "instagram", "linkedin", "tiktok", "facebook", "community management"),
    "content": ("content marketing", "copywriting", "blog", "storytelling", "editorial"),
    "email": ("email marketing", "newsletter", "mailchimp", "klaviyo", "drip campaigns", "lifecycle"),
    "lead": ("lead generation", "demand generation", "lead nurturing", "inbound", "prospecting"),
    "b2b": ("business to business", "account based marketing", "abm", "saas", "enterprise"),
    "b2c": ("business to consumer", "consumer", "ecommerce", "retail", "d2c"),
    "growth": ("growth marketing", "growth hacking", "experimentation", "a/b testing", "acquisition"),
    "analytics": ("google analytics", "data analysis", "reporting", "dashboards", "attribution"),
    "data": ("data analysis", "sql", "analytics", "insights", "reporting"),
    "brand": ("branding", "brand strategy", "brand identity", "positioning", "creative direction"),
    "creative": ("creative direction", "design", "visual identity", "campaign concepts", "art direction"),
    "design": ("graphic design", "figma", "ui", "visual design", "canva"),
    "performance": ("performance marketing", "paid acquisition", "roas", "cpa", "media buying"),
    "paid": ("paid media", "paid social", "paid search", "media buying", "ad spend"),
    "advertising": ("ads", "google ads", "meta ads", "facebook ads", "ad campaigns"),
    "automation": ("marketing automation", "hubspot", "marketo", "workflows", "zapier"),
    "crm": ("customer relationship management", "hubspot", "salesforce", "pipeline management", "segmentation"),
    "ecommerce": ("e-commerce", "shopify", "online store", "conversion rate optimization", "marketplaces"),
    "conversion": ("conversion rate optimization", "cro", "landing pages", "funnel optimization", "a/b testing"),
    "influencer": ("influencer marketing", "creator partnerships", "ugc", "ambassador programs", "affiliate"),
    "affiliate": ("affiliate marketing", "partnerships", "referral programs", "commission", "influencer"),
    "video": ("video marketing", "youtube", "video production", "editing", "short-form video"),
    "product": ("product marketing", "go-to-market", "positioning", "launches", "messaging"),
    "strategy": ("marketing strategy", "go-to-market", "planning", "roadmap", "positioning"),
    "event": ("events", "webinars", "trade shows", "conferences", "field marketing"),
    "community": ("community management", "community building", "discord", "engagement", "ambassador programs"),
    "copy": ("copywriting", "ad copy", "messaging", "content writing", "storytelling"),
})

SPECIALIZATION_KEYWORDS: Mapping[str, frozenset[str]] = _freeze({
    "seo": (
        "search engine optimization", "seo strategy", "organic traffic", "keyword research",
        "technical seo", "link building", "on-page optimization",
    ),
    "social": (
        "social media", "community management", "instagram", "linkedin", "tiktok",
        "social strategy", "content calendar",
    ),
    "content": (
        "content marketing", "content strategy", "copywriting", "blog posts",
        "storytelling", "editorial calendar",
    ),
    "email": (
        "email marketing", "email campaigns", "newsletter", "lifecycle marketing",
        "drip campaigns", "klaviyo", "mailchimp",
    ),
    "analytics": (
        "google analytics", "data analysis", "marketing analytics", "attribution",
        "dashboards", "kpi reporting",
    ),
    "brand": (
        "brand strategy", "brand identity", "branding", "brand positioning",
        "creative direction", "visual identity",
    ),
    "performance": (
        "performance marketing", "paid acquisition", "paid media", "roas",
        "media buying", "google ads", "meta ads",
    ),
    "automation": (
        "marketing automation", "hubspot", "marketo", "automated workflows",
        "lead scoring", "zapier",
    ),
    "lead generation": (
        "lead generation", "demand generation", "lead nurturing", "inbound marketing",
        "pipeline generation", "mql",
    ),
    "growth": (
        "growth marketing", "growth hacking", "experimentation", "a/b testing",
        "user acquisition", "retention",
    ),
    "ppc": (
        "pay per click", "paid search", "google ads", "bing ads", "search campaigns",
    ),
    "influencer": (
        "influencer marketing", "creator partnerships", "ugc", "ambassador program",
        "influencer campaigns",
    ),
    "product": (
        "product marketing", "go-to-market", "product launch", "positioning",
        "messaging framework",
    ),
    "crm": (
        "crm", "salesforce", "hubspot crm", "customer segmentation",
        "customer lifecycle",
    ),
    "ecommerce": (
        "e-commerce", "ecommerce", "shopify", "conversion rate optimization",
        "online store", "marketplace",
    ),
})

ENHANCED_SPECIALIZATION_KEYWORDS: Mapping[str, frozenset[str]] = _freeze({
    "search engine optimization strategy": (
        "seo strategy development", "technical seo audits", "organic search growth",
        "keyword research and mapping", "link building campaigns",
    ),
    "social media community management": (
        "social media community building", "community engagement programs",
        "social content calendars", "audience growth on social platforms",
        "social listening and moderation",
    ),
    "content strategy and storytelling": (
        "content strategy development", "brand storytelling", "editorial planning",
        "long-form content production", "thought leadership content",
    ),
    "email marketing and lifecycle automation": (
        "email lifecycle campaigns", "marketing automation workflows",
        "newsletter program management", "drip and nurture sequences",
        "email deliverability optimization",
    ),
    "marketing analytics and data insights": (
        "marketing performance analysis", "multi-touch attribution",
        "analytics dashboard design", "data-driven decision making",
        "campaign reporting and insights",
    ),
    "brand strategy and creative direction": (
        "brand positioning strategy", "creative campaign direction",
        "visual identity development", "brand guidelines creation",
    ),
    "performance marketing and paid acquisition": (
        "paid acquisition campaigns", "return on ad spend optimization",
        "paid social advertising", "google ads campaign management",
        "media budget allocation",
    ),
    "lead generation and demand generation": (
        "lead generation campaigns", "demand generation programs",
        "lead nurturing workflows", "inbound pipeline growth",
        "account based marketing",
    ),
    "growth marketing and experimentation": (
        "growth experimentation", "a/b testing programs", "funnel optimization",
        "user acquisition strategy", "retention and activation",
    ),
    "product marketing and go-to-market": (
        "go-to-market strategy", "product launch planning", "product positioning",
        "competitive messaging", "sales enablement materials",
    ),
})
