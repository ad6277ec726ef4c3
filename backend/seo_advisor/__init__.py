"""Post SEO Advisor: heuristic content-quality analysis for article drafts."""
