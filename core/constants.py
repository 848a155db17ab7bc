"""
Application constants for BestChoice.

Field length limits and numeric bounds shared by the request schemas,
plus the preference business-rule limits.
"""

# =============================================================================
# Keyword
# =============================================================================

KEYWORD_LABEL_MAX_LENGTH = 100
KEYWORD_DESCRIPTION_MAX_LENGTH = 300
KEYWORD_DOMAIN_MAX_LENGTH = 50

# =============================================================================
# Skill
# =============================================================================

SKILL_NAME_MAX_LENGTH = 100
SKILL_DESCRIPTION_MAX_LENGTH = 500
SKILL_CATEGORY_MAX_LENGTH = 50
SKILL_LEVEL_MIN = 1
SKILL_LEVEL_MAX = 5


# =============================================================================
# Preference
# =============================================================================

RANK_MIN = 1
RANK_MAX = 10
MOTIVATION_MAX_LENGTH = 1000
COMMENT_MAX_LENGTH = 500
MAX_PREFERENCES_PER_STUDENT = 10
