"""
Fixed layout constants for the CV document.

Coordinates are PDF points with the origin at the bottom-left corner of
the page. Colors are normalized RGB triples.
"""

from __future__ import annotations

# Page geometry (A4)
PAGE_WIDTH = 595
PAGE_HEIGHT = 842
MARGIN = 60
LINE_HEIGHT = 12

CONTENT_WIDTH = PAGE_WIDTH - 2 * MARGIN
COLUMN_WIDTH = (PAGE_WIDTH - 3 * MARGIN) / 2
LEFT_COLUMN_X = MARGIN
RIGHT_COLUMN_X = MARGIN + COLUMN_WIDTH + MARGIN
TOP_Y = PAGE_HEIGHT - MARGIN

# Font sizes
TITLE_SIZE = 20
SUBTITLE_SIZE = 12
SECTION_TITLE_SIZE = 11
BODY_SIZE = 10
LINK_LABEL_SIZE = 9
SECONDARY_SIZE = 8

# Accent colors
GREEN = (0.02, 0.59, 0.41)  # #059669
GRAY = (0.28, 0.33, 0.42)  # #475569
LIGHT_GRAY = (0.58, 0.64, 0.72)  # #94a3b8

# Required-space budgets handed to the page-break check. These are
# overestimates of the block heights; pagination depends on them.
SECTION_HEADER_BUDGET = 40
ENTRY_BUDGET = 60
HIGHLIGHT_BUDGET = 30
SKILL_GROUP_BUDGET = 30
DESCRIPTION_LINE_HEIGHT = LINE_HEIGHT + 2
LANGUAGE_SLOT_HEIGHT = 16
CONTACT_ROW_HEIGHT = 12

# Vertical steps
SECTION_GAP = 10
SECTION_RULE_GAP = 5
SECTION_RULE_THICKNESS = 0.5
SECTION_HEADER_HEIGHT = SECTION_RULE_GAP + LINE_HEIGHT + 10
NAME_STEP = 25
TITLE_STEP = 18
ENTRY_TITLE_STEP = 16
ENTRY_ORG_STEP = 14
ENTRY_PERIOD_STEP = 16
ENTRY_GAP = 8
HIGHLIGHT_INDENT = 15
HIGHLIGHT_TEXT_OFFSET = 10
HIGHLIGHT_BULLET_OFFSET = 3
HIGHLIGHT_GAP = 3
SKILL_TITLE_STEP = 14
SKILL_GROUP_GAP = LINE_HEIGHT + 8
CONTACT_ITEM_GAP = 5

# Featured project block: title + description lines + metadata + link row
PROJECT_TITLE_STEP = 14
PROJECT_META_STEP = 12
PROJECT_LINK_ROW_STEP = 21

# Bullet glyph geometry, relative to the font size
BULLET_EM_WIDTH = 0.35
BULLET_X_OFFSET = 0.15
BULLET_Y_OFFSET = 0.3
BULLET_RADIUS = 2
SMALL_BULLET_RADIUS = 1.5

# Link hit-box: below the baseline and above it (cap height per size)
LINK_DESCENT = 2
LINK_ASCENT = 9
LINK_LABEL_ASCENT = 8
