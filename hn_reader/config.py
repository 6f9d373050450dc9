"""
Configuration constants and settings for HN Reader.
"""

# Hacker News web settings
HN_WEB_BASE_URL = "https://news.ycombinator.com"

# Algolia search API settings
HN_SEARCH_BASE_URL = "http://hn.algolia.com"
HN_SEARCH_ENDPOINT = "/api/v1/search"
HN_SEARCH_BY_DATE_ENDPOINT = "/api/v1/search_by_date"
HN_ITEM_ENDPOINT = "/api/v1/items/{}"
SEARCH_TAG = "story"

# Category path table for the server-rendered listings
WEB_CATEGORY_PATHS = {
    "top": "/news",
    "ask": "/ask",
    "show": "/show",
    "best": "/best",
    "active": "/active",
}

# Content tags for the date-ordered search listings
SEARCH_CATEGORY_TAGS = {
    "new": "story",
    "job": "job",
}

# Date formats
SEARCH_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"
WEB_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
DATE_FILTER_TEMPLATE = "created_at_i<{}"
DATE_FILTER_KEY = "numericFilters"

# HTTP settings
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
)
REQUEST_TIMEOUT = 10
CHUNK_SIZE = 8192

# Search settings
SEARCH_WORKERS = 2

# Display settings
INFO_SEPARATOR = " · "
MAX_TITLE_LENGTH = 60
