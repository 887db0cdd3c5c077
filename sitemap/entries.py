# sitemap/entries.py
from collections import namedtuple
from datetime import date

CHANGE_FREQUENCIES = ('always', 'hourly', 'daily', 'weekly', 'monthly', 'yearly', 'never')

# One crawlable url. Only url is required.
Entry = namedtuple('Entry', ['url', 'last_modified', 'change_frequency', 'priority'],
                   defaults=(None, None, None))

# One row of the static page table. path is relative to the site url.
StaticPage = namedtuple('StaticPage', ['path', 'change_frequency', 'priority'])


def format_timestamp(value):
    """Return value as an ISO 8601 string, or None when there is no value."""
    if value is None or value == '':
        return None
    if isinstance(value, date):
        return value.isoformat()
    return str(value)

# One blog post in the news sitemap. published is an ISO 8601 string.
NewsArticle = namedtuple('NewsArticle', ['url', 'title', 'published', 'keywords'], defaults=(None,))
