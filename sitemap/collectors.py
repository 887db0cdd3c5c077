# sitemap/collectors.py
"""
Turn already fetched rows into sitemap entries.

Collectors never touch the database. A row may be a mapping (such as the dicts
returned by ``QuerySet.values()``) or any object with the needed attributes. A row that
cannot produce a url is skipped and reported in ``Collection.skipped``;
it never aborts the rest of the pass.
"""
import logging
from collections import namedtuple
from collections.abc import Mapping
from urllib.parse import quote, urlsplit

from django.core.exceptions import ImproperlyConfigured

from .entries import Entry, NewsArticle, format_timestamp

logger = logging.getLogger(__name__)

# Ordered fallbacks: the first field holding a value wins.
IDENTIFIER_FALLBACK = ('slug', 'id')
TIMESTAMP_FALLBACK = ('updated_at', 'created_at')
PUBLISHED_FALLBACK = ('created_at', 'updated_at')

APPROVED = 'approved'

SkippedRow = namedtuple('SkippedRow', ['row', 'reason'])


class Collection:
    """Entries produced by one collector, plus the rows it had to skip."""

    def __init__(self, entries=None, skipped=None):
        self.entries = list(entries or [])
        self.skipped = list(skipped or [])

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def __repr__(self):
        return f'<Collection entries={len(self.entries)} skipped={len(self.skipped)}>'

    def log_skipped(self, label):
        for skipped in self.skipped:
            logger.info("sitemap: skipped %s row %r (%s)", label, skipped.row, skipped.reason)


def validate_base_url(base_url):
    if not base_url:
        raise ImproperlyConfigured("A site url is required to build the sitemap.")
    parts = urlsplit(base_url)
    if parts.scheme not in ('http', 'https') or not parts.netloc:
        raise ImproperlyConfigured(f"Site url must be absolute, got {base_url!r}")
    return base_url.rstrip('/')


def get_field(row, name):
    if isinstance(row, Mapping):
        value = row.get(name)
    else:
        value = getattr(row, name, None)
    if value == '':
        return None
    return value


def path_segment(value):
    return quote(str(value), safe='')


def first_field(row, names):
    for name in names:
        value = get_field(row, name)
        if value is not None:
            return value
    return None


def collect_static(base_url, pages):
    entries = [
        Entry(url=f"{base_url}{page.path}", change_frequency=page.change_frequency, priority=page.priority)
        for page in pages
    ]
    return Collection(entries)


def collect_categories(base_url, rows):
    collection = Collection()
    for row in rows:
        slug = get_field(row, 'slug')
        if slug is None:
            collection.skipped.append(SkippedRow(row, 'missing slug'))
            continue
        collection.entries.append(Entry(
            url=f"{base_url}/explore/{path_segment(slug)}",
            change_frequency='weekly',
            priority=0.8,
        ))
    return collection


def collect_entities(base_url, rows, kind, priority, change_frequency='weekly', status=None):
    """
    One entry per row at ``{base_url}/{kind}/{slug or id}``.

    lastmod comes from updated_at, then created_at, and is left out when the
    row has neither. When status is given, rows with another status are
    skipped.
    """
    collection = Collection()
    for row in rows:
        if status is not None and get_field(row, 'status') != status:
            collection.skipped.append(SkippedRow(row, f"status {get_field(row, 'status')}"))
            continue
        identifier = first_field(row, IDENTIFIER_FALLBACK)
        if identifier is None:
            collection.skipped.append(SkippedRow(row, 'missing identifier'))
            continue
        collection.entries.append(Entry(
            url=f"{base_url}/{kind}/{path_segment(identifier)}",
            last_modified=format_timestamp(first_field(row, TIMESTAMP_FALLBACK)),
            change_frequency=change_frequency,
            priority=priority,
        ))
    return collection


def collect_startups(base_url, rows, priority=0.8, approved_only=True):
    return collect_entities(base_url, rows, 'startup', priority,
                            status=APPROVED if approved_only else None)


def collect_posts(base_url, rows, priority=0.7):
    return collect_entities(base_url, rows, 'blog', priority)


def collect_news(base_url, rows, kind='blog'):
    """
    One news article per post. Title and publication date are required by
    the news sitemap format, so rows missing either are skipped.
    """
    collection = Collection()
    for row in rows:
        identifier = first_field(row, IDENTIFIER_FALLBACK)
        title = get_field(row, 'title')
        published = format_timestamp(first_field(row, PUBLISHED_FALLBACK))
        keywords = get_field(row, 'keywords')
        if isinstance(keywords, (list, tuple)):
            keywords = ', '.join(str(keyword) for keyword in keywords) or None
        if identifier is None:
            reason = 'missing identifier'
        elif title is None:
            reason = 'missing title'
        elif published is None:
            reason = 'missing publication date'
        else:
            collection.entries.append(NewsArticle(
                url=f"{base_url}/{kind}/{path_segment(identifier)}",
                title=str(title),
                published=published,
                keywords=keywords,
            ))
            continue
        collection.skipped.append(SkippedRow(row, reason))
    return collection
