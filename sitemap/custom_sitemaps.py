# sitemap/custom_sitemaps.py
import logging
import math
from xml.sax.saxutils import escape

from .collectors import (collect_static, collect_categories, collect_startups, collect_posts,
                         collect_news, validate_base_url)
from .entries import CHANGE_FREQUENCIES, format_timestamp

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
NEWS_NS = "http://www.google.com/schemas/sitemap-news/0.9"
# Sitemap protocol limit per file
SECTION_SIZE = 50000


def merge_entries(*sequences):
    """Concatenate entry sequences in order. The first entry seen for a url wins."""
    seen = set()
    merged = []
    for entries in sequences:
        for entry in entries:
            if not entry.url:
                logger.warning("sitemap: dropped entry without url %r", entry)
                continue
            if entry.url in seen:
                logger.debug("sitemap: duplicate url %s", entry.url)
                continue
            seen.add(entry.url)
            merged.append(entry)
    return merged


def format_priority(entry):
    """Return the priority as a one decimal string, or None when it is not a number."""
    try:
        priority = float(entry.priority)
    except (TypeError, ValueError):
        priority = math.nan
    if math.isnan(priority):
        logger.warning("sitemap: invalid priority %r for %s", entry.priority, entry.url)
        return None
    if not 0.0 <= priority <= 1.0:
        logger.warning("sitemap: priority %s out of range for %s", priority, entry.url)
        priority = min(max(priority, 0.0), 1.0)
    return f'{priority:.1f}'


def generate_sitemap(entries):
    xml_content = '<?xml version="1.0" encoding="UTF-8"?>\n'
    xml_content += f'<urlset xmlns="{SITEMAP_NS}">\n'

    for entry in merge_entries(entries):
        xml_content += '  <url>\n'
        xml_content += f'    <loc>{escape(entry.url)}</loc>\n'
        lastmod = format_timestamp(entry.last_modified)
        if lastmod:
            xml_content += f'    <lastmod>{escape(lastmod)}</lastmod>\n'
        if entry.change_frequency:
            if entry.change_frequency in CHANGE_FREQUENCIES:
                xml_content += f'    <changefreq>{entry.change_frequency}</changefreq>\n'
            else:
                logger.warning("sitemap: unknown changefreq %r for %s", entry.change_frequency, entry.url)
        priority = format_priority(entry) if entry.priority is not None else None
        if priority is not None:
            xml_content += f'    <priority>{priority}</priority>\n'
        xml_content += '  </url>\n'

    xml_content += '</urlset>\n'

    return xml_content


def generate_sitemap_index(sitemap_urls, lastmod=None):
    xml_content = '<?xml version="1.0" encoding="UTF-8"?>\n'
    xml_content += f'<sitemapindex xmlns="{SITEMAP_NS}">\n'

    for url in sitemap_urls:
        xml_content += '  <sitemap>\n'
        xml_content += f'    <loc>{escape(url)}</loc>\n'
        if lastmod:
            xml_content += f'    <lastmod>{escape(lastmod)}</lastmod>\n'
        xml_content += '  </sitemap>\n'

    xml_content += '</sitemapindex>\n'

    return xml_content


def generate_news_sitemap(articles, publication_name, language='en'):
    xml_content = '<?xml version="1.0" encoding="UTF-8"?>\n'
    xml_content += f'<urlset xmlns="{SITEMAP_NS}" xmlns:news="{NEWS_NS}">\n'

    for article in merge_entries(articles):
        xml_content += '  <url>\n'
        xml_content += f'    <loc>{escape(article.url)}</loc>\n'
        xml_content += '    <news:news>\n'
        xml_content += '      <news:publication>\n'
        xml_content += f'        <news:name>{escape(publication_name)}</news:name>\n'
        xml_content += f'        <news:language>{escape(language)}</news:language>\n'
        xml_content += '      </news:publication>\n'
        xml_content += f'      <news:publication_date>{escape(article.published)}</news:publication_date>\n'
        xml_content += f'      <news:title>{escape(article.title)}</news:title>\n'
        if article.keywords:
            xml_content += f'      <news:keywords>{escape(str(article.keywords))}</news:keywords>\n'
        xml_content += '    </news:news>\n'
        xml_content += '  </url>\n'

    xml_content += '</urlset>\n'

    return xml_content


def generate_robots_txt(sitemap_url, disallow_paths=(), extra_sitemaps=()):
    lines = ["User-agent: *"]
    lines += [f"Disallow: {path}" for path in disallow_paths]
    lines += ["", f"Sitemap: {sitemap_url}"]
    lines += [f"Sitemap: {url}" for url in extra_sitemaps]
    return "\n".join(lines) + "\n"


def paginate(entries, size=SECTION_SIZE):
    """Split already merged entries into sections of at most size entries."""
    if size < 1:
        raise ValueError("section size must be positive")
    return [entries[start:start + size] for start in range(0, len(entries), size)]


def build_manifest(base_url, pages, categories=(), startups=(), posts=(), approved_only=True,
                   startup_priority=0.8):
    """
    Run every collector and return the merged, deduplicated entry list.

    Order is static pages, categories, startups, posts. With approved_only
    off the startup rows are taken as given, so the caller must filter them.
    """
    base_url = validate_base_url(base_url)
    collections = [
        ('static', collect_static(base_url, pages)),
        ('category', collect_categories(base_url, categories)),
        ('startup', collect_startups(base_url, startups, priority=startup_priority,
                                     approved_only=approved_only)),
        ('post', collect_posts(base_url, posts)),
    ]
    for label, collection in collections:
        collection.log_skipped(label)
    return merge_entries(*[collection for label, collection in collections])


def build_news(base_url, posts):
    base_url = validate_base_url(base_url)
    collection = collect_news(base_url, posts)
    collection.log_skipped('news')
    return merge_entries(collection)
