# sitemap/sources.py
# Rows handed to the collectors. A failed query is logged and yields no rows.
import logging
from django.db import DatabaseError
from directory.models import Category, Startup, Post

logger = logging.getLogger(__name__)


def fetch_rows(label, queryset, fields):
    try:
        return list(queryset.values(*fields))
    except DatabaseError:
        logger.exception("sitemap: could not fetch %s rows", label)
        return []


def fetch_categories():
    return fetch_rows('category', Category.objects.order_by('name'), ['slug'])


def fetch_startups(approved_only=True):
    queryset = Startup.objects.all()
    if approved_only:
        queryset = queryset.filter(status='approved')
    return fetch_rows('startup', queryset.order_by('-updated_at'),
                      ['id', 'slug', 'status', 'updated_at', 'created_at'])


def fetch_posts():
    return fetch_rows('post', Post.objects.order_by('-created_at'),
                      ['id', 'slug', 'title', 'updated_at', 'created_at'])
