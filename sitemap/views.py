import logging
from django.conf import settings
from django.http import HttpResponse, Http404
from django.urls import reverse
from django.utils.cache import patch_cache_control
from django.views.decorators.http import require_GET
from .collectors import validate_base_url
from .custom_sitemaps import (build_manifest, build_news, generate_sitemap, generate_sitemap_index,
                              generate_news_sitemap, generate_robots_txt, paginate)
from .sources import fetch_categories, fetch_startups, fetch_posts

logger = logging.getLogger(__name__)


def get_sections():
    entries = build_manifest(
        settings.SITE_URL,
        settings.SITEMAP_STATIC_PAGES,
        categories=fetch_categories(),
        startups=fetch_startups(),
        posts=fetch_posts(),
    )
    return paginate(entries, settings.SITEMAP_SECTION_SIZE)


def crawler_response(content, content_type):
    response = HttpResponse(content, content_type=content_type)
    patch_cache_control(response, public=True, max_age=settings.SITEMAP_CACHE_SECONDS)
    return response


@require_GET
def sitemap_index(request):
    base_url = validate_base_url(settings.SITE_URL)
    sections = get_sections()
    if len(sections) > 1:
        urls = [f"{base_url}{reverse('sitemap_section', args=[i])}" for i in range(1, len(sections) + 1)]
        xml_content = generate_sitemap_index(urls)
    else:
        xml_content = generate_sitemap(sections[0] if sections else [])
    logger.info("sitemap.xml served (%d sections)", len(sections), extra={'request': request})
    return crawler_response(xml_content, 'application/xml')


@require_GET
def sitemap_section(request, section):
    sections = get_sections()
    if not 1 <= section <= len(sections):
        raise Http404(f"No sitemap section {section}")
    logger.info("sitemap-%d.xml served", section, extra={'request': request})
    return crawler_response(generate_sitemap(sections[section - 1]), 'application/xml')


@require_GET
def sitemap_news(request):
    articles = build_news(settings.SITE_URL, fetch_posts())
    xml_content = generate_news_sitemap(articles, settings.SITEMAP_PUBLICATION_NAME, settings.SITEMAP_LANGUAGE)
    logger.info("sitemap-news.xml served (%d articles)", len(articles), extra={'request': request})
    return crawler_response(xml_content, 'application/xml')


@require_GET
def robots_txt(request):
    base_url = validate_base_url(settings.SITE_URL)
    sitemap_url = f"{base_url}{reverse('sitemap_index')}"
    news_url = f"{base_url}{reverse('sitemap_news')}"
    content = generate_robots_txt(sitemap_url, settings.SITEMAP_DISALLOW_PATHS, extra_sitemaps=[news_url])
    return crawler_response(content, 'text/plain')
