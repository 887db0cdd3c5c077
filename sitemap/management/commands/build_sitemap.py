# sitemap/management/commands/build_sitemap.py
# Offline generation: writes sitemap.xml, sitemap-news.xml and robots.txt to a directory,
# e.g. the static root served by nginx.
#   python manage.py build_sitemap --output /var/www/static

import os
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError
from sitemap.collectors import validate_base_url
from sitemap.custom_sitemaps import (build_manifest, build_news, generate_sitemap, generate_news_sitemap,
                                     generate_robots_txt)
from sitemap.sources import fetch_categories, fetch_startups, fetch_posts


class Command(BaseCommand):
    help = 'Write sitemap.xml, sitemap-news.xml and robots.txt for the current directory data'

    def add_arguments(self, parser):
        parser.add_argument('--output', required=True,
                            help='Directory receiving the sitemaps and robots.txt')
        parser.add_argument('--base-url', default=None,
                            help='Site url, defaults to settings.SITE_URL')
        parser.add_argument('--include-unapproved', action='store_true',
                            help='Also list startups that are not approved')

    def handle(self, *args, **options):
        output = options['output']
        if not os.path.isdir(output):
            raise CommandError(f'Output directory does not exist: {output}')

        try:
            base_url = validate_base_url(options['base_url'] or settings.SITE_URL)
        except ImproperlyConfigured as e:
            raise CommandError(str(e))

        # Startups are filtered in the query; the builder takes them as given.
        startups = fetch_startups(approved_only=not options['include_unapproved'])
        posts = fetch_posts()
        entries = build_manifest(
            base_url,
            settings.SITEMAP_STATIC_PAGES,
            categories=fetch_categories(),
            startups=startups,
            posts=posts,
            approved_only=False,
            startup_priority=0.7,
        )

        with open(os.path.join(output, 'sitemap.xml'), 'w', encoding='utf-8') as f:
            f.write(generate_sitemap(entries))
        articles = build_news(base_url, posts)
        with open(os.path.join(output, 'sitemap-news.xml'), 'w', encoding='utf-8') as f:
            f.write(generate_news_sitemap(articles, settings.SITEMAP_PUBLICATION_NAME, settings.SITEMAP_LANGUAGE))
        with open(os.path.join(output, 'robots.txt'), 'w', encoding='utf-8') as f:
            f.write(generate_robots_txt(f'{base_url}/sitemap.xml', settings.SITEMAP_DISALLOW_PATHS,
                                        extra_sitemaps=[f'{base_url}/sitemap-news.xml']))

        self.stdout.write(self.style.SUCCESS(f'Wrote {len(entries)} sitemap entries to {output}'))
