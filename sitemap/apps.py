from django.apps import AppConfig


class SitemapConfig(AppConfig):
    name = 'sitemap'
