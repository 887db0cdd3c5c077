import os
import tempfile
from datetime import datetime, timezone
from io import StringIO
from types import MappingProxyType, SimpleNamespace
from unittest import mock
from xml.etree import ElementTree

from django.core.exceptions import ImproperlyConfigured
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db import DatabaseError
from django.test import SimpleTestCase, TestCase, override_settings

from directory.models import Category, Startup, Post
from utils import config
from .collectors import (collect_static, collect_categories, collect_entities, collect_startups,
                         collect_posts, collect_news, validate_base_url, IDENTIFIER_FALLBACK,
                         TIMESTAMP_FALLBACK, PUBLISHED_FALLBACK)
from .custom_sitemaps import (merge_entries, generate_sitemap, generate_sitemap_index,
                              generate_news_sitemap, generate_robots_txt, paginate, build_manifest,
                              build_news)
from .entries import Entry, NewsArticle, StaticPage, format_timestamp
from .sources import fetch_rows

BASE_URL = 'https://example.com'
NS = {
    'sm': 'http://www.sitemaps.org/schemas/sitemap/0.9',
    'news': 'http://www.google.com/schemas/sitemap-news/0.9',
}


def locs(xml_content):
    root = ElementTree.fromstring(xml_content.encode('utf-8'))
    return [loc.text for loc in root.findall('sm:url/sm:loc', NS)]


class EntryTest(SimpleTestCase):
    def test_optional_fields_default_to_none(self):
        entry = Entry(f'{BASE_URL}/about')
        self.assertIsNone(entry.last_modified)
        self.assertIsNone(entry.change_frequency)
        self.assertIsNone(entry.priority)

    def test_entries_are_immutable(self):
        entry = Entry(f'{BASE_URL}/about', priority=0.5)
        with self.assertRaises(AttributeError):
            entry.priority = 0.9

    def test_format_timestamp(self):
        self.assertIsNone(format_timestamp(None))
        self.assertIsNone(format_timestamp(''))
        self.assertEqual(format_timestamp('2024-01-01T00:00:00Z'), '2024-01-01T00:00:00Z')
        self.assertEqual(format_timestamp(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)),
                         '2024-01-02T03:04:05+00:00')


class BaseUrlTest(SimpleTestCase):
    def test_trailing_slash_is_stripped(self):
        self.assertEqual(validate_base_url('https://example.com/'), BASE_URL)

    def test_missing_base_url(self):
        with self.assertRaises(ImproperlyConfigured):
            validate_base_url('')
        with self.assertRaises(ImproperlyConfigured):
            validate_base_url(None)

    def test_relative_base_url(self):
        with self.assertRaises(ImproperlyConfigured):
            validate_base_url('example.com')


class StaticCollectorTest(SimpleTestCase):
    def test_default_pages(self):
        collection = collect_static(BASE_URL, config.STATIC_PAGES)
        self.assertEqual(len(collection), 10)
        self.assertEqual(collection.entries[0], Entry(f'{BASE_URL}/', None, 'daily', 1.0))
        self.assertEqual(collection.skipped, [])

    def test_injected_pages(self):
        pages = [StaticPage('/pricing', 'monthly', 0.4)]
        self.assertEqual(list(collect_static(BASE_URL, pages)),
                         [Entry(f'{BASE_URL}/pricing', None, 'monthly', 0.4)])


class CategoryCollectorTest(SimpleTestCase):
    def test_one_entry_per_row_in_input_order(self):
        collection = collect_categories(BASE_URL, [{'slug': 'saas'}, {'slug': 'fintech'}])
        self.assertEqual([entry.url for entry in collection],
                         [f'{BASE_URL}/explore/saas', f'{BASE_URL}/explore/fintech'])
        self.assertEqual(collection.entries[0].change_frequency, 'weekly')
        self.assertEqual(collection.entries[0].priority, 0.8)

    def test_slugs_are_percent_encoded(self):
        collection = collect_categories(BASE_URL, [{'slug': 'ai tools'}, {'slug': 'café'}])
        self.assertEqual([entry.url for entry in collection],
                         [f'{BASE_URL}/explore/ai%20tools', f'{BASE_URL}/explore/caf%C3%A9'])
        for loc in locs(generate_sitemap(collection)):
            self.assertNotIn(' ', loc)

    def test_row_without_slug_is_skipped(self):
        collection = collect_categories(BASE_URL, [{'slug': ''}, {'name': 'Misc'}, {'slug': 'ai'}])
        self.assertEqual(len(collection), 1)
        self.assertEqual([skipped.reason for skipped in collection.skipped], ['missing slug', 'missing slug'])


class EntityCollectorTest(SimpleTestCase):
    def test_fallback_order(self):
        self.assertEqual(IDENTIFIER_FALLBACK, ('slug', 'id'))
        self.assertEqual(TIMESTAMP_FALLBACK, ('updated_at', 'created_at'))

    def test_startup_with_slug(self):
        row = {'id': 's1', 'slug': 'acme', 'status': 'approved', 'updated_at': '2024-01-01T00:00:00Z'}
        [entry] = collect_startups(BASE_URL, [row])
        self.assertEqual(entry.url, f'{BASE_URL}/startup/acme')
        self.assertEqual(entry.last_modified, '2024-01-01T00:00:00Z')
        self.assertEqual(entry.change_frequency, 'weekly')
        self.assertEqual(entry.priority, 0.8)

    def test_startup_without_slug_uses_id(self):
        [entry] = collect_startups(BASE_URL, [{'id': 's2', 'status': 'approved'}])
        self.assertEqual(entry.url, f'{BASE_URL}/startup/s2')
        self.assertIsNone(entry.last_modified)

    def test_blank_slug_falls_back_to_id(self):
        [entry] = collect_posts(BASE_URL, [{'id': 7, 'slug': ''}])
        self.assertEqual(entry.url, f'{BASE_URL}/blog/7')

    def test_created_at_used_when_not_updated(self):
        [entry] = collect_posts(BASE_URL, [{'id': 1, 'updated_at': None, 'created_at': '2023-05-01'}])
        self.assertEqual(entry.last_modified, '2023-05-01')
        self.assertEqual(entry.priority, 0.7)

    def test_attribute_rows(self):
        row = SimpleNamespace(id=3, slug='hello', updated_at=datetime(2024, 3, 1, tzinfo=timezone.utc))
        [entry] = collect_posts(BASE_URL, [row])
        self.assertEqual(entry.url, f'{BASE_URL}/blog/hello')
        self.assertEqual(entry.last_modified, '2024-03-01T00:00:00+00:00')

    def test_read_only_mapping_rows(self):
        [entry] = collect_posts(BASE_URL, [MappingProxyType({'id': 1, 'slug': 'x'})])
        self.assertEqual(entry.url, f'{BASE_URL}/blog/x')

    def test_identifier_with_slash_stays_one_segment(self):
        [entry] = collect_startups(BASE_URL, [{'id': 'a/b', 'status': 'approved'}])
        self.assertEqual(entry.url, f'{BASE_URL}/startup/a%2Fb')

    def test_row_without_identifier_is_skipped(self):
        rows = [{'status': 'approved'}, {'id': 's3', 'status': 'approved'}]
        collection = collect_startups(BASE_URL, rows)
        self.assertEqual([entry.url for entry in collection], [f'{BASE_URL}/startup/s3'])
        self.assertEqual(collection.skipped[0].reason, 'missing identifier')
        self.assertIs(collection.skipped[0].row, rows[0])

    def test_unapproved_startups_are_skipped(self):
        rows = [{'id': 1, 'status': 'pending'}, {'id': 2, 'status': 'approved'}, {'id': 3}]
        collection = collect_startups(BASE_URL, rows)
        self.assertEqual([entry.url for entry in collection], [f'{BASE_URL}/startup/2'])
        self.assertEqual([skipped.reason for skipped in collection.skipped], ['status pending', 'status None'])

    def test_status_filter_off(self):
        rows = [{'id': 1, 'status': 'pending'}, {'id': 2}]
        collection = collect_startups(BASE_URL, rows, priority=0.7, approved_only=False)
        self.assertEqual(len(collection), 2)
        self.assertEqual(collection.entries[0].priority, 0.7)

    def test_custom_kind(self):
        [entry] = collect_entities(BASE_URL, [{'slug': 'jane'}], 'founders', 0.6, change_frequency='monthly')
        self.assertEqual(entry, Entry(f'{BASE_URL}/founders/jane', None, 'monthly', 0.6))


class MergeTest(SimpleTestCase):
    def test_first_occurrence_wins(self):
        first = Entry(f'{BASE_URL}/startup/acme', '2024-01-01', 'weekly', 0.8)
        second = Entry(f'{BASE_URL}/startup/acme', '2025-01-01', 'daily', 0.2)
        self.assertEqual(merge_entries([first], [second]), [first])

    def test_duplicate_slugs_from_one_collector(self):
        rows = [{'id': 1, 'slug': 'acme', 'status': 'approved'}, {'id': 2, 'slug': 'acme', 'status': 'approved'}]
        xml_content = generate_sitemap(collect_startups(BASE_URL, rows))
        self.assertEqual(xml_content.count('<url>'), 1)

    def test_exact_string_comparison(self):
        entries = [Entry(f'{BASE_URL}/about'), Entry(f'{BASE_URL}/about/'), Entry(f'{BASE_URL}/About')]
        self.assertEqual(len(merge_entries(entries)), 3)

    def test_empty_url_is_dropped(self):
        self.assertEqual(merge_entries([Entry(''), Entry(f'{BASE_URL}/')]), [Entry(f'{BASE_URL}/')])


class SitemapRenderTest(SimpleTestCase):
    def test_empty_sitemap(self):
        self.assertEqual(generate_sitemap([]),
                         '<?xml version="1.0" encoding="UTF-8"?>\n'
                         '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
                         '</urlset>\n')

    def test_full_entry(self):
        xml_content = generate_sitemap([Entry(f'{BASE_URL}/blog/a', '2024-01-01T00:00:00Z', 'weekly', 0.7)])
        self.assertIn('  <url>\n'
                      '    <loc>https://example.com/blog/a</loc>\n'
                      '    <lastmod>2024-01-01T00:00:00Z</lastmod>\n'
                      '    <changefreq>weekly</changefreq>\n'
                      '    <priority>0.7</priority>\n'
                      '  </url>\n', xml_content)

    def test_absent_fields_are_not_emitted(self):
        xml_content = generate_sitemap([Entry(f'{BASE_URL}/about')])
        self.assertNotIn('<lastmod', xml_content)
        self.assertNotIn('<changefreq', xml_content)
        self.assertNotIn('<priority', xml_content)

    def test_zero_priority_is_emitted(self):
        self.assertIn('<priority>0.0</priority>', generate_sitemap([Entry(f'{BASE_URL}/a', priority=0)]))

    def test_out_of_range_priority_is_clamped(self):
        with self.assertLogs('sitemap.custom_sitemaps', 'WARNING'):
            xml_content = generate_sitemap([Entry(f'{BASE_URL}/a', priority=1.5),
                                            Entry(f'{BASE_URL}/b', priority=-1)])
        self.assertIn('<priority>1.0</priority>', xml_content)
        self.assertIn('<priority>0.0</priority>', xml_content)

    def test_priority_is_a_plain_decimal(self):
        xml_content = generate_sitemap([Entry(f'{BASE_URL}/a', priority=0.00001),
                                        Entry(f'{BASE_URL}/b', priority='0.5')])
        self.assertIn('<priority>0.0</priority>', xml_content)
        self.assertIn('<priority>0.5</priority>', xml_content)
        self.assertNotIn('e-05', xml_content)

    def test_unusable_priority_is_omitted(self):
        with self.assertLogs('sitemap.custom_sitemaps', 'WARNING') as logs:
            xml_content = generate_sitemap([Entry(f'{BASE_URL}/a', priority=float('nan')),
                                            Entry(f'{BASE_URL}/b', priority='high')])
        self.assertNotIn('<priority', xml_content)
        self.assertEqual(locs(xml_content), [f'{BASE_URL}/a', f'{BASE_URL}/b'])
        self.assertEqual(len(logs.output), 2)

    def test_unknown_changefreq_is_omitted(self):
        with self.assertLogs('sitemap.custom_sitemaps', 'WARNING'):
            xml_content = generate_sitemap([Entry(f'{BASE_URL}/a', change_frequency='fortnightly')])
        self.assertNotIn('<changefreq', xml_content)

    def test_urls_are_escaped(self):
        xml_content = generate_sitemap([Entry(f'{BASE_URL}/explore?category=ai&page=2')])
        self.assertIn('<loc>https://example.com/explore?category=ai&amp;page=2</loc>', xml_content)
        self.assertEqual(locs(xml_content), [f'{BASE_URL}/explore?category=ai&page=2'])

    def test_rendering_is_idempotent(self):
        entries = build_manifest(BASE_URL, config.STATIC_PAGES, categories=[{'slug': 'ai'}])
        self.assertEqual(generate_sitemap(entries), generate_sitemap(entries))

    def test_sitemap_index(self):
        xml_content = generate_sitemap_index([f'{BASE_URL}/sitemap-1.xml', f'{BASE_URL}/sitemap-2.xml'],
                                             lastmod='2024-01-01')
        root = ElementTree.fromstring(xml_content.encode('utf-8'))
        self.assertEqual([loc.text for loc in root.findall('sm:sitemap/sm:loc', NS)],
                         [f'{BASE_URL}/sitemap-1.xml', f'{BASE_URL}/sitemap-2.xml'])
        self.assertEqual(xml_content.count('<lastmod>2024-01-01</lastmod>'), 2)

    def test_paginate(self):
        self.assertEqual(paginate([1, 2, 3, 4, 5], 2), [[1, 2], [3, 4], [5]])
        self.assertEqual(paginate([], 2), [])
        with self.assertRaises(ValueError):
            paginate([1], 0)


class RobotsRenderTest(SimpleTestCase):
    def test_disallow_paths_in_order(self):
        self.assertEqual(generate_robots_txt(f'{BASE_URL}/sitemap.xml', ['/admin', '/api']),
                         'User-agent: *\n'
                         'Disallow: /admin\n'
                         'Disallow: /api\n'
                         '\n'
                         'Sitemap: https://example.com/sitemap.xml\n')

    def test_no_disallow_paths(self):
        self.assertEqual(generate_robots_txt(f'{BASE_URL}/sitemap.xml'),
                         'User-agent: *\n\nSitemap: https://example.com/sitemap.xml\n')

    def test_extra_sitemaps_follow_the_main_one(self):
        robots = generate_robots_txt(f'{BASE_URL}/sitemap.xml', ['/admin'],
                                     extra_sitemaps=[f'{BASE_URL}/sitemap-news.xml'])
        self.assertEqual(robots.splitlines(), [
            'User-agent: *',
            'Disallow: /admin',
            '',
            'Sitemap: https://example.com/sitemap.xml',
            'Sitemap: https://example.com/sitemap-news.xml',
        ])


class NewsTest(SimpleTestCase):
    def test_fallback_order(self):
        self.assertEqual(PUBLISHED_FALLBACK, ('created_at', 'updated_at'))

    def test_collect_news(self):
        rows = [
            {'id': 1, 'slug': 'hello world', 'title': 'Hello', 'created_at': '2024-02-01T00:00:00Z',
             'keywords': ['startups', 'funding']},
            {'id': 2, 'title': 'Draft', 'updated_at': '2024-03-01'},
            {'id': 3, 'created_at': '2024-01-01'},
            {'id': 4, 'title': 'Undated'},
            {'title': 'Orphan', 'created_at': '2024-01-01'},
        ]
        collection = collect_news(BASE_URL, rows)
        self.assertEqual(collection.entries, [
            NewsArticle(f'{BASE_URL}/blog/hello%20world', 'Hello', '2024-02-01T00:00:00Z', 'startups, funding'),
            NewsArticle(f'{BASE_URL}/blog/2', 'Draft', '2024-03-01'),
        ])
        self.assertEqual([skipped.reason for skipped in collection.skipped],
                         ['missing title', 'missing publication date', 'missing identifier'])

    def test_generate_news_sitemap(self):
        articles = [
            NewsArticle(f'{BASE_URL}/blog/a', 'Fish & Chips <story>', '2024-02-01', 'food'),
            NewsArticle(f'{BASE_URL}/blog/a', 'Duplicate', '2024-02-02'),
            NewsArticle(f'{BASE_URL}/blog/b', 'Plain', '2024-02-03'),
        ]
        xml_content = generate_news_sitemap(articles, 'Know Founders')
        root = ElementTree.fromstring(xml_content.encode('utf-8'))
        urls = root.findall('sm:url', NS)
        self.assertEqual(len(urls), 2)
        self.assertEqual(urls[0].find('news:news/news:title', NS).text, 'Fish & Chips <story>')
        self.assertEqual(urls[0].find('news:news/news:publication/news:name', NS).text, 'Know Founders')
        self.assertEqual(urls[0].find('news:news/news:publication/news:language', NS).text, 'en')
        self.assertEqual(urls[0].find('news:news/news:keywords', NS).text, 'food')
        self.assertIsNone(urls[1].find('news:news/news:keywords', NS))
        self.assertEqual(urls[1].find('news:news/news:publication_date', NS).text, '2024-02-03')

    def test_empty_news_sitemap(self):
        self.assertEqual(locs(generate_news_sitemap([], 'Know Founders')), [])

    def test_build_news(self):
        articles = build_news('https://example.com/', [{'id': 1, 'title': 'A', 'created_at': '2024-01-01'}])
        self.assertEqual([article.url for article in articles], [f'{BASE_URL}/blog/1'])
        with self.assertRaises(ImproperlyConfigured):
            build_news('', [])


class BuildManifestTest(SimpleTestCase):
    def test_static_pages_only(self):
        entries = build_manifest(BASE_URL, config.STATIC_PAGES)
        xml_content = generate_sitemap(entries)
        self.assertEqual(len(entries), 10)
        self.assertEqual(xml_content.count('<url>'), 10)
        robots = generate_robots_txt(f'{BASE_URL}/sitemap.xml')
        self.assertEqual(robots.splitlines()[-1], f'Sitemap: {BASE_URL}/sitemap.xml')

    def test_order_and_counts(self):
        entries = build_manifest(
            'https://example.com/',
            [StaticPage('/', 'daily', 1.0)],
            categories=[{'slug': 'ai'}, {}],
            startups=[{'id': 1, 'slug': 'acme', 'status': 'approved'}, {'id': 2, 'status': 'pending'}],
            posts=[{'id': 9}],
        )
        self.assertEqual([entry.url for entry in entries], [
            f'{BASE_URL}/',
            f'{BASE_URL}/explore/ai',
            f'{BASE_URL}/startup/acme',
            f'{BASE_URL}/blog/9',
        ])

    def test_every_loc_starts_with_base_url(self):
        entries = build_manifest(BASE_URL, config.STATIC_PAGES, categories=[{'slug': 'ai'}],
                                 startups=[{'id': 'x', 'status': 'approved'}], posts=[{'slug': 'p'}])
        for loc in locs(generate_sitemap(entries)):
            self.assertTrue(loc.startswith(BASE_URL + '/'), loc)

    def test_skipped_rows_are_logged(self):
        with self.assertLogs('sitemap.collectors', 'INFO') as logs:
            build_manifest(BASE_URL, [], categories=[{'name': 'no slug'}])
        self.assertIn('missing slug', logs.output[0])

    def test_missing_base_url(self):
        with self.assertRaises(ImproperlyConfigured):
            build_manifest('', config.STATIC_PAGES)


class FetchRowsTest(SimpleTestCase):
    def test_database_error_yields_no_rows(self):
        queryset = mock.Mock()
        queryset.values.side_effect = DatabaseError('connection refused')
        with self.assertLogs('sitemap.sources', 'ERROR'):
            self.assertEqual(fetch_rows('startup', queryset, ['id']), [])


@override_settings(SITE_URL=BASE_URL)
class SitemapViewTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.category = Category.objects.create(name='Fintech', slug='fintech')
        Startup.objects.create(name='Acme', slug='acme', status='approved', category=cls.category)
        Startup.objects.create(name='Hidden', slug='hidden', status='pending')
        cls.post = Post.objects.create(title='Hello')

    def test_get(self):
        response = self.client.get('/sitemap.xml')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['content-type'], 'application/xml')
        self.assertIn('max-age=3600', response['cache-control'])
        self.assertIn('public', response['cache-control'])
        urls = locs(response.content.decode())
        self.assertEqual(len(urls), 13)
        self.assertIn(f'{BASE_URL}/explore/fintech', urls)
        self.assertIn(f'{BASE_URL}/startup/acme', urls)
        self.assertIn(f'{BASE_URL}/blog/{self.post.pk}', urls)
        self.assertNotIn(f'{BASE_URL}/startup/hidden', urls)

    def test_news_sitemap(self):
        Post.objects.create(title='Launch day', slug='launch day')
        response = self.client.get('/sitemap-news.xml')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['content-type'], 'application/xml')
        self.assertIn('max-age=3600', response['cache-control'])
        urls = locs(response.content.decode())
        self.assertEqual(set(urls), {f'{BASE_URL}/blog/{self.post.pk}', f'{BASE_URL}/blog/launch%20day'})
        self.assertIn('<news:title>Hello</news:title>', response.content.decode())

    def test_post(self):
        response = self.client.post('/sitemap.xml')

        self.assertEqual(response.status_code, 405)

    @override_settings(SITEMAP_SECTION_SIZE=5)
    def test_large_sitemap_becomes_index(self):
        response = self.client.get('/sitemap.xml')

        self.assertIn('<sitemapindex', response.content.decode())
        self.assertIn(f'{BASE_URL}/sitemap-3.xml', response.content.decode())
        self.assertEqual(len(locs(self.client.get('/sitemap-3.xml').content.decode())), 3)
        self.assertEqual(self.client.get('/sitemap-4.xml').status_code, 404)

    def test_single_section(self):
        response = self.client.get('/sitemap-1.xml')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(locs(response.content.decode())), 13)
        self.assertEqual(self.client.get('/sitemap-0.xml').status_code, 404)

    @override_settings(SITEMAP_STATIC_PAGES=())
    def test_empty_manifest(self):
        Startup.objects.all().delete()
        Category.objects.all().delete()
        Post.objects.all().delete()
        response = self.client.get('/sitemap.xml')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(locs(response.content.decode()), [])

    @override_settings(SITE_URL='')
    def test_missing_site_url(self):
        with self.assertRaises(ImproperlyConfigured):
            self.client.get('/sitemap.xml')


@override_settings(SITE_URL=BASE_URL, SITEMAP_DISALLOW_PATHS=['/admin', '/api'])
class BuildSitemapCommandTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        Startup.objects.create(name='Acme', slug='acme', status='approved')
        Startup.objects.create(name='Hidden', slug='hidden', status='pending')

    def run_command(self, *args):
        out = StringIO()
        with tempfile.TemporaryDirectory() as output:
            call_command('build_sitemap', '--output', output, *args, stdout=out)
            with open(os.path.join(output, 'sitemap.xml'), encoding='utf-8') as f:
                sitemap = f.read()
            with open(os.path.join(output, 'robots.txt'), encoding='utf-8') as f:
                robots = f.read()
        return sitemap, robots, out.getvalue()

    def test_writes_documents(self):
        sitemap, robots, out = self.run_command()

        self.assertIn(f'<loc>{BASE_URL}/startup/acme</loc>', sitemap)
        self.assertNotIn('hidden', sitemap)
        self.assertIn('<priority>0.7</priority>', sitemap)
        self.assertEqual(robots, 'User-agent: *\nDisallow: /admin\nDisallow: /api\n\n'
                                 f'Sitemap: {BASE_URL}/sitemap.xml\n'
                                 f'Sitemap: {BASE_URL}/sitemap-news.xml\n')
        self.assertIn('Wrote 11 sitemap entries', out)

    def test_writes_news_sitemap(self):
        Post.objects.create(title='Launch', slug='launch')
        with tempfile.TemporaryDirectory() as output:
            call_command('build_sitemap', '--output', output, stdout=StringIO())
            with open(os.path.join(output, 'sitemap-news.xml'), encoding='utf-8') as f:
                news = f.read()

        self.assertEqual(locs(news), [f'{BASE_URL}/blog/launch'])
        self.assertIn('<news:name>Know Founders</news:name>', news)

    def test_include_unapproved(self):
        sitemap, robots, out = self.run_command('--include-unapproved', '--base-url', 'https://staging.example.com')

        self.assertIn('<loc>https://staging.example.com/startup/hidden</loc>', sitemap)
        self.assertIn('Sitemap: https://staging.example.com/sitemap.xml', robots)

    def test_missing_output_directory(self):
        with self.assertRaises(CommandError):
            call_command('build_sitemap', '--output', '/nonexistent/sitemap/dir', stdout=StringIO())

    def test_relative_base_url(self):
        with tempfile.TemporaryDirectory() as output:
            with self.assertRaises(CommandError):
                call_command('build_sitemap', '--output', output, '--base-url', 'example.com', stdout=StringIO())
