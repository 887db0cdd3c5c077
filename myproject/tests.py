from django.test import TestCase, override_settings
from http import HTTPStatus
from utils import config


@override_settings(SITE_URL='https://knowfounders.com', SITEMAP_DISALLOW_PATHS=['/admin', '/api'])
class RobotsTest(TestCase):
    def test_get(self):
        response = self.client.get("/robots.txt")

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(response["content-type"], "text/plain")
        self.assertIn("max-age=3600", response["cache-control"])
        lines = response.content.decode().splitlines()
        self.assertEqual(lines[0], "User-agent: *")
        self.assertEqual(lines[1:3], ["Disallow: /admin", "Disallow: /api"])
        self.assertEqual(lines[3], "")
        self.assertEqual(lines[4], "Sitemap: https://knowfounders.com/sitemap.xml")
        self.assertEqual(lines[5], "Sitemap: https://knowfounders.com/sitemap-news.xml")

    def test_post(self):
        response = self.client.post("/robots.txt")

        self.assertEqual(response.status_code, HTTPStatus.METHOD_NOT_ALLOWED)

    @override_settings(SITEMAP_DISALLOW_PATHS=[])
    def test_nothing_disallowed(self):
        response = self.client.get("/robots.txt")

        self.assertEqual(response.content.decode(), "User-agent: *\n\n"
                                                    "Sitemap: https://knowfounders.com/sitemap.xml\n"
                                                    "Sitemap: https://knowfounders.com/sitemap-news.xml\n")

    @override_settings(SITEMAP_DISALLOW_PATHS=config.DISALLOW_PATHS)
    def test_default_disallow_list(self):
        lines = self.client.get("/robots.txt").content.decode().splitlines()

        for path in ["/static/", "/user/", "/private/", "/internal/", "/*?*utm_*"]:
            self.assertIn(f"Disallow: {path}", lines)
        self.assertNotIn("Disallow: /_next/", lines)
