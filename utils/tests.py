import logging
from django.test import RequestFactory, SimpleTestCase
from .logging import RequestFormatter, IPAddressFilter
from .middleware import LogIPMiddleware, get_client_ip


class ClientIPTest(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_remote_addr(self):
        request = self.factory.get('/robots.txt', REMOTE_ADDR='10.0.0.1')
        self.assertEqual(get_client_ip(request), '10.0.0.1')

    def test_forwarded_for(self):
        request = self.factory.get('/robots.txt', HTTP_X_FORWARDED_FOR='203.0.113.9, 10.0.0.1')
        self.assertEqual(get_client_ip(request), '203.0.113.9')

    def test_garbage_forwarded_hops_are_ignored(self):
        request = self.factory.get('/robots.txt', HTTP_X_FORWARDED_FOR='<script>, 2001:db8::1',
                                   REMOTE_ADDR='10.0.0.1')
        self.assertEqual(get_client_ip(request), '2001:db8::1')

    def test_falls_back_to_remote_addr(self):
        request = self.factory.get('/robots.txt', HTTP_X_FORWARDED_FOR='unknown', REMOTE_ADDR='10.0.0.3')
        self.assertEqual(get_client_ip(request), '10.0.0.3')

    def test_no_usable_address(self):
        request = self.factory.get('/robots.txt', REMOTE_ADDR='')
        self.assertEqual(get_client_ip(request), 'unknown')

    def test_middleware_sets_ip(self):
        request = self.factory.get('/sitemap.xml', REMOTE_ADDR='10.0.0.2')
        LogIPMiddleware(lambda r: None).process_request(request)
        self.assertEqual(request.ip_address, '10.0.0.2')


class RequestLoggingTest(SimpleTestCase):
    def make_record(self, **extra):
        record = logging.LogRecord('sitemap.views', logging.INFO, __file__, 1, 'served', None, None)
        record.__dict__.update(extra)
        return record

    def test_formatter_uses_request_ip(self):
        request = RequestFactory().get('/sitemap.xml')
        request.ip_address = '198.51.100.4'
        formatter = RequestFormatter('[{ip_address}] {message}', style='{')
        self.assertEqual(formatter.format(self.make_record(request=request)), '[198.51.100.4] served')

    def test_records_without_request(self):
        record = self.make_record()
        self.assertTrue(IPAddressFilter().filter(record))
        self.assertEqual(record.ip_address, 'unknown')
