# utils/logging.py
import logging


def request_ip(record):
    request = getattr(record, 'request', None)
    return getattr(request, 'ip_address', None) or 'unknown'


class RequestFormatter(logging.Formatter):
    def format(self, record):
        if not hasattr(record, 'ip_address'):
            record.ip_address = request_ip(record)
        return super().format(record)


class IPAddressFilter(logging.Filter):
    def filter(self, record):
        # Non request records get a placeholder so the format string never fails
        record.ip_address = request_ip(record)
        return True
