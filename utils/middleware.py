import ipaddress
from django.utils.deprecation import MiddlewareMixin


class LogIPMiddleware(MiddlewareMixin):
    """Attach the client address to the request for utils.logging."""

    def process_request(self, request):
        request.ip_address = get_client_ip(request)
        return None


def valid_ip(value):
    value = (value or '').strip()
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return None
    return value


def get_client_ip(request):
    # Leftmost parseable X-Forwarded-For hop, then the socket address
    forwarded = request.META.get('HTTP_X_FORWARDED_FOR', '')
    for hop in forwarded.split(','):
        ip = valid_ip(hop)
        if ip:
            return ip
    return valid_ip(request.META.get('REMOTE_ADDR')) or 'unknown'
