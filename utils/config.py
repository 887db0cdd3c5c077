from sitemap.entries import StaticPage

# Top level pages, most important first.
STATIC_PAGES = (
    StaticPage('/', 'daily', 1.0),
    StaticPage('/home', 'weekly', 0.9),
    StaticPage('/explore', 'daily', 0.9),
    StaticPage('/about', 'monthly', 0.7),
    StaticPage('/contact', 'monthly', 0.6),
    StaticPage('/blog', 'weekly', 0.8),
    StaticPage('/login', 'monthly', 0.3),
    StaticPage('/signup', 'monthly', 0.5),
    StaticPage('/privacy-policy', 'yearly', 0.3),
    StaticPage('/terms-of-service', 'yearly', 0.3),
)

DISALLOW_PATHS = [
    '/dashboard',
    '/admin',
    '/api/',
    '/static/',
    '/auth/',
    '/profile/',
    '/settings/',
    '/user/',
    '/private/',
    '/internal/',
    # tracking parameters
    '/*?*utm_*',
    '/*?*ref=*',
    '/*?*source=*',
    '/*?*campaign=*',
]
