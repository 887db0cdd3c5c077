from django.contrib import admin
from django.urls import path
from sitemap.views import sitemap_index, sitemap_section, sitemap_news, robots_txt

urlpatterns = [
    # admin & crawler documents
    path('admin/', admin.site.urls),
    path('robots.txt', robots_txt, name='robots_txt'),
    path('sitemap.xml', sitemap_index, name='sitemap_index'),
    path('sitemap-<int:section>.xml', sitemap_section, name='sitemap_section'),
    path('sitemap-news.xml', sitemap_news, name='sitemap_news'),
]
