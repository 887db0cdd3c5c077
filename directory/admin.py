from django.contrib import admin
from .models import Category, Startup, Post

admin.site.enable_nav_sidebar = False


class CategoryAdmin(admin.ModelAdmin):
    list_display = ('name', 'slug',)
    ordering = ['name']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}


class StartupAdmin(admin.ModelAdmin):
    list_display = ('name', 'slug', 'category', 'status', 'updated_at',)
    list_filter = ('status', 'category',)
    fields = [('name', 'slug', 'tagline', 'website', 'category', 'status',)]
    ordering = ['-updated_at']
    search_fields = ['name', 'slug', 'category__name']


class PostAdmin(admin.ModelAdmin):
    list_display = ('title', 'slug', 'created_at', 'updated_at',)
    fields = [('title', 'slug', 'excerpt', 'updated_at',)]
    ordering = ['-created_at']
    search_fields = ['title', 'slug']


admin.site.register(Category, CategoryAdmin)
admin.site.register(Startup, StartupAdmin)
admin.site.register(Post, PostAdmin)
