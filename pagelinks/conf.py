from django.conf import settings

DEFAULTS = {
    'PAGELINKS_NUM_PLACEHOLDER': '(:num)',
    'PAGELINKS_MAX_PAGES_TO_SHOW': 10,
    'PAGELINKS_ALWAYS_SHOW_PAGINATION': False,
    'PAGELINKS_PAGE_PARAM': 'page',
    'PAGELINKS_ITEMS_PER_PAGE_PARAM': 'itemsPerPage',
}
"""
Settings read by the paginator. Any of them can be overridden in the
Django settings module of the project.
"""

def get_setting(name : str):
    """
    Value of `name` from django settings, or the built-in default when
    settings are not configured (plain python usage) or don't define it.
    """
    if not settings.configured:
        return DEFAULTS[name]
    return getattr(settings, name, DEFAULTS[name])
