from pagelinks.base_views import PaginatedListView


class NumbersView(PaginatedListView):
    """
    Demo listing: a thousand numbers, fifty per page, starting on page 8.
    """
    items = list(range(1000))
    items_per_page = 50
    default_page = 8
    max_pages_to_show = 10
    allow_items_per_page = False
    pass
