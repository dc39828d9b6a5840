from django.views import View
from pagelinks.mixins import PaginatedListMixin

class PaginatedListView(PaginatedListMixin, View):
    pass
