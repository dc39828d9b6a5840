import json
import logging

from django.core.serializers.json import DjangoJSONEncoder
from django.db.models import Model
from django.forms.models import model_to_dict
from django.http import HttpRequest, JsonResponse
from asgiref.sync import sync_to_async

from pagelinks import base_responses, exceptions
from pagelinks.conf import get_setting
from pagelinks.pagination import Paginator

logger = logging.getLogger(__name__)


class PaginatedListMixin:
    """
    Async GET handler answering the page window, the navigation urls and
    the items of the requested page as JSON.
    """
    items = None
    """
    The collection to paginate, a list or a QuerySet.
    Override `get_items` when it depends on the request.
    """
    items_per_page = 10
    default_page = 1
    url_pattern = '?page=(:num)'
    """
    Url for each page link, with the placeholder `(:num)` for the page number.
    """
    max_pages_to_show : int | None = None
    """
    Width of the page window. `PAGELINKS_MAX_PAGES_TO_SHOW` setting as default.
    """
    always_show_pagination : bool | None = None
    allow_items_per_page = True
    """
    Allows the `itemsPerPage` GET param to change the page size.
    """

    def get_items(self):
        return self.items

    def serialize_item(self, item):
        """
        JSON value of one item. Model instances become their field dict,
        anything the JSON encoder of django can't handle becomes its str.
        """
        if isinstance(item, Model):
            item = model_to_dict(item)
        if isinstance(item, dict):
            return {key: self.serialize_item(value) for key, value in item.items()}
        if isinstance(item, (list, tuple)):
            return [self.serialize_item(value) for value in item]
        try:
            json.dumps(item, cls=DjangoJSONEncoder)
        except (TypeError, ValueError):
            return str(item)
        return item

    def serialize_items(self, items : list) -> list:
        return [self.serialize_item(item) for item in items]

    def get_paginator(self, items, page : int, items_per_page : int) -> Paginator:
        return Paginator(
            items,
            items_per_page,
            page,
            self.url_pattern,
            max_pages_to_show=self.max_pages_to_show,
            always_show_pagination=self.always_show_pagination,
        )

    @staticmethod
    def read_integer_param(request : HttpRequest, name : str, default : int) -> int:
        value = request.GET.get(name, None)
        if value is None or value == '':
            return default
        try:
            return int(value)
        except ValueError:
            raise exceptions.InvalidConfiguration(name, value, 'an integer')

    def paginate(self, page : int, items_per_page : int):
        """
        Paginator and serialized results of the requested page, or
        `(None, None)` when the view has no items.
        """
        items = self.get_items()
        if items is None:
            return None, None
        paginator = self.get_paginator(items, page, items_per_page)
        return paginator, self.serialize_items(paginator.get_result())

    async def get(self, request : HttpRequest, *args, **kwargs):
        try:
            page = self.read_integer_param(
                request, get_setting('PAGELINKS_PAGE_PARAM'), self.default_page
            )
            items_per_page = self.items_per_page
            if self.allow_items_per_page:
                items_per_page = self.read_integer_param(
                    request,
                    get_setting('PAGELINKS_ITEMS_PER_PAGE_PARAM'),
                    self.items_per_page
                )
            paginator, results = await sync_to_async(self.paginate)(page, items_per_page)
        except exceptions.InvalidConfiguration as exp:
            logger.warning('Invalid pagination in %s: %s', request.get_full_path(), exp)
            return base_responses.invalid_pagination_response(exp.message)
        if paginator is None:
            return base_responses.missing_items_response
        return JsonResponse(paginator.as_dict(results))
    pass

__all__ = [
    'PaginatedListMixin',
]
