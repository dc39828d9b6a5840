import logging

from django.core.paginator import Paginator as DjangoPaginator

from pagelinks import exceptions
from pagelinks.conf import get_setting

logger = logging.getLogger(__name__)

ELLIPSIS = '...'


def _validate_integer(setting : str, value, minimum : int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        logger.debug('Rejected %r for %s', value, setting)
        raise exceptions.InvalidConfiguration(
            setting, value, 'an integer greater or equal than %d'%minimum
        )
    return value


class PageLink:
    """
    One entry of the page window.

    Numbered entries carry the page number, its url and whether it is the
    current page. Ellipsis entries carry the `...` marker in `num` and
    never have url nor are current.
    """

    def __init__(self, num : int | str, url : str | None = None, is_current = False) -> None:
        self._num = num
        self._url = url
        self._is_current = is_current
        return

    @classmethod
    def ellipsis(cls, marker : str = ELLIPSIS) -> 'PageLink':
        return cls(marker)

    @property
    def num(self):
        return self._num

    @property
    def url(self):
        return self._url

    @property
    def is_current(self) -> bool:
        return self._is_current

    @property
    def is_ellipsis(self) -> bool:
        return isinstance(self._num, str)

    def as_dict(self) -> dict:
        return {
            'num': self._num,
            'url': self._url,
            'is_current': self._is_current,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, PageLink):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self) -> int:
        return hash((self._num, self._url, self._is_current))

    def __repr__(self) -> str:
        if self._is_current:
            return '[%s]'%self._num
        return str(self._num)
    pass


class Paginator:
    """
    Pagination metadata and page window for a fixed collection of items.

    paginator = Paginator(items, 50, 8, "?page=(:num)").with_max_pages_to_show(10)
    paginator.pages  # [1, ..., 5, 6, 7, [8], 9, 10, 11, 12, ..., 20]

    Every setter validates its value before touching any state, so a
    rejected value raises `InvalidConfiguration` and leaves the paginator
    as it was.
    """

    def __init__(
        self,
        items,
        items_per_page : int,
        current_page : int = 1,
        url_pattern : str = '',
        *,
        max_pages_to_show : int | None = None,
        always_show_pagination : bool | None = None,
        total_item : int | None = None,
    ) -> None:
        self._items = items if items is not None else []
        self._total_item = 0
        self._items_per_page = 0
        self._total_page = 0
        self.placeholder : str = get_setting('PAGELINKS_NUM_PLACEHOLDER')
        self.items_per_page = items_per_page
        self.total_item = self._count_items() if total_item is None else total_item
        self.current_page = current_page
        self.url_pattern = url_pattern
        if max_pages_to_show is None:
            max_pages_to_show = get_setting('PAGELINKS_MAX_PAGES_TO_SHOW')
        self.max_pages_to_show = max_pages_to_show
        if always_show_pagination is None:
            always_show_pagination = get_setting('PAGELINKS_ALWAYS_SHOW_PAGINATION')
        self.always_show_pagination = always_show_pagination
        return

    def _count_items(self) -> int:
        # lists by len(), querysets by a COUNT query
        return DjangoPaginator(self._items, self._items_per_page).count

    def _update_total_page(self):
        if self._items_per_page:
            self._total_page = (self._total_item + self._items_per_page - 1) // self._items_per_page
        else:
            self._total_page = 0
        return

    @property
    def items(self):
        return self._items

    @property
    def items_per_page(self) -> int:
        return self._items_per_page

    @items_per_page.setter
    def items_per_page(self, value : int):
        self._items_per_page = _validate_integer('items_per_page', value, 1)
        self._update_total_page()

    @property
    def total_item(self) -> int:
        return self._total_item

    @total_item.setter
    def total_item(self, value : int):
        self._total_item = _validate_integer('total_item', value, 0)
        self._update_total_page()

    @property
    def current_page(self) -> int:
        return self._current_page

    @current_page.setter
    def current_page(self, value : int):
        self._current_page = _validate_integer('current_page', value, 1)

    @property
    def max_pages_to_show(self) -> int:
        return self._max_pages_to_show

    @max_pages_to_show.setter
    def max_pages_to_show(self, value : int):
        self._max_pages_to_show = _validate_integer('max_pages_to_show', value, 3)

    @property
    def url_pattern(self) -> str:
        return self._url_pattern

    @url_pattern.setter
    def url_pattern(self, value : str | None):
        self._url_pattern = '' if value is None else str(value)

    @property
    def always_show_pagination(self) -> bool:
        return self._always_show_pagination

    @always_show_pagination.setter
    def always_show_pagination(self, value : bool):
        self._always_show_pagination = bool(value)

    @property
    def total_page(self) -> int:
        return self._total_page

    def with_items_per_page(self, items_per_page : int):
        self.items_per_page = items_per_page
        return self

    def with_total_item(self, total_item : int):
        self.total_item = total_item
        return self

    def with_current_page(self, current_page : int):
        self.current_page = current_page
        return self

    def with_max_pages_to_show(self, max_pages_to_show : int):
        self.max_pages_to_show = max_pages_to_show
        return self

    def with_url_pattern(self, url_pattern : str):
        self.url_pattern = url_pattern
        return self

    def with_always_show_pagination(self, always_show_pagination : bool = True):
        self.always_show_pagination = always_show_pagination
        return self

    def get_page_url(self, num : int) -> str:
        """
        Replaces every placeholder occurrence of the url pattern by `num`.
        """
        return self._url_pattern.replace(self.placeholder, str(num))

    @property
    def next_page(self) -> int | None:
        if self._current_page < self._total_page:
            return self._current_page + 1
        return None

    @property
    def prev_page(self) -> int | None:
        if self._current_page > 1:
            return self._current_page - 1
        return None

    @property
    def next_url(self) -> str | None:
        if self.next_page is None:
            return None
        return self.get_page_url(self.next_page)

    @property
    def prev_url(self) -> str | None:
        if self.prev_page is None:
            return None
        return self.get_page_url(self.prev_page)

    @property
    def first_page_url(self) -> str | None:
        """
        Url of the first page. None when already there.
        """
        if self.prev_page is None:
            return None
        return self.get_page_url(1)

    @property
    def last_page_url(self) -> str | None:
        """
        Url of the last page. None when already there.
        """
        if self.next_page is None:
            return None
        return self.get_page_url(self._total_page)

    def _create_page(self, num : int) -> PageLink:
        return PageLink(num, self.get_page_url(num), num == self._current_page)

    @property
    def pages(self) -> list[PageLink]:
        """
        The page window.

        All the pages when they fit in `max_pages_to_show`, otherwise a
        sliding range around the current page between the pinned first
        and last pages, with an ellipsis on each side the range does not
        reach.
        """
        total_page = self._total_page
        max_pages = self._max_pages_to_show
        current = self._current_page
        if total_page <= 1 and not self._always_show_pagination:
            return []
        if total_page <= max_pages:
            return [self._create_page(num) for num in range(1, total_page + 1)]

        num_adjacents = (max_pages - 3) // 2
        if current + num_adjacents > total_page:
            sliding_start = total_page - max_pages + 2
        else:
            sliding_start = current - num_adjacents
        sliding_start = max(sliding_start, 2)
        sliding_end = min(sliding_start + max_pages - 3, total_page - 1)
        num_middle = max_pages - 2
        if sliding_end - sliding_start + 1 < num_middle:
            sliding_start = max(sliding_end - num_middle + 1, 2)

        pages = [self._create_page(1)]
        if sliding_start > 2:
            pages.append(PageLink.ellipsis())
        pages.extend(
            self._create_page(num) for num in range(sliding_start, sliding_end + 1)
        )
        if sliding_end < total_page - 1:
            pages.append(PageLink.ellipsis())
        pages.append(self._create_page(total_page))
        return pages

    @property
    def current_page_first_item(self) -> int | None:
        first = (self._current_page - 1) * self._items_per_page + 1
        if first > self._total_item:
            return None
        return first

    @property
    def current_page_last_item(self) -> int | None:
        first = self.current_page_first_item
        if first is None:
            return None
        return min(first + self._items_per_page - 1, self._total_item)

    def get_result(self) -> list:
        """
        Items of the current page. Empty, never an error, when the current
        page is past the end of the collection.
        """
        if self._total_item == 0:
            return []
        offset = (self._current_page - 1) * self._items_per_page
        return list(self._items[offset:offset + self._items_per_page])

    def get_full_result(self) -> tuple[list, int, int]:
        return self.get_result(), self._total_page, self._total_item

    def as_dict(self, results : list | None = None) -> dict:
        """
        Whole navigation state, ready for a JSON response. `results` replaces
        the items of the current page, e.g. with already serialized objects.
        """
        if results is None:
            results = self.get_result()
        return {
            'pages': [page.as_dict() for page in self.pages],
            'current_page': self._current_page,
            'total_page': self._total_page,
            'total_item': self._total_item,
            'items_per_page': self._items_per_page,
            'first_page_url': self.first_page_url,
            'prev_url': self.prev_url,
            'next_url': self.next_url,
            'last_page_url': self.last_page_url,
            'first_item': self.current_page_first_item,
            'last_item': self.current_page_last_item,
            'results': results,
        }

    def __repr__(self) -> str:
        return '<Paginator page %s of %s>'%(self._current_page, self._total_page)
    pass

__all__ = [
    'ELLIPSIS',
    'PageLink',
    'Paginator',
]
