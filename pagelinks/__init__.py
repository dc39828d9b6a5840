from pagelinks.exceptions import InvalidConfiguration
from pagelinks.pagination import ELLIPSIS, PageLink, Paginator

__all__ = [
    'ELLIPSIS',
    'InvalidConfiguration',
    'PageLink',
    'Paginator',
]
