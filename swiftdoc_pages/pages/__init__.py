"""Page models and the route index assembled from classified symbols."""

from .index import PageIndex, build_page_index, build_sections
from .models import (
    ExternalTypePage,
    FooterPage,
    GlobalPage,
    HomePage,
    IndexEntry,
    IndexSection,
    OperatorPage,
    Page,
    PageEntry,
    SidebarPage,
    TypealiasPage,
    TypePage,
)

__all__ = [
    "ExternalTypePage",
    "FooterPage",
    "GlobalPage",
    "HomePage",
    "IndexEntry",
    "IndexSection",
    "OperatorPage",
    "Page",
    "PageEntry",
    "PageIndex",
    "SidebarPage",
    "TypePage",
    "TypealiasPage",
    "build_page_index",
    "build_sections",
]
