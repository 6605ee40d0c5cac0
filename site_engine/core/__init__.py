"""Core module pour site_engine."""
from .schemas import (
    SectionData,
    PageLayout,
    PageData,
    SpecialPageData,
    LocaleInfo,
    SiteData,
    ContentMain,
    main_content,
    normalize_route,
)

__all__ = [
    "SectionData",
    "PageLayout",
    "PageData",
    "SpecialPageData",
    "LocaleInfo",
    "SiteData",
    "ContentMain",
    "main_content",
    "normalize_route",
]
