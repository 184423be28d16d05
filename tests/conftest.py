import pytest

SINGLE_BLOCK = """
\t\tUser-Agent: Google
\t\tUser-Agent: Bing
\t\tAllow: /
\t\tDisallow: /dashboard
\t\tCrawl-Delay: 100
\t\tSitemap: https://www.example.com/sitemap-index.xml
\t\t"""

TWO_BLOCKS = (
    SINGLE_BLOCK
    + """
\t\tUser-Agent: *
\t\tAllow: /blog
\t\tDisallow: /admin
\t\tCrawl-Delay: 1000
\t\tSitemap: https://www.example.com/sitemap-index.xml
\t\t"""
)


@pytest.fixture
def single_block() -> str:
    return SINGLE_BLOCK


@pytest.fixture
def two_blocks() -> str:
    return TWO_BLOCKS
