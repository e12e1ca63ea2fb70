"""
Pytest configuration and shared fixtures for urlindex tests.

Fixtures build real Django-style project trees in temporary directories.
"""

from pathlib import Path

import pytest

from urlindex.utils.logger import configure_logging

ROOT_URLS = '''"""Root URL configuration."""
from django.contrib import admin
from django.urls import include, path

from . import views

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", views.home, name="home"),
    path("about/", views.about, name="about"),
    path("blog/", include(("blog.urls", "blog"), namespace="blog")),
    path("shop/", include(("shop.urls", "shop"), namespace="store")),
]
'''

BLOG_URLS = '''from django.urls import path

from . import views

app_name = "blog"

urlpatterns = [
    path("posts/", views.post_list, name="post-list"),
    path(
        "posts/<int:pk>/",
        views.post_detail,
        name="detail",
    ),
    path("feed/", views.feed),
]
'''

SHOP_URLS = '''from django.urls import path

urlpatterns = []
'''

VENDORED_URLS = '''from django.urls import path

urlpatterns = [path("vendored/", view, name="vendored")]
'''


@pytest.fixture(autouse=True)
def _reset_logging():
    """Point loguru at the current stderr around each test."""
    configure_logging()
    yield
    configure_logging()


@pytest.fixture
def django_project(tmp_path: Path) -> Path:
    """A small project with three urls.py files and one ignored copy.

    Layout:
        mysite/urls.py       5 routes, 4 matched; two namespaced includes
        blog/urls.py         3 routes
        shop/urls.py         no routes
        node_modules/x/urls.py  ignored by discovery
    """
    files = {
        "mysite/urls.py": ROOT_URLS,
        "blog/urls.py": BLOG_URLS,
        "shop/urls.py": SHOP_URLS,
        "node_modules/x/urls.py": VENDORED_URLS,
        "blog/views.py": "def post_list(request): ...\n",
    }
    for relative, content in files.items():
        target = tmp_path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return tmp_path


@pytest.fixture
def memory_reader():
    """Build a reader over an in-memory {path: text} mapping.

    Missing paths raise FileNotFoundError, like a deleted file would.
    """

    def make(files: dict[str, str]):
        def read(path: str) -> str:
            if path not in files:
                raise FileNotFoundError(2, "No such file or directory", path)
            return files[path]

        return read

    return make
