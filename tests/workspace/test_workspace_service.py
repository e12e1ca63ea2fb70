"""Tests for WorkspaceService against a real project tree."""

from pathlib import Path

from urlindex.config import UrlIndexConfig, save_config
from urlindex.extraction import RouteEntry
from urlindex.index import RouteIndex
from urlindex.services import WorkspaceService


class TestRefresh:
    """Discover + rescan."""

    def test_indexes_project(self, django_project: Path):
        service = WorkspaceService(django_project)
        result = service.refresh()

        assert result.ok
        labels = [r.label for r in service.index.files()]
        assert labels == ["blog/urls.py", "mysite/urls.py"]
        assert result.snapshot.route_count == 7

    def test_blog_entries_in_source_order(self, django_project: Path):
        service = WorkspaceService(django_project)
        service.refresh()

        blog = str((django_project / "blog" / "urls.py").resolve())
        assert service.index.entries_for(blog) == (
            RouteEntry("posts/", "post-list"),
            RouteEntry("posts/<int:pk>/", "detail"),
            RouteEntry("feed/", ""),
        )

    def test_namespaces_collected(self, django_project: Path):
        service = WorkspaceService(django_project)
        service.refresh()
        assert dict(service.index.snapshot.namespaces) == {
            "blog/urls": "blog",
            "shop/urls": "store",
        }

    def test_snippet_for_namespaced_route(self, django_project: Path):
        service = WorkspaceService(django_project)
        service.refresh()

        record, entry = service.index.find(name="detail")[0]
        assert service.index.snippet_for(record.file_path, entry) == (
            "const url_detail = \"{% url 'blog:detail' %}\";"
        )

    def test_deleted_file_drops_out(self, django_project: Path):
        service = WorkspaceService(django_project)
        service.refresh()

        (django_project / "blog" / "urls.py").unlink()
        service.refresh()

        assert [r.label for r in service.index.files()] == ["mysite/urls.py"]
        # Bindings are never removed
        assert service.index.snapshot.namespace_for("blog/urls") == "blog"

    def test_unreadable_file_reported(self, django_project: Path):
        (django_project / "shop" / "urls.py").write_bytes(b"path('\xff/', v)")
        service = WorkspaceService(django_project)

        result = service.refresh()

        assert [Path(f.file_path).parent.name for f in result.failures] == ["shop"]
        assert len(service.index.files()) == 2


class TestConfiguration:
    """Config flows into the index."""

    def test_config_loaded_from_project(self, django_project: Path):
        save_config(django_project, UrlIndexConfig(snippet_template="{reference}"))
        service = WorkspaceService(django_project)
        service.refresh()

        record, entry = service.index.find(name="detail")[0]
        assert service.index.snippet_for(record.file_path, entry) == "blog:detail"

    def test_urlpatterns_only(self, tmp_path: Path):
        app = tmp_path / "app"
        app.mkdir()
        (app / "urls.py").write_text(
            "helper = [path('hidden/', v, name='hidden')]\n"
            "urlpatterns = [path('shown/', v, name='shown')]\n"
        )
        service = WorkspaceService(tmp_path, config=UrlIndexConfig(urlpatterns_only=True))
        service.refresh()

        assert [e.name for _, e in service.index.routes()] == ["shown"]

    def test_explicit_index_used(self, django_project: Path):
        index = RouteIndex()
        service = WorkspaceService(django_project, index=index)
        service.refresh()
        assert index.snapshot.route_count == 7


class TestIsRoutingModule:
    """Which paths can affect the index."""

    def test_routing_module(self, django_project: Path):
        service = WorkspaceService(django_project)
        assert service.is_routing_module(django_project / "blog" / "urls.py")

    def test_other_file(self, django_project: Path):
        service = WorkspaceService(django_project)
        assert not service.is_routing_module(django_project / "blog" / "views.py")

    def test_ignored_directory(self, django_project: Path):
        service = WorkspaceService(django_project)
        assert not service.is_routing_module(django_project / "node_modules" / "x" / "urls.py")

    def test_outside_root(self, django_project: Path, tmp_path_factory):
        elsewhere = tmp_path_factory.mktemp("elsewhere") / "urls.py"
        service = WorkspaceService(django_project)
        assert not service.is_routing_module(elsewhere)
