"""Tests for file path derived identifiers."""

from hypothesis import given
from hypothesis import strategies as st

from urlindex.extraction import rewrite_module_ref
from urlindex.index import display_label, subpath_key


class TestSubpathKey:
    """Last two segments, .py stripped."""

    def test_posix_path(self):
        assert subpath_key("/srv/site/blog/urls.py") == "blog/urls"

    def test_windows_path(self):
        assert subpath_key("C:\\proj\\blog\\urls.py") == "blog/urls"

    def test_mixed_separators(self):
        assert subpath_key("C:\\proj/blog\\urls.py") == "blog/urls"

    def test_without_suffix(self):
        assert subpath_key("/srv/site/blog/urls") == "blog/urls"

    def test_single_segment(self):
        assert subpath_key("urls.py") == "urls"

    def test_only_trailing_suffix_removed(self):
        assert subpath_key("/a/my.py.app/urls.py") == "my.py.app/urls"

    def test_matches_rewritten_module_ref(self):
        assert subpath_key("/srv/site/blog/urls.py") == rewrite_module_ref("blog.urls")


class TestDisplayLabel:
    """Parent directory and file name."""

    def test_posix_path(self):
        assert display_label("/srv/site/blog/urls.py") == "blog/urls.py"

    def test_windows_path(self):
        assert display_label("C:\\proj\\shop\\urls.py") == "shop/urls.py"


segments = st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=15)


@given(st.lists(segments, min_size=0, max_size=4), segments, segments)
def test_subpath_key_uses_last_two_segments(prefix, app, module):
    path = "/" + "/".join([*prefix, app, f"{module}.py"])
    assert subpath_key(path) == f"{app}/{module}"


@given(segments, segments)
def test_two_segment_module_refs_line_up(app, module):
    assert subpath_key(f"/project/{app}/{module}.py") == rewrite_module_ref(f"{app}.{module}")
