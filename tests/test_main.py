"""
test_main.py
------------
Tests for the content-index command line.
"""
from content_index.main import main


class TestMain:
    """Test the main entry point."""

    def test_list_posts(self, site, write_post, capsys):
        write_post("old", {"title": "Old", "date": "2023-01-01"})
        write_post("new", {"title": "New", "date": "2024-01-01"})
        assert main(["--root", str(site), "list", "post"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert "new" in lines[0]
        assert "old" in lines[1]

    def test_list_projects_flags(self, site, write_project, capsys):
        write_project("p", {"title": "P", "featured": True, "order": 1})
        assert main(["--root", str(site), "list", "project"]) == 0
        out = capsys.readouterr().out
        assert "* #1 P" in out

    def test_get(self, site, write_post, capsys):
        write_post("hello", {"title": "Hello", "date": "2024-01-01"}, body="Body\n")
        assert main(["--root", str(site), "get", "post", "hello"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("---\ntitle: Hello\n")
        assert "Body" in out

    def test_get_html_with_renderer(self, site, write_post, capsys):
        write_post("hello", {"title": "Hello"}, body="Some **bold**\n")
        assert main(["--root", str(site), "get", "post", "hello", "--html"]) == 0
        assert "<strong>bold</strong>" in capsys.readouterr().out

    def test_get_missing(self, site, capsys):
        assert main(["--root", str(site), "get", "project", "nope"]) == 1
        assert "ERROR" in capsys.readouterr().err

    def test_get_malformed(self, site, write_post, capsys):
        write_post("bad", raw="---\ntitle: [oops\n---\n")
        assert main(["--root", str(site), "get", "post", "bad"]) == 1
        assert "bad" in capsys.readouterr().err

    def test_non_mapping_config(self, tmp_path, capsys):
        cfg = tmp_path / "site.yml"
        cfg.write_text("- a\n- b\n")
        assert main(["--config", str(cfg), "list", "post"]) == 1
        assert "ERROR" in capsys.readouterr().err

    def test_unparsable_config(self, tmp_path, capsys):
        cfg = tmp_path / "site.yml"
        cfg.write_text("posts_root: [oops\n")
        assert main(["--config", str(cfg), "list", "post"]) == 1
        assert "ERROR" in capsys.readouterr().err

    def test_recent_and_highlighted(self, site, write_post, write_project, capsys):
        write_post("a", {"title": "A", "date": "2024-01-01", "tags": ["t"]})
        write_project("p", {"title": "P", "featured": True})
        assert main(["--root", str(site), "recent", "-n", "1"]) == 0
        assert main(["--root", str(site), "highlighted"]) == 0
        out = capsys.readouterr().out
        assert "/blog/a  A  [2024-01-01 · t]" in out
        assert "/projects/p  P  [Featured Project]" in out

    def test_config_file(self, tmp_path, capsys):
        posts = tmp_path / "writing"
        posts.mkdir()
        (posts / "x.mdx").write_text("---\ntitle: X\n---\n")
        cfg = tmp_path / "site.yml"
        cfg.write_text("posts_root: writing\n")
        assert main(["--config", str(cfg), "list", "post"]) == 0
        assert "X" in capsys.readouterr().out

    def test_default_config_under_root(self, tmp_path, capsys):
        (tmp_path / "posts").mkdir()
        (tmp_path / "posts" / "y.mdx").write_text("---\ntitle: Why\n---\n")
        (tmp_path / "content-index.yml").write_text("posts_root: posts\n")
        assert main(["--root", str(tmp_path), "list", "post"]) == 0
        assert "Why" in capsys.readouterr().out
