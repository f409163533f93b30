from greeter.routes import ROUTES, Routes, greet


def test_greet_defaults_to_world():
    assert "Hello World" in greet({})


def test_greet_empty_name_defaults_to_world():
    assert "Hello World" in greet({"name": [""]})


def test_greet_uses_first_name():
    out = greet({"name": ["Alice", "Bob"]})
    assert "Hello Alice" in out
    assert "Bob" not in out


def test_greet_long_name_stays_on_one_line():
    name = "B" * 60
    assert f"Hello {name}" in greet({"name": [name]})


def test_default_table_has_single_root_mount():
    assert len(ROUTES) == 1
    assert ROUTES.resolve("/") is greet
    assert ROUTES.resolve("/any/nested/path") is greet


def test_resolve_prefers_longest_mount():
    def root(query):
        return "root"

    def api(query):
        return "api"

    routes = Routes()
    routes.mount("/", root)
    routes.mount("/api", api)
    assert routes.resolve("/api") is api
    assert routes.resolve("/api/users") is api
    assert routes.resolve("/apix") is root
    assert routes.resolve("/") is root


def test_resolve_without_match():
    routes = Routes()
    routes.mount("/api", greet)
    assert routes.resolve("/") is None
    assert Routes().resolve("/") is None
