from greeter.banner import render

DEFAULT_NAME = "World"


def greet(query):
    name = query.get("name", [""])[0] or DEFAULT_NAME
    return render(f"Hello {name}")


class Routes:
    """Mount points mapped to route functions taking the parsed query string.

    A request path resolves to the longest mount point it starts with, so a
    route mounted at "/" answers every path.
    """

    def __init__(self):
        self._mounts = {}

    def mount(self, path, route):
        self._mounts[path] = route

    def resolve(self, path):
        for mount in sorted(self._mounts, key=len, reverse=True):
            if path == mount or path.startswith(mount.rstrip("/") + "/"):
                return self._mounts[mount]
        return None

    def __len__(self):
        return len(self._mounts)


ROUTES = Routes()
ROUTES.mount("/", greet)
