import http.server
import sys
from importlib.metadata import PackageNotFoundError, version

# Distribution name -> label printed at startup.
BUNDLED = {
    "cowsay": "cowsay",
    "lxml": "lxml",
    "fauna": "fauna",
}


def dependency_versions():
    versions = {}
    for dist, label in BUNDLED.items():
        try:
            versions[label] = version(dist)
        except PackageNotFoundError:
            versions[label] = "not installed"
    # The transport is the standard library, not a bundled distribution.
    versions["http.server (stdlib)"] = http.server.__version__
    return versions


def print_diagnostics():
    for label, ver in dependency_versions().items():
        print(f"{label} version: {ver}", flush=True)
    print(f"sys.path: {sys.path}", flush=True)
