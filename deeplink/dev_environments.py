"""Static library of development-environment cache locations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DevEnvironment:
    name: str
    paths: tuple[str, ...]


PATH_LIBRARY: tuple[DevEnvironment, ...] = (
    DevEnvironment(
        "Xcode",
        (
            "~/Library/Developer/Xcode/DerivedData",
            "~/Library/Developer/Xcode/Archives",
            "~/Library/Developer/CoreSimulator/Caches",
        ),
    ),
    DevEnvironment("Node.js / npm", ("~/.npm", "~/.node-gyp", "~/.nvm")),
    DevEnvironment("Yarn", ("~/.yarn", "~/Library/Caches/Yarn")),
    DevEnvironment("Python / pip", ("~/Library/Caches/pip", "~/.pyenv", "~/.virtualenvs")),
    DevEnvironment("Conda", ("~/.conda", "~/miniconda3/pkgs", "~/anaconda3/pkgs")),
    DevEnvironment("Rust / Cargo", ("~/.cargo/registry", "~/.cargo/git", "~/.rustup")),
    DevEnvironment("Go", ("~/go/pkg/mod", "~/Library/Caches/go-build")),
    DevEnvironment("Java / Gradle", ("~/.gradle/caches", "~/.gradle/wrapper")),
    DevEnvironment("Java / Maven", ("~/.m2/repository",)),
    DevEnvironment("Ruby / Gems", ("~/.gem", "~/.rbenv", "~/.bundle")),
    DevEnvironment("Flutter / Dart", ("~/.pub-cache", "~/Library/Caches/flutter")),
    DevEnvironment("Docker", ("~/Library/Containers/com.docker.docker/Data",)),
    DevEnvironment("Homebrew", ("~/Library/Caches/Homebrew",)),
    DevEnvironment("CocoaPods", ("~/Library/Caches/CocoaPods", "~/.cocoapods")),
)


def get_paths() -> tuple[DevEnvironment, ...]:
    return PATH_LIBRARY


def find_environment(search: str, library: tuple[DevEnvironment, ...] | None = None) -> DevEnvironment | None:
    """First environment whose name contains ``search`` (case-insensitive)."""
    needle = search.lower()
    for env in library if library is not None else get_paths():
        if needle in env.name.lower():
            return env
    return None
