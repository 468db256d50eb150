"""Shared fixtures for license-check tests."""

import zipfile
from pathlib import Path
from typing import Optional

import pytest
from click.testing import CliRunner


def build_pom(
    coordinate: str,
    license_name: Optional[str] = None,
    parent: Optional[str] = None,
) -> str:
    """Render a small multi-line POM for ``group:artifact:version``."""
    group_id, artifact_id, version = coordinate.split(":")
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        "<project>",
        "  <modelVersion>4.0.0</modelVersion>",
    ]
    if parent is not None:
        parent_group, parent_artifact, parent_version = parent.split(":")
        lines += [
            "  <parent>",
            f"    <groupId>{parent_group}</groupId>",
            f"    <artifactId>{parent_artifact}</artifactId>",
            f"    <version>{parent_version}</version>",
            "  </parent>",
        ]
    lines += [
        f"  <groupId>{group_id}</groupId>",
        f"  <artifactId>{artifact_id}</artifactId>",
        f"  <version>{version}</version>",
        f"  <name>{artifact_id} project</name>",
    ]
    if license_name is not None:
        lines += [
            "  <licenses>",
            "    <license>",
            f"      <name>{license_name}</name>",
            "      <distribution>repo</distribution>",
            "    </license>",
            "  </licenses>",
        ]
    lines.append("</project>")
    return "\n".join(lines) + "\n"


class FakeMavenRepository:
    """Writes POMs and jars into a local repository layout under tmp_path."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def directory(self, coordinate: str) -> Path:
        group_id, artifact_id, version = coordinate.split(":")
        path = self.root.joinpath(*group_id.split("."), artifact_id, version)
        path.mkdir(parents=True, exist_ok=True)
        return path

    def file_name(self, coordinate: str, extension: str) -> str:
        _, artifact_id, version = coordinate.split(":")
        return f"{artifact_id}-{version}.{extension}"

    def add_pom(
        self,
        coordinate: str,
        license_name: Optional[str] = None,
        parent: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Path:
        """Write ``<artifact>-<version>.pom`` and return its path."""
        path = self.directory(coordinate) / self.file_name(coordinate, "pom")
        if content is None:
            content = build_pom(coordinate, license_name, parent)
        path.write_text(content, encoding="utf-8")
        return path

    def add_jar(self, coordinate: str, embedded_pom: Optional[str] = None) -> Path:
        """Write a jar, optionally with a POM under META-INF/maven."""
        group_id, artifact_id, _ = coordinate.split(":")
        path = self.directory(coordinate) / self.file_name(coordinate, "jar")
        with zipfile.ZipFile(path, "w") as zf:
            zf.writestr("META-INF/MANIFEST.MF", "Manifest-Version: 1.0\n")
            if embedded_pom is not None:
                zf.writestr(
                    f"META-INF/maven/{group_id}/{artifact_id}/pom.xml", embedded_pom
                )
        return path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def maven_repo(tmp_path: Path) -> FakeMavenRepository:
    """Provide an empty local Maven repository."""
    root = tmp_path / "repository"
    root.mkdir()
    return FakeMavenRepository(root)


@pytest.fixture
def pom_factory():
    """Provide the POM rendering helper."""
    return build_pom
