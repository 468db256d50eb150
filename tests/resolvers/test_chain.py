"""Tests for the parent chain walk."""

from pathlib import Path
from unittest.mock import MagicMock

from license_check.exceptions import ArtifactResolutionError
from license_check.models.coordinate import ArtifactCoordinate, ArtifactRef
from license_check.models.report import LookupStatus
from license_check.resolvers.base import ArtifactResolver
from license_check.resolvers.chain import ChainResolver
from license_check.resolvers.local import LocalRepositoryResolver


class FakeResolver(ArtifactResolver):
    """Resolves every coordinate to a fictitious pom path."""

    def __init__(self, missing: frozenset[str] = frozenset()) -> None:
        self.calls: list[str] = []
        self._missing = missing

    def resolve_artifact(
        self, coordinate: ArtifactCoordinate, extension: str = "jar"
    ) -> ArtifactRef:
        self.calls.append(f"{coordinate}:{extension}")
        if coordinate.compact() in self._missing:
            raise ArtifactResolutionError(f"{coordinate} missing")
        return ArtifactRef(
            coordinate=coordinate,
            path=Path(f"/fake/{coordinate.artifact_id}.{extension}"),
            extension=extension,
        )


def _pom(license_name: str | None = None, parent: str | None = None) -> str:
    parts = ["<project>"]
    if parent is not None:
        group_id, artifact_id, version = parent.split(":")
        parts.append(
            f"<parent><groupId>{group_id}</groupId>"
            f"<artifactId>{artifact_id}</artifactId>"
            f"<version>{version}</version></parent>"
        )
    if license_name is not None:
        parts.append(f"<licenses><license><name>{license_name}</name></license></licenses>")
    parts.append("</project>")
    return "".join(parts)


def _reader(documents: dict[str, str]) -> MagicMock:
    """Build a document reader that serves POMs by coordinates."""
    return MagicMock(side_effect=lambda ref: documents[ref.coordinate.compact()])


def _ref(coordinates: str) -> ArtifactRef:
    return ArtifactRef(
        coordinate=ArtifactCoordinate.parse(coordinates),
        path=Path("/fake/start.jar"),
    )


class TestResolveLicense:
    """Tests for ChainResolver.resolve_license."""

    def test_own_license(self) -> None:
        """Test that a declared license is returned without visiting parents."""
        reader = _reader({"g:a:1": _pom("MIT License", parent="g:p:1")})
        resolver = FakeResolver()
        chain = ChainResolver(resolver, document_reader=reader)

        assert chain.resolve_license(_ref("g:a:1")) == "MIT License"
        assert reader.call_count == 1
        assert resolver.calls == []

    def test_license_from_parent(self) -> None:
        """Test that a license declared by the parent is used."""
        reader = _reader({"g:a:1": _pom(parent="g:b:1"), "g:b:1": _pom("MIT License")})
        chain = ChainResolver(FakeResolver(), max_chain_depth=1, document_reader=reader)

        assert chain.resolve_license(_ref("g:a:1")) == "MIT License"

    def test_no_license_and_no_parent(self) -> None:
        """Test that the end of the chain gives None."""
        reader = _reader({"g:a:1": _pom()})
        chain = ChainResolver(FakeResolver(), document_reader=reader)

        assert chain.resolve_license(_ref("g:a:1")) is None

    def test_depth_bound(self) -> None:
        """Test that no more than max_chain_depth + 1 documents are read."""
        max_depth = 3
        length = max_depth + 5
        documents = {
            f"g:a{i}:1": _pom(parent=f"g:a{i + 1}:1") for i in range(length)
        }
        reader = _reader(documents)
        chain = ChainResolver(
            FakeResolver(), max_chain_depth=max_depth, document_reader=reader
        )

        assert chain.resolve_license(_ref("g:a0:1")) is None
        assert reader.call_count == max_depth + 1

    def test_depth_zero_reads_only_the_artifact(self) -> None:
        """Test that a zero depth limit never consults the parent."""
        reader = _reader({"g:a:1": _pom(parent="g:b:1"), "g:b:1": _pom("MIT License")})
        resolver = FakeResolver()
        chain = ChainResolver(resolver, max_chain_depth=0, document_reader=reader)

        assert chain.resolve_license(_ref("g:a:1")) is None
        assert resolver.calls == []

    def test_cyclic_parents_terminate(self) -> None:
        """Test that a parent cycle stops at the depth limit."""
        reader = _reader({"g:a:1": _pom(parent="g:b:1"), "g:b:1": _pom(parent="g:a:1")})
        chain = ChainResolver(FakeResolver(), max_chain_depth=4, document_reader=reader)

        assert chain.resolve_license(_ref("g:a:1")) is None
        assert reader.call_count == 5

    def test_self_parent_with_large_depth_limit(self) -> None:
        """Test that a very high depth limit walks a self-parenting POM."""
        reader = _reader({"g:a:1": _pom(parent="g:a:1")})
        chain = ChainResolver(
            FakeResolver(), max_chain_depth=5000, document_reader=reader
        )

        assert chain.resolve_license(_ref("g:a:1")) is None
        assert reader.call_count == 5001

    def test_license_found_deep_in_chain(self) -> None:
        """Test that a license far up a long chain is found."""
        length = 3000
        documents = {
            f"g:a{i}:1": _pom(parent=f"g:a{i + 1}:1") for i in range(length)
        }
        documents[f"g:a{length}:1"] = _pom("MIT License")
        chain = ChainResolver(
            FakeResolver(), max_chain_depth=length, document_reader=_reader(documents)
        )

        assert chain.resolve_license(_ref("g:a0:1")) == "MIT License"

    def test_unresolvable_parent(self) -> None:
        """Test that a parent missing in both forms ends the walk."""
        reader = _reader({"g:a:1": _pom(parent="g:b:1")})
        resolver = FakeResolver(missing=frozenset({"g:b:1"}))
        chain = ChainResolver(resolver, document_reader=reader)

        assert chain.resolve_license(_ref("g:a:1")) is None
        assert resolver.calls == ["g:b:1:jar", "g:b:1:pom"]

    def test_max_chain_depth_property(self) -> None:
        """Test the default depth limit."""
        assert ChainResolver(FakeResolver()).max_chain_depth == 12


class TestLookup:
    """Tests for ChainResolver.lookup."""

    def test_found(self) -> None:
        """Test a successful lookup."""
        reader = _reader({"g:a:1": _pom("MIT License")})
        chain = ChainResolver(FakeResolver(), document_reader=reader)

        lookup = chain.lookup(_ref("g:a:1"))

        assert lookup.status == LookupStatus.FOUND
        assert lookup.license_name == "MIT License"

    def test_absent(self) -> None:
        """Test a lookup where nothing is declared."""
        reader = _reader({"g:a:1": _pom()})
        chain = ChainResolver(FakeResolver(), document_reader=reader)

        assert chain.lookup(_ref("g:a:1")).status == LookupStatus.ABSENT

    def test_malformed_parent_document_fails(self) -> None:
        """Test that a malformed POM in the chain is reported, not raised."""
        reader = _reader(
            {"g:a:1": _pom(parent="g:b:1"), "g:b:1": "<project><license><name>MIT"}
        )
        chain = ChainResolver(FakeResolver(), document_reader=reader)

        lookup = chain.lookup(_ref("g:a:1"))

        assert lookup.status == LookupStatus.FAILED
        assert lookup.reason is not None
        assert "</license>" in lookup.reason

    def test_missing_document_fails(self, maven_repo) -> None:
        """Test that an artifact without any POM is reported as failed."""
        jar = maven_repo.add_jar("g:a:1")
        chain = ChainResolver(LocalRepositoryResolver(maven_repo.root))
        ref = ArtifactRef(coordinate=ArtifactCoordinate.parse("g:a:1"), path=jar)

        lookup = chain.lookup(ref)

        assert lookup.status == LookupStatus.FAILED
        assert "No pom file" in (lookup.reason or "")


class TestChainOnDisk:
    """Chain walks over a local repository."""

    def test_child_inherits_parent_license(self, maven_repo) -> None:
        """Test a jar whose license is declared by its parent POM."""
        maven_repo.add_pom("org.example:child:1.0", parent="org.example:parent:2")
        jar = maven_repo.add_jar("org.example:child:1.0")
        maven_repo.add_pom("org.example:parent:2", license_name="MIT License")
        chain = ChainResolver(LocalRepositoryResolver(maven_repo.root))
        ref = ArtifactRef(
            coordinate=ArtifactCoordinate.parse("org.example:child:1.0"), path=jar
        )

        lookup = chain.lookup(ref)

        assert lookup.status == LookupStatus.FOUND
        assert lookup.license_name == "MIT License"
