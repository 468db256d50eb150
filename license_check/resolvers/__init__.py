"""Artifact and license resolvers package."""

from license_check.resolvers.base import ArtifactResolver
from license_check.resolvers.chain import ChainResolver
from license_check.resolvers.documents import read_metadata_document
from license_check.resolvers.local import LocalRepositoryResolver

__all__ = [
    "ArtifactResolver",
    "ChainResolver",
    "LocalRepositoryResolver",
    "read_metadata_document",
]
