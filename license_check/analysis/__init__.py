"""License analysis logic for license-check."""
from license_check.analysis.classifier import LicenseClassifier
from license_check.analysis.descriptors import DescriptorTable, parse_descriptor_line
from license_check.analysis.extractor import (
    extract_license_name,
    extract_parent_coordinate,
)
from license_check.analysis.policy import PolicyEngine

__all__ = [
    "DescriptorTable",
    "LicenseClassifier",
    "PolicyEngine",
    "extract_license_name",
    "extract_parent_coordinate",
    "parse_descriptor_line",
]
