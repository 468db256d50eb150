"""Constants for license-check."""

# Exit codes
EXIT_SUCCESS = 0  # Every artifact passed or was excluded
EXIT_ISSUES = 1  # At least one license failed the policy
EXIT_ERROR = 2  # Check aborted by a fatal error

# Maximum number of parent POMs searched before giving up
DEFAULT_MAX_CHAIN_DEPTH = 12

# Conventional location of a POM embedded in a packaged artifact
EMBEDDED_POM_TEMPLATE = "META-INF/maven/{group_id}/{artifact_id}/pom.xml"

ARCHIVE_SUFFIXES = (".jar", ".war", ".ear")

# Report strings
EXCLUDED_REASON = "SKIPPED because artifact is on your exclude list"
UNKNOWN_ALLOWED_REASON = (
    "SKIPPED because license '{name}' is unknown and unknown licenses are allowed"
)
UNKNOWN_REASON = "[NULL] LICENSE '{name}' IS UNKNOWN"
BLACKLISTED_REASON = "{code} IS ON YOUR BLACKLIST"
NOT_WHITELISTED_REASON = "{code} IS NOT ON YOUR WHITELIST"

RESULT_FAIL_MESSAGE = (
    "RESULT: At least one license could not be verified or appears on your "
    "blacklist or is not on your whitelist. Build fails."
)
RESULT_PASS_MESSAGE = "RESULT: license check complete, no issues found."

EXPLANATION = (
    "This check validates that the artifacts you're using have a known license "
    "declared in the pom. If it can't find a match or if the license is on your "
    "declared blacklist or not on your declared whitelist, then the build will fail."
)
