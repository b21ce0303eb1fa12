"""Release constants for the plugin repository."""

REMOTE = "origin"
BRANCH = "main"
TAG = "v2.0.0"

BUILD_FILES = ("main.js", "styles.css", "manifest.json")

RELEASE_SUBJECT = "Release v2.0.0: Letta agent chat for Obsidian"

# Empty strings become blank lines between paragraphs.
RELEASE_BODY = (
    "Features:",
    "- Chat view docked in the right sidebar, backed by a Letta agent",
    "- Vault tools exposed to the agent (read, search, create and edit notes)",
    "- Settings tab for API key, base URL and project slug",
    "",
    "Fixes:",
    "- Route Letta API calls through requestUrl to avoid CORS failures",
    "",
    "Packaged for BRAT: main.js, manifest.json and styles.css are committed at the repository root.",
)

TAG_MESSAGE = "Release v2.0.0"

BUILD_COMMIT_PREFIX = "Build: update plugin files"
