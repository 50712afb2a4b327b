"""
Version information for the tarot pile library.
Bumped by hand on release.
"""

VERSION = "0.4.0"
BUILD_DATE = "2026-10-19"
COMMIT_HASH = "dev"


def get_version_info():
    """Get formatted version information"""
    return {
        'version': VERSION,
        'build_date': BUILD_DATE,
        'commit_hash': COMMIT_HASH
    }
