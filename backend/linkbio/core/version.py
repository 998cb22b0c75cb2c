"""
Version management for the link-in-bio API
"""
from ..__version__ import __version__

API_VERSION = __version__

# Feature flags
FEATURES = {
    "github_contributions": True,
    "github_graphql_source": True,
    "ai_issue_analysis": True,
    "contacts": True,
    "image_uploads": True,
}


def get_version_info():
    """Get version and feature information"""
    return {
        "version": API_VERSION,
        "features": FEATURES,
    }
