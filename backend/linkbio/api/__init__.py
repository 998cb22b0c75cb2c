"""
API routers.
"""
from . import ai_analysis, contacts, demo, featured_contents, github, issues, profile, social_links, technologies, uploads

routers = [
    profile.router,
    social_links.router,
    featured_contents.router,
    technologies.router,
    issues.router,
    contacts.router,
    github.router,
    ai_analysis.router,
    uploads.router,
    demo.router,
]
