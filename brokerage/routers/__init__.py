"""
API routers. Admin routers require an authenticated admin session.
"""

from . import auth, dashboard, inquiries, marketing, media, properties, team, uploads

public_routers = [
    properties.router,
    team.router,
    inquiries.router,
]

admin_routers = [
    auth.router,
    properties.admin_router,
    media.router,
    inquiries.admin_router,
    team.admin_router,
    dashboard.router,
    uploads.router,
    marketing.router,
]

__all__ = ["public_routers", "admin_routers"]
