"""
Navigation collaborator for voice intents
"""

from .router import RouteNavigator, route_for, HOME_ROUTE, LOGIN_ROUTE, PORTAL_ROLES

__all__ = ["RouteNavigator", "route_for", "HOME_ROUTE", "LOGIN_ROUTE", "PORTAL_ROLES"]
