"""
Maps navigation intents onto portal routes
"""

import logging
from typing import Callable, List, Optional

from ..commands.interpreter import CommandIntent, IntentType
from ..commands.keywords import DEFAULT_ROLE

logger = logging.getLogger(__name__)

HOME_ROUTE = "/"
LOGIN_ROUTE = "/login/{role}"
PORTAL_ROLES = ("patient", "doctor", "health-worker", "pharmacist")


def route_for(intent: CommandIntent) -> Optional[str]:
    """Route path for a navigation intent, None for anything else"""
    if intent.kind is IntentType.NAVIGATE_HOME:
        return HOME_ROUTE
    if intent.kind is IntentType.NAVIGATE_LOGIN:
        role = intent.role if intent.role in PORTAL_ROLES else DEFAULT_ROLE
        return LOGIN_ROUTE.format(role=role)
    return None


class RouteNavigator:
    """Navigation collaborator that resolves intents to routes and keeps a history"""

    def __init__(self, on_navigate: Optional[Callable[[str], None]] = None):
        self.on_navigate = on_navigate
        self.history: List[str] = []

    @property
    def current_route(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def __call__(self, intent: CommandIntent):
        route = route_for(intent)
        if route is None:
            logger.debug(f"Ignoring non-navigation intent: {intent.kind.value}")
            return

        logger.info(f"Navigating to {route}")
        self.history.append(route)
        if self.on_navigate is not None:
            self.on_navigate(route)
