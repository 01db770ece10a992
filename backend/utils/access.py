# utils/access.py
import enum
from typing import Dict, FrozenSet, List

from fastapi import Depends, HTTPException, status

from models.users import Role
from schemas.user import SessionUser
from utils.session import SessionStore, get_session


class Page(str, enum.Enum):
    DASHBOARD = "dashboard"
    PRODUCTS = "products"
    STOCK_ENTRIES = "stock_entries"
    SALES = "sales"
    ANALYTICS = "analytics"
    USERS = "users"


ALL_ROLES = frozenset(Role)
MANAGERS = frozenset({Role.SUPER_ADMIN, Role.ADMIN})

PAGE_ROLES: Dict[Page, FrozenSet[Role]] = {
    Page.DASHBOARD: ALL_ROLES,
    Page.PRODUCTS: MANAGERS,
    Page.STOCK_ENTRIES: MANAGERS,
    Page.SALES: ALL_ROLES,
    Page.ANALYTICS: MANAGERS,
    Page.USERS: frozenset({Role.SUPER_ADMIN}),
}

# Menu order: (page, label, path)
NAVIGATION = [
    (Page.DASHBOARD, "Dashboard", "/"),
    (Page.PRODUCTS, "Products", "/products"),
    (Page.STOCK_ENTRIES, "Stock Entries", "/stock"),
    (Page.SALES, "Sales", "/sales"),
    (Page.ANALYTICS, "Analytics", "/analytics"),
    (Page.USERS, "Users", "/users"),
]

# Every page needs an explicit role set and a menu entry
_unmapped = set(Page) - set(PAGE_ROLES)
_unlisted = set(Page) - {page for page, _, _ in NAVIGATION}
if _unmapped or _unlisted:
    raise RuntimeError(f"Pages without access rules: {sorted(p.value for p in _unmapped | _unlisted)}")


class LoginRequired(Exception):
    """Raised by page guards for visitors without a session."""


def can_access(role: Role, page: Page) -> bool:
    return role in PAGE_ROLES[page]


def visible_navigation(role: Role) -> List[dict]:
    return [{"name": label, "href": path} for page, label, path in NAVIGATION if can_access(role, page)]


def get_current_user(session: SessionStore = Depends(get_session)) -> SessionUser:
    if not session.is_authenticated:
        raise LoginRequired()
    return session.user


# Dependency factory guarding one page
def require_page(page: Page):
    def _checker(current_user: SessionUser = Depends(get_current_user)) -> SessionUser:
        if not can_access(current_user.role, page):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
        return current_user
    return _checker
