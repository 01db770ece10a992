"""
Role-gated pages: permission matrix, redirects for visitors, navigation.
"""

import pytest

from models.users import Role
from utils.access import Page, PAGE_ROLES, can_access, visible_navigation

from conftest import login_as

SA, AD, SS = Role.SUPER_ADMIN, Role.ADMIN, Role.SALES_STAFF

MATRIX = {
    Page.DASHBOARD: {SA: True, AD: True, SS: True},
    Page.PRODUCTS: {SA: True, AD: True, SS: False},
    Page.STOCK_ENTRIES: {SA: True, AD: True, SS: False},
    Page.SALES: {SA: True, AD: True, SS: True},
    Page.ANALYTICS: {SA: True, AD: True, SS: False},
    Page.USERS: {SA: True, AD: False, SS: False},
}

PATHS = {
    Page.DASHBOARD: "/",
    Page.PRODUCTS: "/products",
    Page.STOCK_ENTRIES: "/stock",
    Page.SALES: "/sales",
    Page.ANALYTICS: "/analytics",
    Page.USERS: "/users",
}


def test_every_page_has_rules():
    assert set(PAGE_ROLES) == set(Page)


@pytest.mark.parametrize("page", list(Page))
@pytest.mark.parametrize("role", list(Role))
def test_matrix(page, role):
    assert can_access(role, page) is MATRIX[page][role]


@pytest.mark.parametrize("role", list(Role))
def test_navigation_matches_guards(role):
    hrefs = {item["href"] for item in visible_navigation(role)}
    assert hrefs == {PATHS[page] for page in Page if MATRIX[page][role]}


def test_sales_staff_menu():
    assert visible_navigation(SS) == [
        {"name": "Dashboard", "href": "/"},
        {"name": "Sales", "href": "/sales"},
    ]


@pytest.mark.parametrize("path", list(PATHS.values()))
def test_visitor_redirected_to_login(client, path):
    resp = client.get(path, follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/login"


@pytest.mark.parametrize("path", ["/products", "/stock", "/analytics", "/users"])
def test_sales_staff_denied(as_sales_staff, path):
    resp = as_sales_staff.get(path)
    assert resp.status_code == 403
    assert resp.json()["detail"] == "Forbidden"


@pytest.mark.parametrize("path", ["/", "/sales"])
def test_sales_staff_permitted(as_sales_staff, path):
    assert as_sales_staff.get(path).status_code == 200


def test_sales_staff_cannot_create_products(as_sales_staff):
    resp = as_sales_staff.post("/products", json={"name": "X", "sku": "X-1", "buy_price": 1, "sell_price": 2})
    assert resp.status_code == 403


def test_admin_denied_users_page(as_admin):
    assert as_admin.get("/users").status_code == 403
    assert as_admin.get("/analytics").status_code == 200


def test_role_switch_changes_navigation(client, users):
    login_as(client, Role.SUPER_ADMIN)
    assert len(client.get("/navigation").json()) == 6
    login_as(client, Role.SALES_STAFF)
    assert [i["href"] for i in client.get("/navigation").json()] == ["/", "/sales"]
