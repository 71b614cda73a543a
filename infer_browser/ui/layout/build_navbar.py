from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from infer_browser.config.model import GlobalConfig


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    links = [
        dbc.NavItem(dbc.NavLink(link.label, href=link.href, className="ib-nav-item"))
        for link in global_config.nav_links
    ]

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.Div(global_config.ui_title, className="fw-bold"),
                        html.Small(global_config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                dbc.Nav(links, className="ms-auto gap-2", navbar=True),
            ],
        ),
        dark=False,
        className="ib-navbar",
    )
