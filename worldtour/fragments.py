# =============================================================================
# View fragments: render(model) -> Dash components
# =============================================================================
from dash import html

from .config import ACCENT, ACCENT_ALT, ACCENT_WARM, BORDER, CARD_STYLE, MUTED_STYLE, TEXT, TEXT_BRIGHT, TEXT_DIM
from .data import fmt_date

LINK_STYLE = {"color": ACCENT, "textDecoration": "none", "fontWeight": 500}
ROW_STYLE = {"display": "flex", "justifyContent": "space-between", "padding": "6px 0",
             "borderBottom": f"1px solid {BORDER}", "fontSize": "13px"}


def _muted(text):
    return html.P(text, className="muted", style=MUTED_STYLE)


def _video_link(title, url):
    return html.A(title, href=url, target="_blank", rel="noopener", style=LINK_STYLE)


def plural(n, word):
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


# -----------------------------
# STATS + CONTINENTS
# -----------------------------
def render_stats(stats):
    def kpi_card(title, value, color, card_id):
        return html.Div(className="panel-hover", style=CARD_STYLE, children=[
            html.Div(title, style={"color": TEXT_DIM, "fontSize": "11px", "textTransform": "uppercase",
                                   "letterSpacing": "0.5px", "marginBottom": "8px", "fontWeight": 600}),
            html.Div(str(value), id=card_id,
                     style={"color": color, "fontSize": "28px", "fontWeight": 700, "letterSpacing": "-1px"}),
        ])

    return [
        kpi_card("Countries", stats.countries, TEXT_BRIGHT, "stat-countries"),
        kpi_card("Videos", stats.videos, ACCENT, "stat-videos"),
        kpi_card("First upload", fmt_date(stats.first), ACCENT_ALT, "stat-first"),
        kpi_card("Latest upload", fmt_date(stats.last), ACCENT_WARM, "stat-latest"),
    ]


def render_continent_summary(summary):
    return [
        html.Div(className="row", style=ROW_STYLE, children=[
            html.Div(continent),
            html.Div(html.B(count)),
        ])
        for continent, count in summary
    ]


# -----------------------------
# CHECKLIST
# -----------------------------
def checklist_props(items):
    """Options and value for the country dcc.Checklist."""
    options = [
        {
            "label": html.Span(className="country-item", style={"display": "inline-flex", "gap": "8px"}, children=[
                html.Span(item.name),
                html.Span(item.count, className="country-count", style={"color": TEXT_DIM}),
            ]),
            "value": item.name,
        }
        for item in items
    ]
    return options, [item.name for item in items if item.checked]


# -----------------------------
# RESULTS + TIMELINE
# -----------------------------
def render_results(records):
    if not records:
        return _muted("No countries selected.")

    blocks = []
    for rec in records:
        vids = [
            html.Div(className="video", style={"marginBottom": "8px"}, children=[
                _video_link(v.title, v.url),
                html.Div(fmt_date(v.published_at), className="muted", style=MUTED_STYLE),
            ])
            for v in rec.videos
        ]
        blocks.append(html.Div(className="country-block", style={"marginBottom": "16px"}, children=[
            html.H3([rec.country, " ", html.Small(plural(len(rec.videos), "video"), style={"color": TEXT_DIM})],
                    style={"margin": "0 0 8px 0", "fontSize": "16px", "color": TEXT}),
            *vids,
        ]))
    return blocks


def render_timeline(timeline):
    if timeline.empty:
        return _muted("No timeline items.")

    return [
        html.Div(className="tl-item", style={"borderLeft": f"2px solid {ACCENT}", "padding": "4px 0 10px 12px"}, children=[
            html.Div(fmt_date(row.published_at), className="date", style=MUTED_STYLE),
            html.Div(html.B(row.country)),
            _video_link(row.title, row.url),
        ])
        for row in timeline.itertuples(index=False)
    ]
