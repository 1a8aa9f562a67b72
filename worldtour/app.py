# =============================================================================
# World Tour Dashboard
# =============================================================================
"""
Country-by-country video log on a map, a checklist, a results list and a
timeline.

FEATURES:
- Stats cards: countries, videos, first and latest upload (whole dataset)
- Continent summary
- Country checklist with search, Select all / Clear
- Choropleth map: selected countries highlighted, click to toggle
- Results per country and a cross-country timeline for the selection

LINKED VIEW INTERACTIONS:
- Tick a country / click it on the map -> results, timeline and map update together
- Search only filters the checklist; it never changes the selection

USAGE:
    python -m worldtour
    Open browser to http://127.0.0.1:8050/
"""
# =============================================================================

from pathlib import Path

from dash import Dash, dcc, html, Input, Output, State, no_update, ctx

from .aliases import AliasResolver, load_alias_file
from .config import (ACCENT, ALIAS_FILENAME, BG, BORDER, BTN_STYLE, DATA_PATH, FONT_FAMILY, GEOJSON_CACHE,
                     GEOJSON_URL, INPUT_STYLE, LABEL_STYLE, NAV_STYLE, PANEL_STYLE, TEXT, TEXT_BRIGHT, TEXT_DIM)
from .data import load_dataset
from .fragments import checklist_props, render_continent_summary, render_results, render_stats, render_timeline
from .mapview import (GeoLoadError, build_map_figure, click_target, feature_names, handle_map_click,
                      hover_patch, load_geojson)
from .selection import SelectionStore
from .views import continent_summary, country_checklist, filtered_results, filtered_timeline, global_stats

# -----------------------------
# INTERACTIONS -> SELECTION
# -----------------------------
def dispatch(trigger, store, resolver, dataset, checked=None, click=None, search=""):
    """Apply the one mutation a user action stands for. Returns True if the selection changed."""
    if trigger == "country-list":
        visible = [item.name for item in country_checklist(dataset, store, search)]
        return store.sync_visible(visible, checked)
    if trigger == "map":
        return handle_map_click(store, resolver, click_target(click))
    if trigger == "select-all-btn":
        return store.select_all()
    if trigger == "clear-btn":
        return store.clear()
    # search text only re-filters the checklist
    return False


def handle_interaction(trigger, selected, dataset, resolver, checked=None, click=None, search=""):
    """Outputs of the selection callback: (store data, checklist options, checklist value, map clickData)."""
    store = SelectionStore(dataset.names, selected)
    changed = dispatch(trigger, store, resolver, dataset, checked=checked, click=click, search=search)
    options, value = checklist_props(country_checklist(dataset, store, search))
    # untouched store -> no re-render of results/timeline/map
    data = store.to_data() if changed else no_update
    # a handled click is cleared so an identical later click still fires
    click_reset = None if trigger == "map" else no_update
    return data, options, value, click_reset


# -----------------------------
# LAYOUT
# -----------------------------
external_css = ['https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700;800&display=swap']

INDEX_STRING = """
<!DOCTYPE html>
<html>
<head>
    {%metas%}
    <title>{%title%}</title>
    {%css%}
    <style>
    * { box-sizing: border-box; }
    body { margin: 0; padding: 0; background: #0a0b0d; }
    a:hover { text-decoration: underline !important; }
    #country-list label { display: flex; align-items: center; gap: 8px; padding: 4px 0; cursor: pointer; }
    ::-webkit-scrollbar { width: 10px; height: 10px; }
    ::-webkit-scrollbar-track { background: #0a0b0d; }
    ::-webkit-scrollbar-thumb { background: rgba(16, 185, 129, 0.4); border-radius: 6px; }
    </style>
    {%favicon%}
</head>
<body>
    {%app_entry%}
    <footer>
        {%config%}
        {%scripts%}
        {%renderer%}
    </footer>
</body>
</html>
"""


def _panel(title, *children, **kwargs):
    return html.Div(style=PANEL_STYLE, children=[
        html.H3(title, style={"margin": "0 0 12px 0", "fontSize": "16px", "opacity": 0.85}),
        *children,
    ], **kwargs)


def build_layout(dataset, store):
    options, value = checklist_props(country_checklist(dataset, store, ""))
    scroll = {"maxHeight": "60vh", "overflowY": "auto"}

    return html.Div(style={"background": BG, "color": TEXT, "minHeight": "100vh", "fontFamily": FONT_FAMILY}, children=[
        dcc.Store(id="selected-countries", data=store.to_data()),

        html.Div(style=NAV_STYLE, children=[
            html.Div(style={"textAlign": "center"}, children=[
                html.Div("World Tour", style={"fontWeight": 700, "fontSize": "28px", "color": TEXT_BRIGHT}),
                html.Div("Every country, every video", style={"fontSize": "13px", "color": TEXT_DIM}),
            ]),
        ]),

        # static: computed once at load
        html.Div(id="kpi-cards", children=render_stats(global_stats(dataset)), style={
            "display": "grid", "gridTemplateColumns": "repeat(4, 1fr)", "gap": "20px", "padding": "24px 32px",
        }),

        html.Div(style={"display": "grid", "gridTemplateColumns": "320px 1fr", "gap": "20px", "padding": "0 32px 32px"}, children=[
            # Sidebar
            html.Div(children=[
                _panel("Continents", html.Div(id="continent-summary",
                                              children=render_continent_summary(continent_summary(dataset)))),
                _panel(
                    "Countries",
                    html.Label("Search", htmlFor="country-search", style=LABEL_STYLE),
                    dcc.Input(id="country-search", type="text", value="", placeholder="Search countries...",
                              style=INPUT_STYLE),
                    html.Div(style={"display": "flex", "gap": "8px", "margin": "12px 0"}, children=[
                        html.Button("Select all", id="select-all-btn", n_clicks=0, style=BTN_STYLE),
                        html.Button("Clear", id="clear-btn", n_clicks=0, style=BTN_STYLE),
                    ]),
                    dcc.Checklist(id="country-list", options=options, value=value,
                                  inputStyle={"accentColor": ACCENT}, style={**scroll, "fontSize": "13px"}),
                ),
            ]),

            # Main
            html.Div(children=[
                html.Div(style=PANEL_STYLE, children=[
                    dcc.Graph(id="map", style={"height": "55vh"}, clear_on_unhover=True,
                              config={"displayModeBar": False}),
                ]),
                html.Div(style={"display": "grid", "gridTemplateColumns": "1fr 1fr", "gap": "20px"}, children=[
                    _panel("Videos by country", html.Div(id="results", style=scroll)),
                    _panel("Timeline", html.Div(id="timeline", style=scroll)),
                ]),
            ]),
        ]),

        html.Div(f"Country boundaries: {GEOJSON_URL}", style={
            "color": TEXT_DIM, "fontSize": "11px", "padding": "0 32px 24px", "borderTop": f"1px solid {BORDER}",
        }),
    ])


# -----------------------------
# APP
# -----------------------------
def create_app(data_source=DATA_PATH, geojson_source=GEOJSON_URL, alias_source=None, geojson_cache=GEOJSON_CACHE):
    # dataset failures propagate: nothing can be shown without it
    dataset = load_dataset(data_source)

    if alias_source is None and not str(data_source).startswith(("http://", "https://")):
        alias_source = Path(data_source).parent / ALIAS_FILENAME
    extra = load_alias_file(alias_source) if alias_source else {}
    resolver = AliasResolver(dataset.names, extra=extra)

    try:
        geojson = load_geojson(geojson_source, geojson_cache)
        names = feature_names(geojson)
        print(f"Loaded {len(names)} boundary features")
    except GeoLoadError as e:
        print(f"[WARN] {e} Map disabled.")
        geojson, names = None, []

    app = Dash(__name__, external_stylesheets=external_css)
    app.title = "World Tour Dashboard"
    app.index_string = INDEX_STRING
    app.layout = build_layout(dataset, SelectionStore(dataset.names))

    # --------------------
    # SELECTION: checklist, map click, bulk buttons, search
    # --------------------
    @app.callback(
        Output("selected-countries", "data"),
        Output("country-list", "options"),
        Output("country-list", "value"),
        Output("map", "clickData"),
        Input("country-list", "value"),
        Input("map", "clickData"),
        Input("select-all-btn", "n_clicks"),
        Input("clear-btn", "n_clicks"),
        Input("country-search", "value"),
        State("selected-countries", "data"),
        prevent_initial_call=True
    )
    def on_interaction(checked, click, _select_all, _clear, search, selected):
        return handle_interaction(ctx.triggered_id, selected, dataset, resolver,
                                  checked=checked, click=click, search=search)

    # --------------------
    # RENDER: results + timeline + map in one update
    # --------------------
    @app.callback(
        Output("results", "children"),
        Output("timeline", "children"),
        Output("map", "figure"),
        Input("selected-countries", "data"),
    )
    def render_all(selected):
        store = SelectionStore(dataset.names, selected)
        return (
            render_results(filtered_results(dataset, store)),
            render_timeline(filtered_timeline(dataset, store)),
            build_map_figure(geojson, resolver, store),
        )

    # --------------------
    # HOVER: border emphasis only
    # --------------------
    @app.callback(
        Output("map", "figure", allow_duplicate=True),
        Input("map", "hoverData"),
        prevent_initial_call=True
    )
    def emphasize_hover(hover):
        return hover_patch(names, hover)

    return app
