# =============================================================================
# World Tour Dashboard - configuration
# =============================================================================
from pathlib import Path

# -----------------------------
# DATASET CONFIG
# -----------------------------
BASE_DIR = Path(__file__).resolve().parent
DATA_PATH = BASE_DIR / "Datasets" / "data.json"
ALIAS_FILENAME = "aliases.json"      # optional, looked up beside the dataset

# World countries GeoJSON (each feature exposes properties.name)
GEOJSON_URL = "https://raw.githubusercontent.com/johan/world.geo.json/master/countries.geo.json"
GEOJSON_CACHE = BASE_DIR / "Datasets" / "countries.geo.json"
FETCH_TIMEOUT = 60

UNKNOWN_CONTINENT = "Unknown"
CONTINENT_ORDER = [
    "Africa", "Antarctica", "Asia", "Europe",
    "North America", "South America", "Oceania", UNKNOWN_CONTINENT,
]

# -----------------------------
# THEME CONSTANTS
# -----------------------------
BG          = "#0a0b0d"
PANEL       = "#12141a"
BORDER      = "rgba(255,255,255,0.06)"
TEXT        = "#f4f4f5"
TEXT_DIM    = "#71717a"
TEXT_BRIGHT = "#fafafa"
ACCENT      = "#10b981"
ACCENT_ALT  = "#3b82f6"
ACCENT_WARM = "#f59e0b"
FONT_FAMILY = "'Inter', system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif"
CARD_SHADOW = "0 4px 24px rgba(0,0,0,0.4)"

# Map styling: visited vs unvisited fill, constant border
MAP_BORDER        = "#1f2937"
MAP_BORDER_WEIGHT = 1
MAP_HOVER_WEIGHT  = 2
VISITED_FILL      = "#34d399"
VISITED_OPACITY   = 0.65
UNVISITED_FILL    = "#0b1120"
UNVISITED_OPACITY = 0.25

EMPTY_DATE = "–"

# -----------------------------
# STYLES
# -----------------------------
NAV_STYLE = {
    "height": "70px", "display": "flex", "alignItems": "center",
    "justifyContent": "center", "padding": "0 32px",
    "background": "linear-gradient(180deg, #12141a 0%, #0d0e12 100%)",
    "borderBottom": f"1px solid {BORDER}",
    "position": "sticky", "top": 0, "zIndex": 100,
}
CARD_STYLE = {
    "background": "linear-gradient(180deg, #15171c 0%, #12141a 100%)",
    "border": f"1px solid {BORDER}",
    "borderRadius": "16px",
    "padding": "20px 24px",
    "boxShadow": CARD_SHADOW,
}
PANEL_STYLE = {
    "background": PANEL, "border": f"1px solid {BORDER}", "borderRadius": "14px",
    "padding": "18px", "marginBottom": "20px", "boxShadow": "0 6px 20px rgba(0,0,0,0.25)",
}
LABEL_STYLE = {
    "fontSize": "11px", "color": TEXT_DIM, "textTransform": "uppercase",
    "letterSpacing": "0.5px", "marginBottom": "8px", "display": "block", "fontWeight": 600,
}
BTN_STYLE = {
    "background": "rgba(16,185,129,0.1)",
    "border": "1px solid rgba(16,185,129,0.3)",
    "borderRadius": "8px",
    "cursor": "pointer",
    "color": ACCENT,
    "fontSize": "13px",
    "padding": "6px 12px",
}
INPUT_STYLE = {
    "width": "100%", "background": "#1b1d22", "color": TEXT,
    "border": f"1px solid {BORDER}", "borderRadius": "8px", "padding": "8px 10px",
}
MUTED_STYLE = {"color": TEXT_DIM, "fontSize": "12px"}
