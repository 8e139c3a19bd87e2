"""FleetView constants."""

from __future__ import annotations

# Network graph
ROOT_NODE_ID = 0
ROOT_NODE_LABEL = "Switch"
ROOT_NODE_COLOR = "#d5d53e"
HOST_UP_COLOR = "#4ed8a0"
HOST_DOWN_COLOR = "#dc4e58"

# Geo map
MAP_CENTER_LAT = 39.446376
MAP_CENTER_LNG = -101.777344
MAP_RADIUS_LIMIT_M = 100000
METERS_PER_DEGREE = 111300
COORDINATE_PRECISION = 5

# CSV export
CSV_DATE_HEADER = "date"
CSV_DEFAULT_NAME = "results"
TZ_ENV_VAR = "FLEETVIEW_TZ"
DEFAULT_TZ = "UTC"

# Table headers
SORTABLE_HEADER_CLASS = "sortable-header"
SORTING_ASC_CLASS = "sorting-ascending"
SORTING_DESC_CLASS = "sorting-descending"
EMPTY_STATE_TEXT = "No Hosts found"
