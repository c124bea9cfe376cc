"""Constants for the SMHI open data adapter.

Forecast API: https://opendata.smhi.se/apidocs/metfcst/
Warnings API: https://opendata.smhi.se/apidocs/warnings/

No authentication required.
"""

SMHI_FORECAST_URL = (
    "https://opendata-download-metfcst.smhi.se/api/category/pmp3g/version/2"
    "/geotype/point/lon/{longitude}/lat/{latitude}/data.json"
)
SMHI_WARNINGS_URL = "https://opendata-download-warnings.smhi.se/api/version/2/alerts.json"

SMHI_MIN_DELAY_SECONDS = 0.5

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
