"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ON_SITE_CODE = "OS"
ALL_CATEGORIES = "all"

DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"

DEFAULT_SESSION_DAYS = 1
REPORT_SHEET_NAME = "Attendance Matrix"
REPORT_TOTAL_LABEL = "Total On Site"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
