"""
Constants and configuration values for the org chart workflow.
"""

# Column aliases, checked in order (first non-empty wins)
ID_FIELDS = ('EMPLOYEENUMBER', 'EMPLOYEE ID')
MANAGER_FIELDS = ('SUPERVISORPARTYID', 'MANAGER ID', 'SUPERVISOR ID')
NAME_FIELDS = ('FIRSTNAME', 'NAME', 'FULL NAME')

FIELD_ALIASES = {
    'id': ID_FIELDS,
    'manager_id': MANAGER_FIELDS,
    'name': NAME_FIELDS,
}

UNKNOWN_NAME = 'Unknown'

# Card geometry used by the layout (pixels)
CARD_WIDTH = 260
CARD_HEIGHT = 100
VERTICAL_SPACING = 140
HORIZONTAL_SPACING = 80

# Fit-to-screen parameters
FIT_PADDING = 100
FIT_SCALE_RANGE = (0.2, 1.0)
FIT_VERTICAL_BIAS = 50
MIN_EXTENT = 1.0

# Absolute bounds for interactive zoom
ZOOM_SCALE_RANGE = (0.1, 2.0)

# Relative zoom button multipliers
ZOOM_IN_FACTOR = 1.2
ZOOM_OUT_FACTOR = 0.8
