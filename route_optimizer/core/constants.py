# --- Order statuses ---
# Stored verbatim in the database and on the wire.
ORDER_STATUS_PREPARING = 'Preparing'
ORDER_STATUS_ASSIGNED = 'Assigned'
ORDER_STATUS_PENDING = 'Pending'
ORDER_STATUS_DELIVERED = 'Delivered'

ORDER_STATUS_CHOICES = [
    (ORDER_STATUS_PREPARING, 'Preparing'),
    (ORDER_STATUS_ASSIGNED, 'Assigned'),
    (ORDER_STATUS_PENDING, 'Pending'),
    (ORDER_STATUS_DELIVERED, 'Delivered'),
]

# --- Graph defaults ---
DEFAULT_TRAFFIC_FACTOR = 1.0

# --- Dispatch scoring ---
# Lower score wins.
MAX_ORDERS_PER_DRIVER = 3      # Hard cap, drivers at the cap are never scored
LOAD_FACTOR_PER_ORDER = 2.0    # Penalty per order already on the roster
SPEED_BONUS_NUMERATOR = 10.0   # speed_bonus = SPEED_BONUS_NUMERATOR / speed
BACKTRACK_RATIO = 1.5          # Appended route longer than this x current route is rejected
DETOUR_DIVISOR = 2.0           # Detour is split over the two new stops

# --- Assignment outcome reasons ---
REASON_ASSIGNED = 'assigned'
REASON_NO_DRIVERS = 'no_drivers'
REASON_AT_CAPACITY = 'at_capacity'
REASON_BACKTRACKING = 'backtracking'

# --- Cache keys ---
GEO_SNAPSHOT_CACHE_KEY = 'route_optimizer:geo_snapshot'
DEFAULT_GEO_SNAPSHOT_CACHE_TIMEOUT = 300  # seconds
