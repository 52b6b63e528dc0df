# API Route Constants

# Base API
API_BASE = '/api'

# Account routes
ACCOUNT_BASE = f'{API_BASE}/accounts'
ACCOUNT_REGISTER = ACCOUNT_BASE
ACCOUNT_ME = f'{ACCOUNT_BASE}/me'

# Session routes
SESSION_BASE = f'{API_BASE}/sessions'
SESSION_LOGIN = SESSION_BASE

# Flight routes
FLIGHT_BASE = f'{API_BASE}/flights'
FLIGHT_SEARCH = FLIGHT_BASE
FLIGHT_GET = f'{FLIGHT_BASE}/{{flight_id}}'

# Booking routes
BOOKING_BASE = f'{API_BASE}/bookings'
BOOKING_CREATE = BOOKING_BASE
BOOKING_LIST = BOOKING_BASE
BOOKING_BY_PNR = f'{BOOKING_BASE}/{{pnr}}'
BOOKING_CANCEL = f'{BOOKING_BASE}/{{booking_id}}'

# Admin routes
ADMIN_BASE = f'{API_BASE}/admin'
ADMIN_FLIGHTS = f'{ADMIN_BASE}/flights'
ADMIN_FLIGHT_STATUS = f'{ADMIN_FLIGHTS}/{{flight_id}}/status'
ADMIN_BOOKINGS = f'{ADMIN_BASE}/bookings'
ADMIN_STATS = f'{ADMIN_BASE}/stats'
