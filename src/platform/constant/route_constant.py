API_PREFIX = '/api'

# Ticket endpoints
TICKET_BASE = f'{API_PREFIX}/ticket'
TICKET_GET = f'{TICKET_BASE}/{{ticket_id}}'
TICKET_CREATE = TICKET_BASE
TICKET_UPDATE = f'{TICKET_BASE}/{{ticket_id}}'
TICKET_DELETE = f'{TICKET_BASE}/{{ticket_id}}'
TICKET_BOOK = f'{TICKET_BASE}/{{ticket_id}}/book'

HEALTH = '/health'
