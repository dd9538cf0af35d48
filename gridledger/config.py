DELIMITER = ':'
INDEX_SEPARATOR = '.'

TYPE_KEY = '__type__'

# Resource limits
CALL_DEPTH_LIMIT = 64

PRIVATE_METHOD_PREFIX = '__'
EXPORT_ATTRIBUTE = '__export__'
CONSTRUCT_ATTRIBUTE = '__construct__'

MAX_KEY_SIZE = 1024

CURRENCY_CONTRACT = 'currency'
BALANCES_HASH = 'balances'

# Colors are packed 0xRRGGBB integers
MAX_COLOR = 0xFFFFFF
DEFAULT_COLOR = 0

# Deployment defaults for the grid contract
GRID_SIZE = 1000
DEFAULT_PRICE = 2 * 10 ** 15  # 0.002 ether in wei
FEE_RATIO = 40
INCREMENT_RATE = 25

MARKUP_POLICY = 'markup'
CLAMP_POLICY = 'clamp'
