"""
Static domain reputation data.

Everything here is read-only lookup data loaded once at import. Analyzers
compile the pattern sources they need in their own constructors.
"""

# ============================================================================
# TRUSTED DOMAINS (Indian + global consumer brands, banks, government)
# ============================================================================
TRUSTED_DOMAINS = frozenset({
    # E-commerce
    'amazon.com', 'amazon.in', 'flipkart.com', 'myntra.com',

    # Payments / UPI
    'paytm.com', 'phonepe.com', 'googlepay.com', 'bhim.com',

    # Banks
    'sbi.co.in', 'hdfcbank.com', 'icicibank.com', 'axisbank.com',

    # Big tech & social
    'google.com', 'facebook.com', 'whatsapp.com', 'instagram.com',
    'youtube.com', 'microsoft.com', 'apple.com', 'netflix.com',

    # Government
    'gov.in', 'uidai.gov.in', 'mygov.in', 'digitalindia.gov.in',
})

# ============================================================================
# URL SHORTENING SERVICES
# ============================================================================
SHORTENER_DOMAINS = frozenset({
    'bit.ly', 'tinyurl.com', 't.co', 'ow.ly', 'short.link',
    'cutt.ly', 'rebrand.ly', 'tiny.cc', 'is.gd', 'v.gd',
})

# Structural shapes of very short (likely shortener) domains
SHORT_DOMAIN_PATTERNS = (
    r'^[a-z]{1,3}\.[a-z]{2,3}$',                  # t.co, ow.ly
    r'^[a-z0-9]{1,6}\.(com|net|org|ly|me|co)$',   # short branded domains
)

# ============================================================================
# SUSPICIOUS DOMAIN STRUCTURE (matched against the bare domain)
# ============================================================================
SUSPICIOUS_DOMAIN_PATTERNS = (
    # Typosquatting
    r'amazon[0-9]', r'paytm[0-9]', r'google[0-9]', r'facebook[0-9]',
    r'bank.*secure', r'.*-secure', r'secure-.*', r'verify-.*',
    r'.*-verification', r'.*-update', r'.*-login',

    # Scam vocabulary
    r'fake.*', r'scam.*', r'phish.*', r'malware.*',
    r'free.*money', r'easy.*cash', r'instant.*loan',

    # Banking terms on throwaway TLDs
    r'bank.*\.(tk|ml|ga|cf)', r'pay.*\.(tk|ml|ga|cf)',

    # Random-looking runs
    r'[a-z]{20,}',
    r'[0-9]{8,}',
)

# Keyword groups -> threat tag, checked in order on malicious domains
DOMAIN_THREAT_KEYWORDS = (
    (r'bank|pay|financial|secure', 'Potential financial phishing'),
    (r'amazon|flipkart|shopping', 'E-commerce impersonation'),
    (r'gov|government|tax|covid', 'Government impersonation'),
)

# ============================================================================
# SUSPICIOUS URL STRUCTURE (matched against the full URL)
# ============================================================================
SUSPICIOUS_URL_PATTERNS = (
    r'[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}',  # IPv4 literal
    r'[a-z0-9]{20,}',
    r'phish', r'scam', r'fake',
    r'\.(tk|ml|ga|cf|pw)',
    r'%[0-9a-fA-F]{2}',                                 # percent-encoding
)
