"""Default tuning values and lookup tables used by the probers and the CLI."""

DEFAULT_CONCURRENCY = 10
DEFAULT_VERBOSE_LEVEL = 1

HTTP_TIMEOUT = 5.0
DNS_TIMEOUT = 3.2
WHOIS_TIMEOUT = 5.0

MAX_REDIRECTS = 10
CONNECTOR_LIMIT = 100

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/123 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

# HTTP codes that show a configured server answered for the site
ACTIVE_CODES = frozenset(
    [200, 201, 202, 203, 204, 205, 206]  # Successful responses
    + [300, 301, 302, 303, 304, 307, 308]  # Redirection messages
    + [401, 403, 405, 406, 407, 408, 409, 410]  # Client errors from a live server
    + [429]  # Too Many Requests (rate limited but up)
    + [500, 501, 502, 503, 504, 505]  # Server errors
)

# HTTP codes that say the resource or domain is gone
INACTIVE_CODES = frozenset([404, 410, 451])

WWW_PREFIX = "www."

WHOIS_SERVERS = {
    "com": "whois.verisign-grs.com",
    "net": "whois.verisign-grs.com",
    "org": "whois.pir.org",
    "info": "whois.nic.info",
    "biz": "whois.nic.biz",
    "io": "whois.nic.io",
    "co": "whois.nic.co",
    "me": "whois.nic.me",
    "tv": "whois.nic.tv",
    "cc": "ccwhois.verisign-grs.com",
    "xyz": "whois.nic.xyz",
    "online": "whois.nic.online",
    "site": "whois.nic.site",
    "top": "whois.nic.top",
    "app": "whois.nic.google",
    "dev": "whois.nic.google",
    "edu": "whois.educause.edu",
    "gov": "whois.dotgov.gov",
    "ru": "whois.tcinet.ru",
    "su": "whois.tcinet.ru",
    "xn--p1ai": "whois.tcinet.ru",
    "ua": "whois.ua",
    "by": "whois.cctld.by",
    "kz": "whois.nic.kz",
    "uk": "whois.nic.uk",
    "de": "whois.denic.de",
    "fr": "whois.nic.fr",
    "nl": "whois.domain-registry.nl",
    "be": "whois.dns.be",
    "eu": "whois.eu",
    "it": "whois.nic.it",
    "es": "whois.nic.es",
    "pl": "whois.dns.pl",
    "cz": "whois.nic.cz",
    "se": "whois.iis.se",
    "no": "whois.norid.no",
    "fi": "whois.fi",
    "ch": "whois.nic.ch",
    "at": "whois.nic.at",
    "us": "whois.nic.us",
    "ca": "whois.cira.ca",
    "au": "whois.auda.org.au",
    "jp": "whois.jprs.jp",
    "cn": "whois.cnnic.cn",
    "in": "whois.registry.in",
    "br": "whois.registro.br",
}

COMMON_SECOND_LEVEL_TLDS = {"co", "com", "org", "net", "gov", "ac", "edu", "mil"}
