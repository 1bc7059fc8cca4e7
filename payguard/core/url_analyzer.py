import re
import logging
from typing import List

from payguard.core.reputation import (
    TRUSTED_DOMAINS,
    SHORTENER_DOMAINS,
    SHORT_DOMAIN_PATTERNS,
    SUSPICIOUS_DOMAIN_PATTERNS,
    DOMAIN_THREAT_KEYWORDS,
    SUSPICIOUS_URL_PATTERNS,
)
from payguard.schemas import UrlFinding, Reputation

logger = logging.getLogger(__name__)


class URLAnalyzer:
    """
    Offline URL reputation analyzer

    Classifies a single URL using only local pattern matching:
    - Domain extraction (scheme / www / path stripped)
    - Shortening-service detection
    - Reputation tier (trusted / suspicious / malicious / unknown)
    - Protocol and URL-structure red flags
    """

    def __init__(self):
        self.scheme_pattern = re.compile(r'^https?://', re.IGNORECASE)
        self.www_pattern = re.compile(r'^www\.')
        self.path_split_pattern = re.compile(r'[/?]')

        self.short_domain_patterns = [re.compile(p) for p in SHORT_DOMAIN_PATTERNS]
        self.suspicious_domain_patterns = [re.compile(p) for p in SUSPICIOUS_DOMAIN_PATTERNS]
        self.suspicious_url_patterns = [re.compile(p) for p in SUSPICIOUS_URL_PATTERNS]
        self.domain_threat_keywords = [
            (re.compile(pattern), tag) for pattern, tag in DOMAIN_THREAT_KEYWORDS
        ]

    def analyze_url(self, url: str) -> UrlFinding:
        """
        Analyze one URL and return its finding

        Args:
            url: URL as it appeared in the message (scheme optional)

        Returns:
            UrlFinding. Never raises; broken input degrades to 'unknown'.
        """
        domain = self.extract_domain(url)
        try:
            return self._classify(url, domain)
        except Exception as e:
            logger.warning(f"URL analysis failed for {url!r}: {e}")
            return UrlFinding(domain=domain)

    def extract_domain(self, url: str) -> str:
        """Strip scheme, leading www. and path/query; lower-cased"""
        if not url:
            return ''
        try:
            domain = self.scheme_pattern.sub('', url.lower(), count=1)
            domain = self.www_pattern.sub('', domain, count=1)
            return self.path_split_pattern.split(domain, maxsplit=1)[0]
        except Exception:
            return str(url).lower()

    def is_likely_shortened(self, url: str) -> bool:
        domain = self.extract_domain(url)
        return any(p.search(domain) for p in self.short_domain_patterns)

    def _classify(self, url: str, domain: str) -> UrlFinding:
        lowered = url.lower()
        threat_tags: List[str] = []
        is_dangerous = False
        reputation = Reputation.UNKNOWN

        is_shortened = domain in SHORTENER_DOMAINS or self.is_likely_shortened(url)

        # Reputation tiers, first match wins
        if domain in TRUSTED_DOMAINS:
            reputation = Reputation.TRUSTED
        elif domain in SHORTENER_DOMAINS:
            reputation = Reputation.SUSPICIOUS
            threat_tags.append('Shortened URL service')
        elif self._is_suspicious_domain(domain):
            reputation = Reputation.MALICIOUS
            is_dangerous = True
            threat_tags.extend(self._get_domain_threats(domain))

        if lowered.startswith('http://'):
            threat_tags.append('Insecure HTTP connection')

        if self._has_suspicious_url_pattern(url):
            is_dangerous = True
            threat_tags.append('Suspicious URL structure')

        logger.debug(f"URL {domain}: reputation={reputation.value} dangerous={is_dangerous}")

        return UrlFinding(
            domain=domain,
            is_shortened=is_shortened,
            is_dangerous=is_dangerous,
            reputation=reputation,
            threat_tags=tuple(threat_tags),
        )

    def _is_suspicious_domain(self, domain: str) -> bool:
        return any(p.search(domain) for p in self.suspicious_domain_patterns)

    def _get_domain_threats(self, domain: str) -> List[str]:
        """Tag a malicious domain by the brand/sector it seems to imitate"""
        threats = [tag for pattern, tag in self.domain_threat_keywords if pattern.search(domain)]
        if self.is_likely_shortened(domain):
            threats.append('URL shortening service')
        return threats

    def _has_suspicious_url_pattern(self, url: str) -> bool:
        return any(p.search(url) for p in self.suspicious_url_patterns)
