import re
import logging
from typing import List, Optional

from payguard.schemas import ContentFinding

logger = logging.getLogger(__name__)

# Ordered phrase catalogue; order is the order tags are reported in
PHISHING_PHRASES = (
    # Urgency / threats
    'urgent', 'immediate', 'expire', 'expires', 'suspend', 'suspended',
    'block', 'blocked', 'deactivate', 'verify now', 'act now', 'limited time',

    # Financial threats
    'account compromised', 'unauthorized transaction', 'security breach',
    'suspicious activity', 'fraudulent activity', 'card blocked',

    # Fake rewards / prizes
    'congratulations', 'winner', 'won', 'prize', 'lottery', 'jackpot',
    'lucky draw', 'reward', 'cashback', 'bonus', 'free money',

    # Impersonation
    'bank notification', 'government notice', 'tax refund', 'covid certificate',
    'vaccination', 'subsidy', 'scheme', 'benefit',

    # Social engineering
    'click here', 'download now', 'install app', 'update required',
    'confirm identity', 'provide details', 'share otp', 'enter pin',
)

URGENCY_TERMS = ('urgent', 'immediate', 'expire', 'suspend', 'block')
SENSITIVE_TERMS = ('otp', 'pin', 'password', 'card number', 'cvv', 'aadhar')

HIGH_VALUE_AMOUNT = 50000

# Points per hit
PHRASE_POINTS = 15
HIGH_VALUE_POINTS = 20
URGENCY_POINTS = 10
SENSITIVE_POINTS = 20


class ContentPatternAnalyzer:
    """
    Keyword / pattern scan of message text.

    Sub-scores are additive and uncapped; the risk scorer clamps the total.
    """

    def __init__(self):
        self.amount_pattern = re.compile(r'₹[\d,]+|rs\.?\s*[\d,]+|\$[\d,]+', re.IGNORECASE)
        self.amount_strip_pattern = re.compile(r'[₹$rs,.\s]', re.IGNORECASE)

    def analyze_content(self, text: str) -> ContentFinding:
        """Scan the whole message once and return score, tags and insights"""
        if not text:
            return ContentFinding()

        content = text.lower()
        score = 0
        threats: List[str] = []
        insights: List[str] = []

        # ===== 1. PHISHING PHRASES =====
        for phrase in PHISHING_PHRASES:
            if phrase in content:
                score += PHRASE_POINTS
                threats.append(f'Phishing keyword: "{phrase}"')

        # ===== 2. MONETARY AMOUNTS =====
        max_amount = self._max_amount(content)
        if max_amount is not None and max_amount > HIGH_VALUE_AMOUNT:
            score += HIGH_VALUE_POINTS
            threats.append('High-value transaction mentioned')
            insights.append(f'Large amount detected: ₹{max_amount:,}')

        # ===== 3. URGENCY =====
        urgency_count = sum(1 for term in URGENCY_TERMS if term in content)
        if urgency_count > 0:
            score += urgency_count * URGENCY_POINTS
            threats.append('Urgency-based manipulation')
            insights.append(f'{urgency_count} urgency indicators found')

        # ===== 4. SENSITIVE INFORMATION REQUESTS =====
        request_count = sum(1 for term in SENSITIVE_TERMS if term in content)
        if request_count > 0:
            score += request_count * SENSITIVE_POINTS
            threats.append('Personal information request')
            insights.append('Requests sensitive information')

        logger.debug(f"Content score={score} ({len(threats)} findings)")

        return ContentFinding(score=score, threat_tags=tuple(threats), insights=tuple(insights))

    def extract_amounts(self, content: str) -> List[int]:
        """
        Parse every currency-marked amount in the text

        Tokens that carry no digits once symbols and separators are
        removed (e.g. "rs,") are skipped.
        """
        amounts = []
        for token in self.amount_pattern.findall(content or ''):
            digits = self.amount_strip_pattern.sub('', token)
            if digits.isdigit():
                amounts.append(int(digits))
        return amounts

    def _max_amount(self, content: str) -> Optional[int]:
        amounts = self.extract_amounts(content)
        return max(amounts) if amounts else None
